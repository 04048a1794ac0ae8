from fastapi import APIRouter, Depends, status
from typing import List, Optional
from app.schemas.task import (
    TaskCreate, TaskUpdate, TaskStatusUpdate, TaskResponse, TaskHistoryCleared
)
from app.schemas.user import MessageResponse
from app.api.deps import get_current_user_id, get_task_service
from app.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    status: Optional[str] = None,
    user_id: int = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service)
):
    """List own tasks, newest first, optionally filtered by status."""
    return task_service.list(user_id, status=status)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    user_id: int = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service)
):
    """Create a new task."""
    return task_service.create(
        user_id,
        title=task_data.title,
        description=task_data.description,
        status=task_data.status,
        link=task_data.link
    )


@router.get("/history", response_model=List[TaskResponse])
async def get_task_history(
    user_id: int = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service)
):
    """List own completed tasks."""
    return task_service.history(user_id)


@router.delete("/history", response_model=TaskHistoryCleared)
async def clear_task_history(
    user_id: int = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service)
):
    """Delete all own completed tasks."""
    deleted = task_service.clear_history(user_id)
    return {"message": "History cleared", "deleted": deleted}


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    user_id: int = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service)
):
    """Get task by ID."""
    return task_service.get(user_id, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    task_data: TaskUpdate,
    user_id: int = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service)
):
    """Update any subset of title, description, link and status."""
    update_data = task_data.model_dump(exclude_unset=True)
    return task_service.update(user_id, task_id, update_data)


@router.patch("/{task_id}/status", response_model=TaskResponse)
async def update_task_status(
    task_id: int,
    status_data: TaskStatusUpdate,
    user_id: int = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service)
):
    """Move a task to another status."""
    return task_service.update_status(user_id, task_id, status_data.status)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: int,
    user_id: int = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service)
):
    """Delete task."""
    task_service.delete(user_id, task_id)
    return {"message": "Task deleted successfully"}
