from pydantic import BaseModel
from typing import Any, Optional
from datetime import datetime


class TaskCreate(BaseModel):
    # Raw JSON values; the task service trims text, nulls non-string
    # description/link and maps an unknown status to pending
    title: Any = None
    description: Any = None
    status: Any = None
    link: Any = None


class TaskUpdate(BaseModel):
    title: Any = None
    description: Any = None
    status: Any = None
    link: Any = None


class TaskStatusUpdate(BaseModel):
    status: Any = None


class TaskResponse(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    link: Optional[str] = None
    status: str
    created_at: datetime

    class Config:
        from_attributes = True


class TaskHistoryCleared(BaseModel):
    message: str
    deleted: int
