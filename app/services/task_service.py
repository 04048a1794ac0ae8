import logging
from typing import Any, Dict, List, Optional
from app.core.exceptions import NotFoundError, ValidationError
from app.models.task import Task, TaskStatus, TASK_STATUSES
from app.repositories.base import TaskRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "description", "link", "status")


def _clean_text(value: Any) -> Optional[str]:
    return value.strip() if isinstance(value, str) else None


def _valid_title(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


class TaskService:
    """
    Owner-scoped task operations.

    Every lookup filters on (task id, owner id): a task owned by somebody
    else is reported exactly like a missing one.

    Status handling is deliberately asymmetric: ``create`` falls back to
    ``pending`` for an unknown status while ``update`` and ``update_status``
    reject it.
    """

    def __init__(self, tasks: TaskRepository):
        self.tasks = tasks

    def create(
        self,
        user_id: int,
        title: Any,
        description: Any = None,
        status: Any = None,
        link: Any = None,
    ) -> Task:
        if not _valid_title(title):
            raise ValidationError("Title is required")

        normalized_status = status if status in TASK_STATUSES else TaskStatus.PENDING.value

        task = self.tasks.create(
            user_id=user_id,
            title=title.strip(),
            description=_clean_text(description),
            link=_clean_text(link),
            status=normalized_status,
        )
        logger.debug(f"Task {task.id} created for user {user_id}")
        return task

    def list(self, user_id: int, status: Optional[str] = None) -> List[Task]:
        # Unknown status filters are ignored rather than rejected
        if status not in TASK_STATUSES:
            status = None
        return self.tasks.list_for_user(user_id, status=status)

    def get(self, user_id: int, task_id: int) -> Task:
        task = self.tasks.get_for_user(task_id, user_id)
        if not task:
            raise NotFoundError("Task not found")
        return task

    def update(self, user_id: int, task_id: int, data: Dict[str, Any]) -> Task:
        """Apply any subset of title/description/link/status."""
        changes: Dict[str, Any] = {}

        if "title" in data:
            if not _valid_title(data["title"]):
                raise ValidationError("Title is required and must be a non-empty string")
            changes["title"] = data["title"].strip()

        if "description" in data:
            changes["description"] = _clean_text(data["description"])

        if "link" in data:
            changes["link"] = _clean_text(data["link"])

        if "status" in data:
            if data["status"] not in TASK_STATUSES:
                raise ValidationError("Invalid status")
            changes["status"] = data["status"]

        task = self.tasks.update_for_user(task_id, user_id, changes)
        if not task:
            raise NotFoundError("Task not found")
        return task

    def update_status(self, user_id: int, task_id: int, status: Any) -> Task:
        if status not in TASK_STATUSES:
            raise ValidationError("Invalid status")

        task = self.tasks.update_for_user(task_id, user_id, {"status": status})
        if not task:
            raise NotFoundError("Task not found")
        return task

    def delete(self, user_id: int, task_id: int) -> None:
        if not self.tasks.delete_for_user(task_id, user_id):
            raise NotFoundError("Task not found")
        logger.debug(f"Task {task_id} deleted by user {user_id}")

    def history(self, user_id: int) -> List[Task]:
        """Completed tasks, newest first."""
        return self.tasks.list_for_user(user_id, status=TaskStatus.COMPLETED.value)

    def clear_history(self, user_id: int) -> int:
        deleted = self.tasks.delete_for_user_by_status(user_id, TaskStatus.COMPLETED.value)
        logger.info(f"Cleared {deleted} completed task(s) for user {user_id}")
        return deleted
