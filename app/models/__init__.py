from app.models.user import User, UserRole
from app.models.task import Task, TaskStatus, TASK_STATUSES
from app.models.attendance import Attendance

__all__ = [
    "User",
    "UserRole",
    "Task",
    "TaskStatus",
    "TASK_STATUSES",
    "Attendance",
]
