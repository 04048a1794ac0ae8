"""
Store interfaces for users, tasks and attendance records.

Services only talk to these contracts, so the SQLAlchemy backend used in
production can be swapped for the in-memory one in tests. Implementations
return ORM model instances (attached or transient) in both cases.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol

from app.models.attendance import Attendance
from app.models.task import Task
from app.models.user import User


class UserRepository(Protocol):
    def get_by_id(self, user_id: int) -> Optional[User]:
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def create(self, *, name: str, email: str, hashed_password: str, role: str) -> User:
        """Persist a new user. Raises ConflictError if the email is taken."""
        ...


class TaskRepository(Protocol):
    def create(
        self,
        *,
        user_id: int,
        title: str,
        description: Optional[str],
        link: Optional[str],
        status: str,
    ) -> Task:
        ...

    def list_for_user(self, user_id: int, status: Optional[str] = None) -> List[Task]:
        """Owner's tasks, newest first."""
        ...

    def get_for_user(self, task_id: int, user_id: int) -> Optional[Task]:
        ...

    def update_for_user(self, task_id: int, user_id: int, changes: Dict[str, Any]) -> Optional[Task]:
        """Apply ``changes`` to the owner's task; None when no such task."""
        ...

    def delete_for_user(self, task_id: int, user_id: int) -> bool:
        ...

    def delete_for_user_by_status(self, user_id: int, status: str) -> int:
        ...


class AttendanceRepository(Protocol):
    def get_for_day(self, user_id: int, day: str) -> Optional[Attendance]:
        ...

    def create(self, *, user_id: int, day: str, check_in: datetime) -> Attendance:
        """Persist a check-in. Raises ConflictError on a duplicate (user, day)."""
        ...

    def save_check_out(self, record: Attendance, *, check_out: datetime, worked_hours: float) -> Attendance:
        ...

    def list_for_user(self, user_id: int, skip: int = 0, limit: Optional[int] = 100) -> List[Attendance]:
        """Owner's records, most recent day first. ``limit=None`` returns all."""
        ...
