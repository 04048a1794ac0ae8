"""
In-memory stores: plain ``id -> record`` dictionaries behind the same
interfaces as the SQLAlchemy repositories. Used by the service tests and
handy for running the API without a database.
"""
from datetime import datetime
from itertools import count
from threading import RLock
from typing import Any, Dict, List, Optional
from app.core.exceptions import ConflictError
from app.models.attendance import Attendance
from app.models.task import Task
from app.models.user import User


class InMemoryUserRepository:
    def __init__(self):
        self._lock = RLock()
        self._ids = count(1)
        self._users: Dict[int, User] = {}

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
            return None

    def create(self, *, name: str, email: str, hashed_password: str, role: str) -> User:
        with self._lock:
            if self.get_by_email(email):
                raise ConflictError("User already exists")
            user = User(
                id=next(self._ids),
                name=name,
                email=email,
                hashed_password=hashed_password,
                role=role,
                created_at=datetime.utcnow(),
            )
            self._users[user.id] = user
            return user


class InMemoryTaskRepository:
    def __init__(self):
        self._lock = RLock()
        self._ids = count(1)
        self._tasks: Dict[int, Task] = {}

    def create(
        self,
        *,
        user_id: int,
        title: str,
        description: Optional[str],
        link: Optional[str],
        status: str,
    ) -> Task:
        with self._lock:
            task = Task(
                id=next(self._ids),
                user_id=user_id,
                title=title,
                description=description,
                link=link,
                status=status,
                created_at=datetime.utcnow(),
            )
            self._tasks[task.id] = task
            return task

    def list_for_user(self, user_id: int, status: Optional[str] = None) -> List[Task]:
        with self._lock:
            tasks = [
                t for t in self._tasks.values()
                if t.user_id == user_id and (not status or t.status == status)
            ]
        return sorted(tasks, key=lambda t: (t.created_at, t.id), reverse=True)

    def get_for_user(self, task_id: int, user_id: int) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None or task.user_id != user_id:
            return None
        return task

    def update_for_user(self, task_id: int, user_id: int, changes: Dict[str, Any]) -> Optional[Task]:
        with self._lock:
            task = self.get_for_user(task_id, user_id)
            if not task:
                return None
            for field, value in changes.items():
                setattr(task, field, value)
            return task

    def delete_for_user(self, task_id: int, user_id: int) -> bool:
        with self._lock:
            if not self.get_for_user(task_id, user_id):
                return False
            del self._tasks[task_id]
            return True

    def delete_for_user_by_status(self, user_id: int, status: str) -> int:
        with self._lock:
            doomed = [
                t.id for t in self._tasks.values()
                if t.user_id == user_id and t.status == status
            ]
            for task_id in doomed:
                del self._tasks[task_id]
            return len(doomed)


class InMemoryAttendanceRepository:
    def __init__(self):
        self._lock = RLock()
        self._ids = count(1)
        self._records: Dict[int, Attendance] = {}

    def get_for_day(self, user_id: int, day: str) -> Optional[Attendance]:
        with self._lock:
            for record in self._records.values():
                if record.user_id == user_id and record.day == day:
                    return record
            return None

    def create(self, *, user_id: int, day: str, check_in: datetime) -> Attendance:
        with self._lock:
            if self.get_for_day(user_id, day):
                raise ConflictError("Already checked in today")
            record = Attendance(
                id=next(self._ids),
                user_id=user_id,
                day=day,
                check_in=check_in,
                check_out=None,
                worked_hours=None,
            )
            self._records[record.id] = record
            return record

    def save_check_out(self, record: Attendance, *, check_out: datetime, worked_hours: float) -> Attendance:
        with self._lock:
            record.check_out = check_out
            record.worked_hours = worked_hours
            return record

    def list_for_user(self, user_id: int, skip: int = 0, limit: Optional[int] = 100) -> List[Attendance]:
        with self._lock:
            records = [r for r in self._records.values() if r.user_id == user_id]
        records.sort(key=lambda r: (r.day, r.id), reverse=True)
        if limit is None:
            return records[skip:]
        return records[skip:skip + limit]
