from datetime import datetime
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.exceptions import ConflictError
from app.models.attendance import Attendance
from app.models.task import Task
from app.models.user import User


class SqlUserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, *, name: str, email: str, hashed_password: str, role: str) -> User:
        user = User(name=name, email=email, hashed_password=hashed_password, role=role)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError("User already exists") from exc
        self.db.refresh(user)
        return user


class SqlTaskRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        *,
        user_id: int,
        title: str,
        description: Optional[str],
        link: Optional[str],
        status: str,
    ) -> Task:
        task = Task(user_id=user_id, title=title, description=description, link=link, status=status)
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def list_for_user(self, user_id: int, status: Optional[str] = None) -> List[Task]:
        query = self.db.query(Task).filter(Task.user_id == user_id)
        if status:
            query = query.filter(Task.status == status)
        return query.order_by(Task.created_at.desc(), Task.id.desc()).all()

    def get_for_user(self, task_id: int, user_id: int) -> Optional[Task]:
        return self.db.query(Task).filter(Task.id == task_id, Task.user_id == user_id).first()

    def update_for_user(self, task_id: int, user_id: int, changes: Dict[str, Any]) -> Optional[Task]:
        task = self.get_for_user(task_id, user_id)
        if not task:
            return None

        for field, value in changes.items():
            setattr(task, field, value)

        self.db.commit()
        self.db.refresh(task)
        return task

    def delete_for_user(self, task_id: int, user_id: int) -> bool:
        task = self.get_for_user(task_id, user_id)
        if not task:
            return False

        self.db.delete(task)
        self.db.commit()
        return True

    def delete_for_user_by_status(self, user_id: int, status: str) -> int:
        deleted = self.db.query(Task).filter(
            Task.user_id == user_id,
            Task.status == status
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted


class SqlAttendanceRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_for_day(self, user_id: int, day: str) -> Optional[Attendance]:
        return self.db.query(Attendance).filter(
            Attendance.user_id == user_id,
            Attendance.day == day
        ).first()

    def create(self, *, user_id: int, day: str, check_in: datetime) -> Attendance:
        record = Attendance(user_id=user_id, day=day, check_in=check_in)
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # A concurrent check-in for the same day landed first
            self.db.rollback()
            raise ConflictError("Already checked in today") from exc
        self.db.refresh(record)
        return record

    def save_check_out(self, record: Attendance, *, check_out: datetime, worked_hours: float) -> Attendance:
        record.check_out = check_out
        record.worked_hours = worked_hours
        self.db.commit()
        self.db.refresh(record)
        return record

    def list_for_user(self, user_id: int, skip: int = 0, limit: Optional[int] = 100) -> List[Attendance]:
        return (
            self.db.query(Attendance)
            .filter(Attendance.user_id == user_id)
            .order_by(Attendance.day.desc(), Attendance.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
