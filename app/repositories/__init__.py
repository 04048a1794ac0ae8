from app.repositories.base import UserRepository, TaskRepository, AttendanceRepository
from app.repositories.sql import SqlUserRepository, SqlTaskRepository, SqlAttendanceRepository
from app.repositories.memory import (
    InMemoryUserRepository, InMemoryTaskRepository, InMemoryAttendanceRepository
)

__all__ = [
    "UserRepository", "TaskRepository", "AttendanceRepository",
    "SqlUserRepository", "SqlTaskRepository", "SqlAttendanceRepository",
    "InMemoryUserRepository", "InMemoryTaskRepository", "InMemoryAttendanceRepository",
]
