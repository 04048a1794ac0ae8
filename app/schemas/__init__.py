from app.schemas.user import (
    UserRegister, LoginRequest, UserResponse, MeResponse, Token, MessageResponse
)
from app.schemas.task import (
    TaskCreate, TaskUpdate, TaskStatusUpdate, TaskResponse, TaskHistoryCleared
)
from app.schemas.attendance import AttendanceResponse, AttendanceStats

__all__ = [
    "UserRegister", "LoginRequest", "UserResponse", "MeResponse", "Token", "MessageResponse",
    "TaskCreate", "TaskUpdate", "TaskStatusUpdate", "TaskResponse", "TaskHistoryCleared",
    "AttendanceResponse", "AttendanceStats",
]
