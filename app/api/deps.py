"""
Request-level authentication and service wiring.

The session token is looked up by an ordered list of extractors (bearer
header first, then the ``token`` cookie); the first one that yields a value
wins. Only the id resolved here may be trusted as the caller's identity.
"""
import logging
from typing import Callable, Iterable, Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import AuthError, InvalidTokenError
from app.core.security import decode_access_token
from app.models.user import User
from app.repositories.sql import SqlAttendanceRepository, SqlTaskRepository, SqlUserRepository
from app.services.attendance_service import AttendanceService
from app.services.auth_service import AuthService
from app.services.task_service import TaskService

logger = logging.getLogger(__name__)

TokenExtractor = Callable[[Request], Optional[str]]


def bearer_token_from_header(request: Request) -> Optional[str]:
    """Token from ``Authorization: Bearer <token>``."""
    authorization = request.headers.get("Authorization")
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


def token_from_cookie(request: Request) -> Optional[str]:
    """Token from the httpOnly session cookie."""
    return request.cookies.get(settings.TOKEN_COOKIE_NAME) or None


TOKEN_EXTRACTORS = (bearer_token_from_header, token_from_cookie)


def extract_token(request: Request, extractors: Iterable[TokenExtractor] = TOKEN_EXTRACTORS) -> Optional[str]:
    for extractor in extractors:
        token = extractor(request)
        if token:
            return token
    return None


def get_current_user_id(request: Request) -> int:
    """Authenticate the request and attach the caller's id to ``request.state``."""
    token = extract_token(request)
    if not token:
        logger.debug(f"Rejected {request.method} {request.url.path}: no token")
        raise AuthError("No token provided")

    try:
        user_id = decode_access_token(token)
    except InvalidTokenError as exc:
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
        raise AuthError("Invalid token") from exc

    request.state.user_id = user_id
    return user_id


# Service providers; tests override these to swap stores or pin the clock

def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(SqlUserRepository(db))


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(SqlTaskRepository(db))


def get_attendance_service(db: Session = Depends(get_db)) -> AttendanceService:
    return AttendanceService(SqlAttendanceRepository(db))


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    auth_service: AuthService = Depends(get_auth_service)
) -> User:
    return auth_service.get_user(user_id)
