import logging
from typing import Tuple
from app.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.models.user import User, UserRole
from app.repositories.base import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Registration, login and identity lookup on top of a user store."""

    def __init__(self, users: UserRepository):
        self.users = users

    def register(self, name: str, email: str, password: str) -> Tuple[User, str]:
        """Create an employee account and return it with a fresh session token."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Name is required")
        if not password or not password.strip():
            raise ValidationError("Password is required")

        if self.users.get_by_email(email):
            raise ConflictError("User already exists")

        user = self.users.create(
            name=name,
            email=email,
            hashed_password=get_password_hash(password),
            role=UserRole.EMPLOYEE.value,
        )
        logger.info(f"User registered: id={user.id}")
        return user, create_access_token(user.id)

    def login(self, email: str, password: str) -> Tuple[User, str]:
        user = self.users.get_by_email(email)
        if not user:
            raise ValidationError("User not found")

        if not verify_password(password, user.hashed_password):
            logger.info(f"Failed login for user id={user.id}")
            raise AuthError("Invalid credentials")

        return user, create_access_token(user.id)

    def get_user(self, user_id: int) -> User:
        user = self.users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
