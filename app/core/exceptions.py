"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a short message that is
safe to show to the caller. Handlers in ``main.py`` turn them into
``{"message": ...}`` JSON bodies.
"""
from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Bad or missing input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthError(AppError):
    """Missing, invalid or expired credentials."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class InvalidTokenError(AuthError):
    default_message = "Invalid token"


class NotFoundError(AppError):
    """Resource absent, or not owned by the caller."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    """Duplicate registration or duplicate check-in."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already exists"
