from fastapi import APIRouter, Depends, Response, status
from app.core.config import settings
from app.models.user import User
from app.schemas.user import UserRegister, LoginRequest, UserResponse, MeResponse, Token, MessageResponse
from app.api.deps import get_auth_service, get_current_user
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


def set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.TOKEN_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.COOKIE_SECURE,
    )


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register(
    data: UserRegister,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Create an account and start a session."""
    _, token = auth_service.register(data.name, data.email, data.password)
    set_token_cookie(response, token)
    return {"token": token}


@router.post("/login", response_model=Token)
async def login(
    data: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Exchange email and password for a session token."""
    _, token = auth_service.login(data.email, data.password)
    set_token_cookie(response, token)
    return {"token": token}


@router.get("/me", response_model=MeResponse)
async def me(response: Response, current_user: User = Depends(get_current_user)):
    """Get the authenticated user's profile."""
    response.headers["Cache-Control"] = "no-store"
    return {"user": UserResponse.model_validate(current_user)}


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """Drop the session cookie. The token itself stays valid until it expires."""
    response.delete_cookie(settings.TOKEN_COOKIE_NAME, path="/")
    return {"message": "Logged out"}
