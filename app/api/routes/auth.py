"""Authentication endpoints."""

import structlog
from fastapi import APIRouter, Depends, status

from app.api.deps import get_user_service
from app.core.security import get_current_user
from app.models.user import User
from app.schemas.auth import AuthData, LoginRequest, SignupRequest, UserResponse
from app.schemas.common import ApiResponse
from app.services.user_service import UserService

logger = structlog.get_logger(__name__)

router = APIRouter()


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email, role=user.role)


@router.post("/signup", response_model=ApiResponse[AuthData], status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest, service: UserService = Depends(get_user_service)):
    """Register a new user and return a token."""
    user, token = await service.signup(request)
    logger.info("user_registered", user_id=user.id, role=user.role.value)

    return ApiResponse(
        message="User registered successfully",
        data=AuthData(user=_user_response(user), token=token),
    )


@router.post("/login", response_model=ApiResponse[AuthData])
async def login(request: LoginRequest, service: UserService = Depends(get_user_service)):
    """Login with email and password."""
    user, token = await service.login(request)
    logger.info("user_logged_in", user_id=user.id)

    return ApiResponse(
        message="Login successful",
        data=AuthData(user=_user_response(user), token=token),
    )


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return ApiResponse(data=_user_response(current_user))
