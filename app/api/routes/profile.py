"""
Profile CRUD API
GET/POST/PUT/DELETE for the current user's profile
"""

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_profile_service
from app.core.security import get_current_user
from app.models.profile import Profile
from app.models.user import User
from app.schemas.common import ApiResponse, MessageResponse
from app.schemas.profile import ProfileWrite
from app.services.profile_service import ProfileService

router = APIRouter()


@router.get("/me", response_model=ApiResponse[Profile])
async def get_my_profile(
    current_user: User = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
):
    """Get the current user's profile."""
    profile = await service.get_mine(current_user)
    return ApiResponse[Profile](data=profile)


@router.post("", response_model=ApiResponse[Profile], status_code=status.HTTP_201_CREATED)
async def create_profile(
    payload: ProfileWrite,
    current_user: User = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
):
    """Create the current user's profile. Use PUT if one already exists."""
    profile = await service.create(payload, current_user)
    return ApiResponse[Profile](message="Profile created successfully", data=profile)


@router.put("", response_model=ApiResponse[Profile])
async def update_profile(
    payload: ProfileWrite,
    response: Response,
    current_user: User = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
):
    """Update the current user's profile, creating it on first write."""
    profile, created = await service.upsert(payload, current_user)

    if created:
        response.status_code = status.HTTP_201_CREATED
        return ApiResponse[Profile](message="Profile created successfully", data=profile)

    return ApiResponse[Profile](message="Profile updated successfully", data=profile)


@router.delete("", response_model=MessageResponse)
async def delete_profile(
    current_user: User = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
):
    """Delete the current user's profile."""
    await service.delete(current_user)
    return MessageResponse(message="Profile deleted successfully")
