"""Internship endpoints - browse publicly, manage as admin."""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_internship_service
from app.config import settings
from app.core.security import require_admin
from app.models.internship import Internship
from app.models.user import User
from app.schemas.common import ApiResponse, MessageResponse, PaginatedResponse
from app.schemas.internship import InternshipCreate, InternshipUpdate
from app.services.internship_service import InternshipFilters, InternshipService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=PaginatedResponse[Internship])
async def list_internships(
    skill: Optional[str] = Query(None, description="Skill substring (e.g., 'react')"),
    country: Optional[str] = Query(None, description="Country substring (e.g., 'India')"),
    duration: Optional[str] = Query(None, description="Duration substring (e.g., '6 months')"),
    search: Optional[str] = Query(None, description="Text searched in title, company and description"),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page"
    ),
    service: InternshipService = Depends(get_internship_service),
):
    """
    Get paginated list of active internships

    **Filters** (all case-insensitive, partial match, combined with AND):
    - `skill`: matches any of the listing's skills
    - `country`
    - `duration`
    - `search`: matches title OR company OR description

    **Pagination:**
    - `page`: Page number (starts at 1)
    - `limit`: Items per page (default 10)

    Newest listings first.
    """
    filters = InternshipFilters(skill=skill, country=country, duration=duration, search=search)
    result = await service.list_active(filters, page=page, limit=limit)

    return PaginatedResponse[Internship](
        count=len(result.items),
        total=result.total,
        page=result.page,
        pages=result.pages,
        data=result.items,
    )


@router.get("/{internship_id}", response_model=ApiResponse[Internship])
async def get_internship(
    internship_id: str,
    service: InternshipService = Depends(get_internship_service),
):
    """Get a single internship, including inactive ones."""
    internship = await service.get(internship_id)
    return ApiResponse[Internship](data=internship)


@router.post("", response_model=ApiResponse[Internship], status_code=status.HTTP_201_CREATED)
async def create_internship(
    payload: InternshipCreate,
    current_user: User = Depends(require_admin),
    service: InternshipService = Depends(get_internship_service),
):
    """Create an internship (admin)."""
    internship = await service.create(payload, current_user)
    logger.info("internship_created", internship_id=internship.id, admin_id=current_user.id)

    return ApiResponse[Internship](message="Internship created successfully", data=internship)


@router.put("/{internship_id}", response_model=ApiResponse[Internship])
async def update_internship(
    internship_id: str,
    payload: InternshipUpdate,
    current_user: User = Depends(require_admin),
    service: InternshipService = Depends(get_internship_service),
):
    """Update provided fields of an internship (admin)."""
    internship = await service.update(internship_id, payload, current_user)
    return ApiResponse[Internship](message="Internship updated successfully", data=internship)


@router.delete("/{internship_id}", response_model=MessageResponse)
async def delete_internship(
    internship_id: str,
    current_user: User = Depends(require_admin),
    service: InternshipService = Depends(get_internship_service),
):
    """Delete an internship (admin). Existing applications are kept."""
    await service.delete(internship_id, current_user)
    logger.info("internship_deleted", internship_id=internship_id, admin_id=current_user.id)

    return MessageResponse(message="Internship deleted successfully")
