"""Application endpoints - students apply, admins review."""

import structlog
from fastapi import APIRouter, Depends, status

from app.api.deps import get_application_service
from app.core.security import get_current_user, require_student
from app.models.application import Application
from app.models.user import User
from app.schemas.application import ApplicationCreate, StatusUpdate
from app.schemas.common import ApiResponse, ListResponse
from app.services.application_service import ApplicationService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("", response_model=ApiResponse[Application], status_code=status.HTTP_201_CREATED)
async def submit_application(
    payload: ApplicationCreate,
    current_user: User = Depends(require_student),
    service: ApplicationService = Depends(get_application_service),
):
    """
    Apply to an internship

    **Auth**: Student (JWT required)

    Fails when the internship is missing, inactive, past its deadline, or
    already applied to by this student.
    """
    application = await service.submit(payload, current_user)
    logger.info(
        "application_submitted",
        application_id=application.id,
        internship_id=payload.internship_id,
        student_id=current_user.id,
    )

    return ApiResponse[Application](message="Application submitted successfully", data=application)


@router.get("/my-applications", response_model=ListResponse[Application])
async def my_applications(
    current_user: User = Depends(require_student),
    service: ApplicationService = Depends(get_application_service),
):
    """The current student's applications, newest first."""
    applications = await service.list_mine(current_user)
    return ListResponse[Application](count=len(applications), data=applications)


@router.get("", response_model=ListResponse[Application])
async def list_applications(
    current_user: User = Depends(get_current_user),
    service: ApplicationService = Depends(get_application_service),
):
    """
    All applications, newest first

    **Auth**: Admin (JWT required)
    """
    applications = await service.list_all(current_user)
    return ListResponse[Application](count=len(applications), data=applications)


@router.put("/{application_id}/status", response_model=ApiResponse[Application])
async def update_application_status(
    application_id: str,
    payload: StatusUpdate,
    current_user: User = Depends(get_current_user),
    service: ApplicationService = Depends(get_application_service),
):
    """
    Change an application's status

    **Auth**: Admin (JWT required)

    Accepted values: pending, reviewed, accepted, rejected.
    """
    application = await service.update_status(application_id, payload.status, current_user)
    logger.info(
        "application_status_updated",
        application_id=application_id,
        status=payload.status,
        admin_id=current_user.id,
    )

    return ApiResponse[Application](
        message="Application status updated successfully", data=application
    )
