"""Application request schemas."""

from typing import Optional

from pydantic import Field

from app.db.base import CamelModel
from app.schemas.common import NonBlankStr


class ApplicationCreate(CamelModel):
    """Submit an application (student)."""

    internship_id: NonBlankStr = Field(..., description="Internship ID is required")
    cover_letter: NonBlankStr = Field(..., description="Cover letter is required")
    resume: Optional[str] = Field(None, description="Resume URL or text")


class StatusUpdate(CamelModel):
    """Change an application's status (admin)."""

    status: str
