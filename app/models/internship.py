"""Internship model."""

from typing import List, Optional, Union

from pydantic import Field

from app.db.base import Base, CamelModel, ObjectIdStr, UTCDateTime
from app.models.user import UserBrief
from app.utils.constants import DEFAULT_STIPEND


class Internship(Base):
    """Internship listing."""

    title: str
    company: str
    description: str
    skills: List[str] = Field(default_factory=list)
    country: str
    duration: str
    stipend: str = DEFAULT_STIPEND
    application_deadline: UTCDateTime
    is_active: bool = True

    # Admin who created the listing, resolved when populated
    created_by: Union[UserBrief, ObjectIdStr, None] = None

    def __repr__(self):
        return f"<Internship {self.title} at {self.company}>"


class InternshipBrief(CamelModel):
    """Internship reference resolved to a subset of its fields."""

    id: ObjectIdStr = Field(alias="_id")
    title: Optional[str] = None
    company: Optional[str] = None
    country: Optional[str] = None
    duration: Optional[str] = None
    stipend: Optional[str] = None
