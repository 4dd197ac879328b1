"""Student profile model."""

from typing import List, Optional, Union

from pydantic import Field, model_validator

from app.db.base import Base, CamelModel, ObjectIdStr
from app.models.user import UserBrief


# ==================== Nested Entries ====================

class EducationEntry(CamelModel):
    """Education entry"""
    school: str = Field(..., min_length=1, description="School or university")
    degree: str = Field(..., min_length=1, description="Degree (e.g., B.Tech)")
    field: str = Field(..., min_length=1, description="Field of study")
    start_date: str = Field(..., min_length=1, description="Start date as entered by the student")
    end_date: Optional[str] = None
    current: bool = False

    @model_validator(mode="after")
    def drop_end_date_when_current(self):
        if self.current:
            self.end_date = None
        return self


class ExperienceEntry(CamelModel):
    """Work experience entry"""
    company: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    description: Optional[str] = None
    start_date: str = Field(..., min_length=1)
    end_date: Optional[str] = None
    current: bool = False

    @model_validator(mode="after")
    def drop_end_date_when_current(self):
        if self.current:
            self.end_date = None
        return self


class ProjectEntry(CamelModel):
    """Project entry"""
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    link: Optional[str] = None


# ==================== Profile ====================

class Profile(Base):
    """One profile per user, stored in the ``profiles`` collection."""

    user: Union[UserBrief, ObjectIdStr, None] = None

    bio: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None

    education: List[EducationEntry] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)

    # Links
    resume: Optional[str] = None
    portfolio: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None

    def __repr__(self):
        return f"<Profile {self.user}>"
