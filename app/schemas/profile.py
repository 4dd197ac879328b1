"""
Profile request schema
Shared by create and update; all fields optional for partial updates
"""

from typing import List, Optional

from pydantic import Field, field_validator

from app.db.base import CamelModel
from app.models.profile import EducationEntry, ExperienceEntry, ProjectEntry


class ProfileWrite(CamelModel):
    """Profile fields a student can write."""

    bio: Optional[str] = Field(None, max_length=500, description="Short bio (max 500 characters)")
    phone: Optional[str] = None
    location: Optional[str] = None

    education: List[EducationEntry] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list, description="Skills, stored in the given order")
    projects: List[ProjectEntry] = Field(default_factory=list)

    resume: Optional[str] = Field(None, description="Resume URL")
    portfolio: Optional[str] = Field(None, description="Portfolio URL")
    linkedin: Optional[str] = Field(None, description="LinkedIn URL")
    github: Optional[str] = Field(None, description="GitHub URL")

    @field_validator("education", "experience", "skills", "projects", mode="before")
    @classmethod
    def null_list_means_empty(cls, v):
        # Stored profiles always hold lists; an explicit null clears the field
        return [] if v is None else v
