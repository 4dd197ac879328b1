"""Internship request schemas."""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import Field, model_validator

from app.db.base import CamelModel
from app.schemas.common import NonBlankStr, RequiredText
from app.utils.constants import DEFAULT_STIPEND

SkillList = Annotated[List[NonBlankStr], Field(min_length=1, description="At least one skill is required")]


class InternshipCreate(CamelModel):
    """Create an internship listing (admin)."""

    title: NonBlankStr
    company: NonBlankStr
    description: RequiredText
    skills: SkillList
    country: NonBlankStr
    duration: NonBlankStr
    stipend: str = DEFAULT_STIPEND
    application_deadline: datetime = Field(..., description="ISO-8601 deadline")
    is_active: bool = True


class InternshipUpdate(CamelModel):
    """
    Partial update of an internship listing (admin).

    Only the fields present in the request are written. Present fields are
    validated with the same rules as on create; required fields cannot be
    cleared with null.
    """

    title: Optional[NonBlankStr] = None
    company: Optional[NonBlankStr] = None
    description: Optional[RequiredText] = None
    skills: Optional[SkillList] = None
    country: Optional[NonBlankStr] = None
    duration: Optional[NonBlankStr] = None
    stipend: Optional[str] = None
    application_deadline: Optional[datetime] = None
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def reject_cleared_fields(self):
        cleared = [
            name
            for name in self.model_fields_set
            if getattr(self, name) is None
        ]
        if cleared:
            aliases = ", ".join(type(self).model_fields[name].alias or name for name in sorted(cleared))
            raise ValueError(f"Fields cannot be null: {aliases}")
        return self
