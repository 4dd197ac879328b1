"""User model."""

from enum import Enum
from typing import Optional

from pydantic import Field

from app.db.base import Base, CamelModel, ObjectIdStr


class Role(str, Enum):
    """User roles."""

    STUDENT = "student"
    ADMIN = "admin"


class User(Base):
    """
    Authenticated identity as stored in the ``users`` collection.

    Instances are passed explicitly into every service call that needs to
    know who is acting. The password hash is loaded for login checks and is
    never serialized.
    """

    name: str
    email: str
    role: Role = Role.STUDENT
    password: Optional[str] = Field(default=None, exclude=True, repr=False)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __repr__(self):
        return f"<User {self.email} ({self.role.value})>"


class UserBrief(CamelModel):
    """User reference resolved to name and email."""

    id: ObjectIdStr = Field(alias="_id")
    name: Optional[str] = None
    email: Optional[str] = None
