"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.db.base import ObjectIdStr
from app.models.user import Role
from app.schemas.common import NonBlankStr


class SignupRequest(BaseModel):
    """Signup request schema."""

    name: NonBlankStr
    email: EmailStr
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters")
    role: Role = Role.STUDENT

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str = Field(..., min_length=1, description="Password is required")

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class UserResponse(BaseModel):
    """User as returned to the client."""

    id: ObjectIdStr
    name: str
    email: str
    role: Role


class AuthData(BaseModel):
    """Signup/login payload."""

    user: UserResponse
    token: str
