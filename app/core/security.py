"""Security utilities: JWT, password hashing, role checks."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config import settings
from app.core.exceptions import AuthError, ForbiddenError
from app.db.session import USERS, get_db
from app.models.user import Role, User
from app.utils.helpers import parse_object_id

# auto_error=False so a missing header is reported through our envelope
security = HTTPBearer(auto_error=False)

NO_TOKEN_MESSAGE = "Not authorized, no token"
BAD_TOKEN_MESSAGE = "Not authorized, token failed"


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: Optional[str]) -> bool:
    """Check a password against a stored bcrypt hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash in the store
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )
    to_encode.update({"exp": expire, "type": "access"})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_token(token: str) -> dict:
    """Decode and verify JWT token."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise AuthError(BAD_TOKEN_MESSAGE)

    if payload.get("type") != "access":
        raise AuthError(BAD_TOKEN_MESSAGE)

    return payload


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> User:
    """Get current authenticated user from Bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthError(NO_TOKEN_MESSAGE)

    payload = decode_token(credentials.credentials)

    user_id = parse_object_id(payload.get("sub"))
    if user_id is None:
        raise AuthError(BAD_TOKEN_MESSAGE)

    doc = await db[USERS].find_one({"_id": user_id}, {"password": 0})
    if doc is None:
        raise AuthError(BAD_TOKEN_MESSAGE)

    return User.model_validate(doc)


def require_role(*allowed_roles: Role):
    """Dependency to check if user has one of the given roles."""

    async def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            raise ForbiddenError("Access denied")
        return current_user

    return role_checker


require_admin = require_role(Role.ADMIN)
require_student = require_role(Role.STUDENT)
