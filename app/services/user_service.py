"""User accounts: signup, login and token issuance."""

import logging
from typing import Tuple

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import AuthError, ConflictError, store_errors
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.session import USERS
from app.models.user import User
from app.schemas.auth import LoginRequest, SignupRequest
from app.utils.helpers import utcnow

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User already exists with this email"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class UserService:
    """Account creation and credential checks over the ``users`` collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[USERS]

    @store_errors("Server error during registration")
    async def signup(self, request: SignupRequest) -> Tuple[User, str]:
        """Create an account and return it with an access token."""
        if await self.collection.find_one({"email": request.email}, {"_id": 1}):
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

        now = utcnow()
        doc = {
            "name": request.name,
            "email": request.email,
            "password": get_password_hash(request.password),
            "role": request.role.value,
            "createdAt": now,
            "updatedAt": now,
        }

        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError:
            # Lost a race with a concurrent signup for the same email
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

        doc["_id"] = result.inserted_id
        user = User.model_validate(doc)
        logger.info(f"Registered user {user.id} ({user.role.value})")

        return user, create_access_token({"sub": user.id})

    @store_errors("Server error during login")
    async def login(self, request: LoginRequest) -> Tuple[User, str]:
        """
        Verify credentials and return the user with an access token.

        Unknown email and wrong password fail with the same message.
        """
        doc = await self.collection.find_one({"email": request.email})

        if not doc or not verify_password(request.password, doc.get("password")):
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        user = User.model_validate(doc)
        return user, create_access_token({"sub": user.id})
