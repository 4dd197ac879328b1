"""Student profiles: one document per user."""

import logging
from typing import Any, Dict, Tuple

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError, NotFoundError, store_errors
from app.db.populate import populate_one
from app.db.session import PROFILES, USERS
from app.models.profile import Profile
from app.models.user import User
from app.schemas.profile import ProfileWrite
from app.utils.constants import USER_BRIEF_FIELDS
from app.utils.helpers import parse_object_id, utcnow

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Profile not found"
ALREADY_EXISTS_MESSAGE = "Profile already exists. Use PUT to update."


def _fields(payload: ProfileWrite) -> Dict[str, Any]:
    """Provided fields only, with camelCase keys as stored."""
    return payload.model_dump(by_alias=True, exclude_unset=True)


class ProfileService:
    """CRUD over the ``profiles`` collection, keyed by the owning user."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[PROFILES]

    @store_errors("Error fetching profile")
    async def get_mine(self, user: User) -> Profile:
        doc = await self.collection.find_one({"user": parse_object_id(user.id)})
        if doc is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)

        await populate_one(self.db, doc, "user", USERS, USER_BRIEF_FIELDS)
        return Profile.model_validate(doc)

    @store_errors("Error creating profile")
    async def create(self, payload: ProfileWrite, user: User) -> Profile:
        """Create the user's profile; fails if one already exists."""
        user_id = parse_object_id(user.id)
        if await self.collection.find_one({"user": user_id}, {"_id": 1}):
            raise ConflictError(ALREADY_EXISTS_MESSAGE)

        now = utcnow()
        doc = {**_fields(payload), "user": user_id, "createdAt": now, "updatedAt": now}

        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise ConflictError(ALREADY_EXISTS_MESSAGE)

        doc["_id"] = result.inserted_id
        logger.info(f"Profile created for user {user.id}")
        return Profile.model_validate(doc)

    @store_errors("Error updating profile")
    async def upsert(self, payload: ProfileWrite, user: User) -> Tuple[Profile, bool]:
        """
        Write the provided fields, creating the profile if it does not exist.

        Returns the stored profile and whether it was created by this call.
        """
        user_id = parse_object_id(user.id)
        now = utcnow()

        result = await self.collection.update_one(
            {"user": user_id},
            {
                "$set": {**_fields(payload), "updatedAt": now},
                "$setOnInsert": {"user": user_id, "createdAt": now},
            },
            upsert=True,
        )
        created = result.upserted_id is not None

        doc = await self.collection.find_one({"user": user_id})
        if doc is None:
            # Deleted concurrently right after the write
            raise NotFoundError(NOT_FOUND_MESSAGE)

        logger.info(f"Profile {'created' if created else 'updated'} for user {user.id}")
        return Profile.model_validate(doc), created

    @store_errors("Error deleting profile")
    async def delete(self, user: User) -> None:
        result = await self.collection.delete_one({"user": parse_object_id(user.id)})
        if result.deleted_count == 0:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info(f"Profile deleted for user {user.id}")
