"""Internship applications: submission, listing and admin review."""

import logging
from datetime import datetime
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
    store_errors,
)
from app.db.populate import populate, populate_one
from app.db.session import APPLICATIONS, INTERNSHIPS, USERS
from app.models.application import ACCEPTED_STATUSES, Application, ApplicationStatus
from app.models.user import User
from app.schemas.application import ApplicationCreate
from app.utils.constants import (
    INTERNSHIP_BRIEF_FIELDS,
    INTERNSHIP_SUMMARY_FIELDS,
    USER_BRIEF_FIELDS,
)
from app.utils.helpers import parse_object_id, to_naive_utc, utcnow

logger = logging.getLogger(__name__)

ALREADY_APPLIED_MESSAGE = "You have already applied for this internship"


class ApplicationService:
    """Reads and writes the ``applications`` collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[APPLICATIONS]

    @store_errors("Error submitting application")
    async def submit(
        self,
        payload: ApplicationCreate,
        user: User,
        now: Optional[datetime] = None,
    ) -> Application:
        """
        Apply to an internship on behalf of ``user``.

        Guards run in order and stop at the first failure:

        1. the internship exists
        2. it is active
        3. ``now`` is not after its deadline (equal is still accepted)
        4. the student has not applied yet

        The unique (internship, student) index is what actually prevents
        duplicates; check 4 only gives the common case a cheap early answer.
        ``now`` defaults to the current naive UTC time.
        """
        now = to_naive_utc(now) if now else utcnow()

        internship_id = parse_object_id(payload.internship_id)
        internship = (
            await self.db[INTERNSHIPS].find_one({"_id": internship_id}) if internship_id is not None else None
        )
        if internship is None:
            raise NotFoundError("Internship not found")

        if not internship.get("isActive", False):
            raise ValidationError("This internship is no longer accepting applications")

        if now > internship["applicationDeadline"]:
            raise ValidationError("Application deadline has passed")

        student_id = parse_object_id(user.id)
        if await self._find_existing(internship_id, student_id):
            raise ConflictError(ALREADY_APPLIED_MESSAGE)

        doc = {
            "internship": internship_id,
            "student": student_id,
            # Snapshot; later changes to the user are not copied here
            "studentName": user.name,
            "studentEmail": user.email,
            "coverLetter": payload.cover_letter,
            "resume": payload.resume or "",
            "status": ApplicationStatus.PENDING.value,
            "appliedAt": now,
        }

        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError:
            logger.info(f"Duplicate application from user {user.id} rejected by unique index")
            raise ConflictError(ALREADY_APPLIED_MESSAGE)

        doc["_id"] = result.inserted_id
        doc["internship"] = {
            "_id": internship["_id"],
            **{name: internship.get(name) for name in INTERNSHIP_BRIEF_FIELDS},
        }

        logger.info(f"Application {result.inserted_id} submitted by user {user.id}")
        return Application.model_validate(doc)

    @store_errors("Error fetching applications")
    async def list_mine(self, user: User) -> List[Application]:
        """The user's own applications, newest first."""
        cursor = self.collection.find({"student": parse_object_id(user.id)}).sort(
            [("appliedAt", DESCENDING), ("_id", DESCENDING)]
        )
        docs = await cursor.to_list(length=None)
        await populate(self.db, docs, "internship", INTERNSHIPS, INTERNSHIP_SUMMARY_FIELDS)
        return [Application.model_validate(doc) for doc in docs]

    @store_errors("Error fetching applications")
    async def list_all(self, user: User) -> List[Application]:
        """Every application, newest first (admin only)."""
        if not user.is_admin:
            raise ForbiddenError("Access denied")

        cursor = self.collection.find({}).sort([("appliedAt", DESCENDING), ("_id", DESCENDING)])
        docs = await cursor.to_list(length=None)
        await populate(self.db, docs, "internship", INTERNSHIPS, INTERNSHIP_BRIEF_FIELDS)
        await populate(self.db, docs, "student", USERS, USER_BRIEF_FIELDS)
        return [Application.model_validate(doc) for doc in docs]

    @store_errors("Error updating application status")
    async def update_status(self, application_id: str, status: str, user: User) -> Application:
        """
        Set an application's status (admin only).

        Only values in ``ACCEPTED_STATUSES["update_status"]`` are allowed;
        transitions between them are not restricted.
        """
        if not user.is_admin:
            raise ForbiddenError("Access denied")

        allowed = {s.value for s in ACCEPTED_STATUSES["update_status"]}
        if status not in allowed:
            raise ValidationError("Invalid status value")

        oid = parse_object_id(application_id)
        doc = (
            await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": {"status": status}},
                return_document=ReturnDocument.AFTER,
            )
            if oid is not None
            else None
        )
        if doc is None:
            raise NotFoundError("Application not found")

        await populate_one(self.db, doc, "internship", INTERNSHIPS, INTERNSHIP_BRIEF_FIELDS)

        logger.info(f"Application {application_id} set to {status} by user {user.id}")
        return Application.model_validate(doc)

    async def _find_existing(self, internship_id, student_id) -> bool:
        existing = await self.collection.find_one(
            {"internship": internship_id, "student": student_id}, {"_id": 1}
        )
        return existing is not None
