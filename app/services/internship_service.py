"""Internship catalog: public browsing and admin CRUD."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING, ReturnDocument

from app.core.exceptions import NotFoundError, store_errors
from app.db.populate import populate, populate_one
from app.db.session import INTERNSHIPS, USERS
from app.models.internship import Internship
from app.models.user import User
from app.schemas.internship import InternshipCreate, InternshipUpdate
from app.utils.constants import USER_BRIEF_FIELDS
from app.utils.helpers import (
    contains_pattern,
    paginate_query,
    parse_object_id,
    to_naive_utc,
    total_pages,
    utcnow,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Internship not found"


@dataclass
class InternshipFilters:
    """Listing filters; every text filter is a case-insensitive substring."""

    skill: Optional[str] = None
    country: Optional[str] = None
    duration: Optional[str] = None
    search: Optional[str] = None

    def to_query(self) -> Dict[str, Any]:
        query: Dict[str, Any] = {"isActive": True}

        if self.skill:
            # Matches when any element of the skills array contains the text
            query["skills"] = contains_pattern(self.skill)

        if self.country:
            query["country"] = contains_pattern(self.country)

        if self.duration:
            query["duration"] = contains_pattern(self.duration)

        if self.search:
            pattern = contains_pattern(self.search)
            query["$or"] = [
                {"title": pattern},
                {"company": pattern},
                {"description": pattern},
            ]

        return query


@dataclass
class InternshipPage:
    items: List[Internship]
    total: int
    page: int
    pages: int


class InternshipService:
    """CRUD over the ``internships`` collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[INTERNSHIPS]

    @store_errors("Error fetching internships")
    async def list_active(
        self,
        filters: InternshipFilters,
        page: int = 1,
        limit: int = 10,
    ) -> InternshipPage:
        """Active listings, newest first, one page at a time."""
        query = filters.to_query()
        paging = paginate_query(page, limit)

        total = await self.collection.count_documents(query)

        cursor = (
            self.collection.find(query)
            .sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
            .skip(paging["skip"])
            .limit(paging["limit"])
        )
        docs = await cursor.to_list(length=limit)
        await populate(self.db, docs, "createdBy", USERS, USER_BRIEF_FIELDS)

        return InternshipPage(
            items=[Internship.model_validate(doc) for doc in docs],
            total=total,
            page=page,
            pages=total_pages(total, limit),
        )

    @store_errors("Error fetching internship")
    async def get(self, internship_id: str) -> Internship:
        """A single listing, active or not."""
        doc = await self._find(internship_id)
        await populate_one(self.db, doc, "createdBy", USERS, USER_BRIEF_FIELDS)
        return Internship.model_validate(doc)

    @store_errors("Error creating internship")
    async def create(self, payload: InternshipCreate, user: User) -> Internship:
        now = utcnow()
        doc = payload.model_dump(by_alias=True)
        doc["applicationDeadline"] = to_naive_utc(payload.application_deadline)
        doc["createdBy"] = parse_object_id(user.id)
        doc["createdAt"] = now
        doc["updatedAt"] = now

        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id

        logger.info(f"Internship {result.inserted_id} created by user {user.id}")
        return Internship.model_validate(doc)

    @store_errors("Error updating internship")
    async def update(self, internship_id: str, payload: InternshipUpdate, user: User) -> Internship:
        """Set only the provided fields."""
        existing = await self._find(internship_id)

        changes = payload.model_dump(by_alias=True, exclude_unset=True)
        if payload.application_deadline is not None:
            changes["applicationDeadline"] = to_naive_utc(payload.application_deadline)
        changes["updatedAt"] = utcnow()

        doc = await self.collection.find_one_and_update(
            {"_id": existing["_id"]},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            # Deleted between the lookup and the update
            raise NotFoundError(NOT_FOUND_MESSAGE)

        logger.info(f"Internship {internship_id} updated by user {user.id}: {sorted(changes)}")
        return Internship.model_validate(doc)

    @store_errors("Error deleting internship")
    async def delete(self, internship_id: str, user: User) -> None:
        """Remove the listing. Applications referencing it are left in place."""
        existing = await self._find(internship_id)
        await self.collection.delete_one({"_id": existing["_id"]})
        logger.info(f"Internship {internship_id} deleted by user {user.id}")

    async def _find(self, internship_id: str) -> Dict[str, Any]:
        oid = parse_object_id(internship_id)
        doc = await self.collection.find_one({"_id": oid}) if oid is not None else None
        if doc is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return doc
