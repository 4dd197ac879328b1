"""Helper utilities."""

import math
import re
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId


def utcnow() -> datetime:
    """Current time as a naive UTC datetime (the form MongoDB returns)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Normalize an aware datetime to naive UTC; naive values are assumed UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC tzinfo to a naive datetime read from the store."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return an ObjectId for ``value`` or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def contains_pattern(text: str) -> "re.Pattern[str]":
    """Case-insensitive literal substring match."""
    return re.compile(re.escape(text.strip()), re.IGNORECASE)


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items at ``limit`` per page."""
    return math.ceil(total / limit) if limit > 0 else 0


def paginate_query(page: int = 1, page_size: int = 20) -> dict:
    """Helper for pagination."""
    offset = (page - 1) * page_size
    return {
        "skip": offset,
        "limit": page_size,
        "page": page,
        "page_size": page_size,
    }
