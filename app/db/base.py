"""Base class and field types for all document models."""

from datetime import datetime
from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.utils.helpers import as_utc


def _validate_object_id(value: Any) -> str:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, str) and ObjectId.is_valid(value):
        return value
    raise ValueError("Invalid ObjectId")


# ObjectId stored in MongoDB, exposed as its hex string
ObjectIdStr = Annotated[str, BeforeValidator(_validate_object_id)]

# Naive UTC datetimes from the store serialize with an explicit offset
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Model whose wire and storage keys are camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Base(CamelModel):
    """Base class for all stored documents."""

    id: ObjectIdStr = Field(alias="_id")
    created_at: Optional[UTCDateTime] = None
    updated_at: Optional[UTCDateTime] = None
