"""Response envelope and shared field types."""

from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, StringConstraints

DataT = TypeVar("DataT")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Trimmed, non-empty string
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Non-blank string kept as sent (long free text)
RequiredText = Annotated[str, AfterValidator(_not_blank)]


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope every endpoint responds with."""

    success: bool = True
    message: Optional[str] = None
    data: Optional[DataT] = None


class ListResponse(ApiResponse[List[DataT]], Generic[DataT]):
    """Envelope for unpaginated lists."""

    count: int = 0


class PaginatedResponse(ListResponse[DataT], Generic[DataT]):
    """Envelope for paginated lists."""

    total: int = 0
    page: int = 1
    pages: int = 0


class MessageResponse(BaseModel):
    """Envelope without data."""

    success: bool = True
    message: str
