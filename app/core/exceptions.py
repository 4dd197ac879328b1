"""Application error taxonomy and store-error translation."""

import logging
from functools import wraps
from typing import Any, Dict, List, Optional

from fastapi import status
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors rendered into the response envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        detail: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        self.message = message or self.default_message
        self.detail = detail
        self.errors = errors
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class AuthError(AppError):
    """Missing or invalid credentials or token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized"


class ForbiddenError(AppError):
    """Authenticated but not allowed."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    """Duplicate resource. Reported as 400 to match existing clients."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class ServerError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


def store_errors(message: str):
    """
    Decorator for async service methods that talk to MongoDB.

    Any PyMongoError escaping the wrapped coroutine is logged and re-raised
    as a ServerError with ``message``; the driver message is kept as the
    diagnostic detail. AppError subclasses pass through untouched.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except PyMongoError as e:
                logger.error(f"{message}: {e}", exc_info=True)
                raise ServerError(message, detail=str(e)) from e

        return wrapper

    return decorator
