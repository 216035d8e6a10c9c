"""Unified error response body.

Every non-2xx response carries this shape:
{
    "timestamp": "...",
    "status": 404,
    "error": "Not Found",           // category, see errors.ERROR_CATEGORIES
    "message": "...",               // single message, or
    "messages": ["...", "..."]      // field-level validation messages
}

Successful responses return the resource itself, without a wrapper.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from src.sa_common.errors import ERROR_CATEGORIES, ErrorKind


class ErrorBody(BaseModel):
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    status: int
    error: str
    message: str | None = None
    messages: list[str] | None = None


def error_response(kind: ErrorKind, message: str) -> ErrorBody:
    status, category = ERROR_CATEGORIES[kind]
    return ErrorBody(status=status, error=category, message=message)


def field_errors_response(messages: list[str]) -> ErrorBody:
    status, category = ERROR_CATEGORIES[ErrorKind.VALIDATION_FIELD]
    return ErrorBody(status=status, error=category, messages=messages)
