"""Error envelope returned for every non-2xx response."""

from datetime import datetime

from .base import BaseSchema


class FieldErrorSchema(BaseSchema):
    """One violated constraint of a request payload."""

    field: str
    message: str


class ErrorResponse(BaseSchema):
    """Schema for error responses."""

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    field_errors: list[FieldErrorSchema] | None = None
