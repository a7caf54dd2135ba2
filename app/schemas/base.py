"""Base schemas for the application."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema class with common configuration.

    Fields are exposed in camelCase on the wire and accepted in either case.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class BaseModelSchema(BaseSchema):
    """Base schema for database models."""

    id: UUID
    created_at: datetime
    updated_at: datetime


def reject_null(value, field_label: str):
    """Refuse an explicit null for a field that cannot be cleared."""
    if value is None:
        raise ValueError(f"{field_label} cannot be null")
    return value


def clean_required_text(value: str | None, field_label: str) -> str | None:
    """Strip a required text field and refuse blank values."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError(f"{field_label} must not be blank")
    return value
