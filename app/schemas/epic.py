"""Epic schemas for request/response serialization."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from models.enums import Priority, Status

from .base import BaseModelSchema, BaseSchema, clean_required_text, reject_null
from .story import UserStoryResponse


class EpicCreate(BaseSchema):
    """Schema for creating a new epic under a project."""

    title: str = Field(..., min_length=1, max_length=150)
    description: str | None = Field(None, max_length=1000)
    priority: Priority = Priority.MEDIUM
    status: Status = Status.TODO
    order_index: int | None = Field(None, ge=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return clean_required_text(v, "Title")


class EpicUpdate(BaseSchema):
    """Schema for updating an epic."""

    title: str | None = Field(None, min_length=1, max_length=150)
    description: str | None = Field(None, max_length=1000)
    priority: Priority | None = None
    status: Status | None = None
    order_index: int | None = Field(None, ge=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        return clean_required_text(reject_null(v, "Title"), "Title")

    @field_validator("priority", "status", "order_index")
    @classmethod
    def validate_not_null(cls, v, info):
        return reject_null(v, info.field_name)


class EpicResponse(BaseModelSchema):
    """Schema for epic response."""

    project_id: UUID
    title: str
    description: str | None = None
    priority: Priority
    status: Status
    order_index: int
    stories: list[UserStoryResponse] = []
