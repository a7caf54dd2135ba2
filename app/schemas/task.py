"""Task schemas for request/response serialization."""

from uuid import UUID

from pydantic import Field, field_validator

from models.enums import Status

from .base import BaseModelSchema, BaseSchema, clean_required_text, reject_null


class TaskCreate(BaseSchema):
    """Schema for creating a new task under a user story."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    status: Status = Status.TODO
    estimated_hours: int | None = Field(None, ge=0)
    order_index: int | None = Field(None, ge=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return clean_required_text(v, "Title")


class TaskUpdate(BaseSchema):
    """Schema for updating a task."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    status: Status | None = None
    estimated_hours: int | None = Field(None, ge=0)
    order_index: int | None = Field(None, ge=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        return clean_required_text(reject_null(v, "Title"), "Title")

    @field_validator("status", "order_index")
    @classmethod
    def validate_not_null(cls, v, info):
        return reject_null(v, info.field_name)


class TaskResponse(BaseModelSchema):
    """Schema for task response."""

    story_id: UUID
    title: str
    description: str | None = None
    status: Status
    estimated_hours: int | None = None
    order_index: int
