"""User story schemas for request/response serialization."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from models.enums import Priority, Status

from .base import BaseModelSchema, BaseSchema, clean_required_text, reject_null
from .task import TaskResponse


class UserStoryCreate(BaseSchema):
    """Schema for creating a new user story under an epic."""

    title: str = Field(..., min_length=1, max_length=255)
    as_a: str | None = Field(None, max_length=500)
    i_want: str | None = Field(None, max_length=500)
    so_that: str | None = Field(None, max_length=500)
    priority: Priority = Priority.MEDIUM
    status: Status = Status.TODO
    order_index: int | None = Field(None, ge=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return clean_required_text(v, "Title")


class UserStoryUpdate(BaseSchema):
    """Schema for updating a user story."""

    title: str | None = Field(None, min_length=1, max_length=255)
    as_a: str | None = Field(None, max_length=500)
    i_want: str | None = Field(None, max_length=500)
    so_that: str | None = Field(None, max_length=500)
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


class UserStoryResponse(BaseModelSchema):
    """Schema for user story response."""

    epic_id: UUID
    title: str
    as_a: str | None = None
    i_want: str | None = None
    so_that: str | None = None
    priority: Priority
    status: Status
    order_index: int
    tasks: list[TaskResponse] = []
