"""Specification document schemas for request/response serialization."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from models.enums import DocumentStatus

from .base import BaseModelSchema, BaseSchema, clean_required_text, reject_null


class SpecificationUpdate(BaseSchema):
    """Schema for updating a specification document's metadata."""

    title: str | None = Field(None, min_length=1, max_length=255)
    status: DocumentStatus | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        return clean_required_text(reject_null(v, "Title"), "Title")

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: DocumentStatus | None) -> DocumentStatus:
        return reject_null(v, "status")


class SpecificationResponse(BaseModelSchema):
    """Schema for specification response.

    ``content`` is the JSON document text as generated and validated.
    """

    project_id: UUID
    title: str
    content: str
    status: DocumentStatus
    version: int
