"""Project schemas for request/response serialization."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import BaseModelSchema, BaseSchema, clean_required_text, reject_null
from .epic import EpicResponse


class ProjectCreate(BaseSchema):
    """Schema for creating a new project."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate and clean the project name."""
        return clean_required_text(v, "Project name")


class ProjectUpdate(BaseSchema):
    """Schema for updating a project.

    Absent fields are left unchanged; ``description`` may be cleared with null.
    """

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        """Validate and clean the project name."""
        return clean_required_text(reject_null(v, "Project name"), "Project name")


class ProjectResponse(BaseModelSchema):
    """Schema for project response."""

    name: str
    description: str | None = None

    # Computed fields
    epics_count: int = 0
    stories_count: int = 0
    tasks_count: int = 0
    conversations_count: int = 0


class ProjectDetailResponse(BaseModelSchema):
    """Schema for a project with its whole epic/story/task tree."""

    name: str
    description: str | None = None
    epics: list[EpicResponse] = []
