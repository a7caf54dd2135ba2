"""AI schemas: generation requests and the documents the model must return."""

from __future__ import annotations

import math
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from models.enums import Priority

from .base import BaseSchema


class GenerateSpecificationRequest(BaseSchema):
    """Schema for a specification generation request."""

    additional_requirements: str | None = Field(None, max_length=5000)


class ExtractPlanRequest(BaseSchema):
    """Schema for turning a conversation into epics, stories and tasks."""

    conversation_id: UUID


class GeneratedDocumentSchema(BaseSchema):
    """Base for documents produced by the model; unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")


# ----- Specification document -----


class SpecUserStory(GeneratedDocumentSchema):
    id: str | int | None = None
    title: str = ""
    story: str = ""
    acceptance_criteria: list[str] = []
    priority: str | None = None


class SpecModule(GeneratedDocumentSchema):
    name: str = ""
    description: str = ""
    priority: str | None = None
    user_stories: list[SpecUserStory] = []


class NonFunctionalRequirement(GeneratedDocumentSchema):
    category: str = ""
    requirement: str = ""
    metric: str | None = None


class TechnicalRecommendations(GeneratedDocumentSchema):
    frontend: list[str] = []
    backend: list[str] = []
    database: list[str] = []
    infrastructure: list[str] = []


class ProjectRisk(GeneratedDocumentSchema):
    risk: str = ""
    impact: str | None = None
    mitigation: str | None = None


class GeneratedSpecification(GeneratedDocumentSchema):
    """The structured specification document stored as a Specification's content."""

    project_title: str = ""
    executive_summary: str = ""
    target_audience: list[str] = []
    modules: list[SpecModule] = []
    non_functional_requirements: list[NonFunctionalRequirement] = []
    technical_recommendations: TechnicalRecommendations = Field(default_factory=TechnicalRecommendations)
    project_risks: list[ProjectRisk] = []
    estimated_complexity: str | int | None = None
    suggested_mvp_features: list[str] = []


# ----- Plan extraction document -----


def coerce_priority(value):
    """Map free-form model priorities onto HIGH/MEDIUM/LOW, defaulting to MEDIUM."""
    if isinstance(value, str):
        value = value.strip().upper()
        return value if value in Priority.__members__ else Priority.MEDIUM
    return value or Priority.MEDIUM


class ExtractedTask(GeneratedDocumentSchema):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    estimated_hours: int | None = Field(None, ge=0)

    @field_validator("estimated_hours", mode="before")
    @classmethod
    def round_up_hours(cls, v):
        """Round fractional estimates such as 4.5 up to whole hours."""
        if isinstance(v, float) and not v.is_integer():
            return math.ceil(v)
        return v


class ExtractedStory(GeneratedDocumentSchema):
    title: str = Field(..., min_length=1, max_length=255)
    as_a: str | None = Field(None, max_length=500)
    i_want: str | None = Field(None, max_length=500)
    so_that: str | None = Field(None, max_length=500)
    priority: Priority = Priority.MEDIUM
    tasks: list[ExtractedTask] = []

    @field_validator("priority", mode="before")
    @classmethod
    def normalize_priority(cls, v):
        return coerce_priority(v)


class ExtractedEpic(GeneratedDocumentSchema):
    title: str = Field(..., min_length=1, max_length=150)
    description: str | None = Field(None, max_length=1000)
    priority: Priority = Priority.MEDIUM
    stories: list[ExtractedStory] = []

    @field_validator("priority", mode="before")
    @classmethod
    def normalize_priority(cls, v):
        return coerce_priority(v)


class ExtractedPlan(GeneratedDocumentSchema):
    """Plan the model derives from a conversation."""

    epics: list[ExtractedEpic] = Field(..., min_length=1)
