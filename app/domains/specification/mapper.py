"""Specification entity <-> schema conversions."""

from app.schemas.specification import SpecificationResponse, SpecificationUpdate
from models.specification import Specification


def to_response(specification: Specification) -> SpecificationResponse:
    return SpecificationResponse(
        id=specification.id,
        project_id=specification.project_id,
        title=specification.title,
        content=specification.content,
        status=specification.status,
        version=specification.version,
        created_at=specification.created_at,
        updated_at=specification.updated_at,
    )


def apply_update(request: SpecificationUpdate, specification: Specification) -> Specification:
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(specification, field, value)
    return specification
