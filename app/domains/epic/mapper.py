"""Epic entity <-> schema conversions."""

from app.domains.story import mapper as story_mapper
from app.schemas.epic import EpicCreate, EpicResponse, EpicUpdate
from models.epic import Epic


def to_entity(request: EpicCreate) -> Epic:
    """Build an unsaved epic with an empty story list."""
    return Epic(
        title=request.title,
        description=request.description,
        priority=request.priority,
        status=request.status,
        order_index=request.order_index,
        stories=[],
    )


def to_response(epic: Epic) -> EpicResponse:
    """Map an epic and, recursively, its stories and their tasks."""
    return EpicResponse(
        id=epic.id,
        project_id=epic.project_id,
        title=epic.title,
        description=epic.description,
        priority=epic.priority,
        status=epic.status,
        order_index=epic.order_index,
        stories=[story_mapper.to_response(story) for story in epic.stories or []],
        created_at=epic.created_at,
        updated_at=epic.updated_at,
    )


def apply_update(request: EpicUpdate, epic: Epic) -> Epic:
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(epic, field, value)
    return epic
