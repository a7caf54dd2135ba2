"""User story entity <-> schema conversions."""

from app.domains.task import mapper as task_mapper
from app.schemas.story import UserStoryCreate, UserStoryResponse, UserStoryUpdate
from models.user_story import UserStory


def to_entity(request: UserStoryCreate) -> UserStory:
    """Build an unsaved story with an empty task list."""
    return UserStory(
        title=request.title,
        as_a=request.as_a,
        i_want=request.i_want,
        so_that=request.so_that,
        priority=request.priority,
        status=request.status,
        order_index=request.order_index,
        tasks=[],
    )


def to_response(story: UserStory) -> UserStoryResponse:
    return UserStoryResponse(
        id=story.id,
        epic_id=story.epic_id,
        title=story.title,
        as_a=story.as_a,
        i_want=story.i_want,
        so_that=story.so_that,
        priority=story.priority,
        status=story.status,
        order_index=story.order_index,
        tasks=[task_mapper.to_response(task) for task in story.tasks or []],
        created_at=story.created_at,
        updated_at=story.updated_at,
    )


def apply_update(request: UserStoryUpdate, story: UserStory) -> UserStory:
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(story, field, value)
    return story
