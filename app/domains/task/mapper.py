"""Task entity <-> schema conversions."""

from app.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from models.task import Task


def to_entity(request: TaskCreate) -> Task:
    """Build an unsaved task; id, parent and timestamps stay unset."""
    return Task(
        title=request.title,
        description=request.description,
        status=request.status,
        estimated_hours=request.estimated_hours,
        order_index=request.order_index,
    )


def to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        story_id=task.story_id,
        title=task.title,
        description=task.description,
        status=task.status,
        estimated_hours=task.estimated_hours,
        order_index=task.order_index,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


def apply_update(request: TaskUpdate, task: Task) -> Task:
    """Copy only the fields present in the request onto the task."""
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(task, field, value)
    return task
