"""Task API controller with FastAPI endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db
from app.domains.task.service import TaskService
from app.schemas.error import ErrorResponse
from app.schemas.task import TaskCreate, TaskResponse, TaskUpdate

router = APIRouter(
    prefix="/api/v1",
    tags=["tasks"],
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.get("/stories/{story_id}/tasks", response_model=list[TaskResponse])
async def get_story_tasks(
    story_id: UUID = Path(..., description="User story ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get the tasks of a user story in display order."""
    service = TaskService(db)
    return await service.list_tasks(story_id)


@router.post("/stories/{story_id}/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    story_id: UUID = Path(..., description="User story ID"),
    db: AsyncSession = Depends(get_db),
):
    """Create a task in a user story."""
    service = TaskService(db)
    return await service.create_task(story_id, task_data)


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: UUID = Path(..., description="Task ID"),
    db: AsyncSession = Depends(get_db),
):
    service = TaskService(db)
    return await service.get_task(task_id)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_data: TaskUpdate,
    task_id: UUID = Path(..., description="Task ID"),
    db: AsyncSession = Depends(get_db),
):
    service = TaskService(db)
    return await service.update_task(task_id, task_data)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: UUID = Path(..., description="Task ID"),
    db: AsyncSession = Depends(get_db),
):
    service = TaskService(db)
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
