"""Task service layer with business logic."""

import logging
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.domains.story.service import StoryService
from app.domains.task import mapper
from app.exceptions.base import NotFoundError
from app.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from models.task import Task

logger = logging.getLogger(__name__)


class TaskService:
    """Service class for task business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_tasks(self, story_id: UUID) -> list[TaskResponse]:
        await StoryService(self.db).get_story_or_raise(story_id)

        stmt = select(Task).where(Task.story_id == story_id).order_by(Task.order_index, Task.created_at)
        result = await self.db.execute(stmt)
        return [mapper.to_response(task) for task in result.scalars().all()]

    async def get_task(self, task_id: UUID) -> TaskResponse:
        return mapper.to_response(await self.get_task_or_raise(task_id))

    async def create_task(self, story_id: UUID, task_data: TaskCreate) -> TaskResponse:
        """Create a task under an existing user story."""
        story = await StoryService(self.db).get_story_or_raise(story_id)

        task = mapper.to_entity(task_data)
        task.story_id = story.id
        if task.order_index is None:
            task.order_index = await self._count_siblings(story.id)

        try:
            self.db.add(task)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Created task {task.id} in story {story.id}")
        return mapper.to_response(task)

    async def update_task(self, task_id: UUID, task_data: TaskUpdate) -> TaskResponse:
        task = await self.get_task_or_raise(task_id)
        mapper.apply_update(task_data, task)

        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        return mapper.to_response(task)

    async def delete_task(self, task_id: UUID) -> None:
        task = await self.get_task_or_raise(task_id)

        try:
            await self.db.delete(task)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def get_task_or_raise(self, task_id: UUID) -> Task:
        stmt = select(Task).where(Task.id == task_id)
        result = await self.db.execute(stmt)
        task = result.scalar_one_or_none()
        if not task:
            raise NotFoundError("Task", task_id)
        return task

    async def _count_siblings(self, story_id: UUID) -> int:
        stmt = select(func.count(Task.id)).where(Task.story_id == story_id)
        result = await self.db.execute(stmt)
        return result.scalar() or 0
