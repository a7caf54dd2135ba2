"""Epic service layer with business logic."""

import logging
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.domains.epic import mapper
from app.domains.project.service import ProjectService
from app.exceptions.base import NotFoundError
from app.schemas.epic import EpicCreate, EpicResponse, EpicUpdate
from models.epic import Epic
from models.user_story import UserStory

logger = logging.getLogger(__name__)


class EpicService:
    """Service class for epic business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_epics(self, project_id: UUID) -> list[EpicResponse]:
        """List the epics of a project in display order, with their stories and tasks."""
        await ProjectService(self.db).get_project_or_raise(project_id)

        stmt = (
            select(Epic)
            .options(selectinload(Epic.stories).selectinload(UserStory.tasks))
            .where(Epic.project_id == project_id)
            .order_by(Epic.order_index, Epic.created_at)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return [mapper.to_response(epic) for epic in result.scalars().all()]

    async def get_epic(self, epic_id: UUID) -> EpicResponse:
        epic = await self.get_epic_or_raise(epic_id, with_children=True)
        return mapper.to_response(epic)

    async def create_epic(self, project_id: UUID, epic_data: EpicCreate) -> EpicResponse:
        """Create an epic under an existing project."""
        project = await ProjectService(self.db).get_project_or_raise(project_id)

        epic = mapper.to_entity(epic_data)
        epic.project_id = project.id
        if epic.order_index is None:
            epic.order_index = await self._count_siblings(project.id)

        try:
            self.db.add(epic)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Created epic {epic.id} in project {project.id}")
        return mapper.to_response(epic)

    async def update_epic(self, epic_id: UUID, epic_data: EpicUpdate) -> EpicResponse:
        epic = await self.get_epic_or_raise(epic_id, with_children=True)
        mapper.apply_update(epic_data, epic)

        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        return mapper.to_response(epic)

    async def delete_epic(self, epic_id: UUID) -> None:
        """Delete an epic together with its stories and tasks."""
        epic = await self.get_epic_or_raise(epic_id)

        try:
            await self.db.delete(epic)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def get_epic_or_raise(self, epic_id: UUID, with_children: bool = False) -> Epic:
        """Get epic by ID or raise NotFoundError."""
        stmt = select(Epic).where(Epic.id == epic_id)
        if with_children:
            stmt = stmt.options(selectinload(Epic.stories).selectinload(UserStory.tasks)).execution_options(
                populate_existing=True
            )
        result = await self.db.execute(stmt)
        epic = result.scalar_one_or_none()
        if not epic:
            raise NotFoundError("Epic", epic_id)
        return epic

    async def _count_siblings(self, project_id: UUID) -> int:
        stmt = select(func.count(Epic.id)).where(Epic.project_id == project_id)
        result = await self.db.execute(stmt)
        return result.scalar() or 0
