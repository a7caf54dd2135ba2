"""User story service layer with business logic."""

import logging
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.domains.epic.service import EpicService
from app.domains.story import mapper
from app.exceptions.base import NotFoundError
from app.schemas.story import UserStoryCreate, UserStoryResponse, UserStoryUpdate
from models.user_story import UserStory

logger = logging.getLogger(__name__)


class StoryService:
    """Service class for user story business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_stories(self, epic_id: UUID) -> list[UserStoryResponse]:
        """List the stories of an epic in display order, with their tasks."""
        await EpicService(self.db).get_epic_or_raise(epic_id)

        stmt = (
            select(UserStory)
            .options(selectinload(UserStory.tasks))
            .where(UserStory.epic_id == epic_id)
            .order_by(UserStory.order_index, UserStory.created_at)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return [mapper.to_response(story) for story in result.scalars().all()]

    async def get_story(self, story_id: UUID) -> UserStoryResponse:
        story = await self.get_story_or_raise(story_id, with_children=True)
        return mapper.to_response(story)

    async def create_story(self, epic_id: UUID, story_data: UserStoryCreate) -> UserStoryResponse:
        """Create a user story under an existing epic."""
        epic = await EpicService(self.db).get_epic_or_raise(epic_id)

        story = mapper.to_entity(story_data)
        story.epic_id = epic.id
        if story.order_index is None:
            story.order_index = await self._count_siblings(epic.id)

        try:
            self.db.add(story)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Created story {story.id} in epic {epic.id}")
        return mapper.to_response(story)

    async def update_story(self, story_id: UUID, story_data: UserStoryUpdate) -> UserStoryResponse:
        story = await self.get_story_or_raise(story_id, with_children=True)
        mapper.apply_update(story_data, story)

        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        return mapper.to_response(story)

    async def delete_story(self, story_id: UUID) -> None:
        story = await self.get_story_or_raise(story_id)

        try:
            await self.db.delete(story)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def get_story_or_raise(self, story_id: UUID, with_children: bool = False) -> UserStory:
        """Get user story by ID or raise NotFoundError."""
        stmt = select(UserStory).where(UserStory.id == story_id)
        if with_children:
            stmt = stmt.options(selectinload(UserStory.tasks)).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        story = result.scalar_one_or_none()
        if not story:
            raise NotFoundError("UserStory", story_id)
        return story

    async def _count_siblings(self, epic_id: UUID) -> int:
        stmt = select(func.count(UserStory.id)).where(UserStory.epic_id == epic_id)
        result = await self.db.execute(stmt)
        return result.scalar() or 0
