"""Project service layer with business logic."""

import logging
from uuid import UUID

from sqlalchemy import desc, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.domains.project import mapper
from app.exceptions.base import ConflictError, NotFoundError
from app.schemas.project import ProjectCreate, ProjectDetailResponse, ProjectResponse, ProjectUpdate
from models.conversation import Conversation
from models.epic import Epic
from models.project import Project
from models.task import Task
from models.user_story import UserStory

logger = logging.getLogger(__name__)


class ProjectService:
    """Service class for project business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_projects(self) -> list[ProjectResponse]:
        """List all projects, newest first, with their child counts."""
        stmt = select(Project).order_by(desc(Project.created_at))
        result = await self.db.execute(stmt)
        projects = result.scalars().all()

        counts = await self._get_counts([project.id for project in projects])
        return [mapper.to_response(project, counts.get(project.id)) for project in projects]

    async def get_project(self, project_id: UUID) -> ProjectResponse:
        project = await self.get_project_or_raise(project_id)
        counts = await self._get_counts([project.id])
        return mapper.to_response(project, counts.get(project.id))

    async def get_project_detail(self, project_id: UUID) -> ProjectDetailResponse:
        """Get a project with its epics, their stories and their tasks."""
        stmt = (
            select(Project)
            .options(selectinload(Project.epics).selectinload(Epic.stories).selectinload(UserStory.tasks))
            .where(Project.id == project_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        project = result.scalar_one_or_none()
        if not project:
            raise NotFoundError("Project", project_id)
        return mapper.to_detail_response(project)

    async def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create a new project."""

        # Check if project name already exists
        if await self._get_project_by_name(project_data.name):
            raise self._name_conflict(project_data.name)

        project = mapper.to_entity(project_data)

        try:
            self.db.add(project)
            await self.db.commit()
        except IntegrityError as e:
            # A concurrent request took the name after the check above
            await self.db.rollback()
            raise self._name_conflict(project_data.name) from e
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Created project {project.id}")
        return mapper.to_response(project)

    async def update_project(self, project_id: UUID, project_data: ProjectUpdate) -> ProjectResponse:
        """Apply a partial update to a project."""

        project = await self.get_project_or_raise(project_id)

        # Check if new name conflicts with existing project
        if "name" in project_data.model_fields_set and project_data.name != project.name:
            if await self._get_project_by_name(project_data.name):
                raise self._name_conflict(project_data.name)

        mapper.apply_update(project_data, project)

        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise self._name_conflict(project_data.name) from e
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        counts = await self._get_counts([project.id])
        return mapper.to_response(project, counts.get(project.id))

    async def delete_project(self, project_id: UUID) -> None:
        """Delete a project; its epics, stories, tasks, conversations and documents go with it."""

        project = await self.get_project_or_raise(project_id)

        try:
            await self.db.delete(project)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Deleted project {project_id}")

    async def get_project_or_raise(self, project_id: UUID) -> Project:
        """Get project by ID or raise NotFoundError."""
        stmt = select(Project).where(Project.id == project_id)
        result = await self.db.execute(stmt)
        project = result.scalar_one_or_none()
        if not project:
            raise NotFoundError("Project", project_id)
        return project

    # Private helper methods
    @staticmethod
    def _name_conflict(name: str) -> ConflictError:
        return ConflictError(f"A project named '{name}' already exists", details={"field": "name"})

    async def _get_project_by_name(self, name: str) -> Project | None:
        stmt = select(Project).where(Project.name == name)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_counts(self, project_ids: list[UUID]) -> dict[UUID, dict[str, int]]:
        """Count epics, stories, tasks and conversations per project."""
        counts: dict[UUID, dict[str, int]] = {
            project_id: {"epics": 0, "stories": 0, "tasks": 0, "conversations": 0}
            for project_id in project_ids
        }
        if not project_ids:
            return counts

        queries = {
            "epics": select(Epic.project_id, func.count(Epic.id))
            .where(Epic.project_id.in_(project_ids))
            .group_by(Epic.project_id),
            "stories": select(Epic.project_id, func.count(UserStory.id))
            .join(UserStory, UserStory.epic_id == Epic.id)
            .where(Epic.project_id.in_(project_ids))
            .group_by(Epic.project_id),
            "tasks": select(Epic.project_id, func.count(Task.id))
            .join(UserStory, UserStory.epic_id == Epic.id)
            .join(Task, Task.story_id == UserStory.id)
            .where(Epic.project_id.in_(project_ids))
            .group_by(Epic.project_id),
            "conversations": select(Conversation.project_id, func.count(Conversation.id))
            .where(Conversation.project_id.in_(project_ids))
            .group_by(Conversation.project_id),
        }

        for key, stmt in queries.items():
            result = await self.db.execute(stmt)
            for project_id, count in result.all():
                counts[project_id][key] = count

        return counts
