"""Specification document service layer."""

import logging
from uuid import UUID

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.domains.project.service import ProjectService
from app.domains.specification import mapper
from app.exceptions.base import NotFoundError
from app.schemas.specification import SpecificationResponse, SpecificationUpdate
from models.specification import Specification

logger = logging.getLogger(__name__)


class SpecificationService:
    """Service class for stored specification documents."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_specifications(self, project_id: UUID) -> list[SpecificationResponse]:
        """List a project's specifications, newest version first."""
        await ProjectService(self.db).get_project_or_raise(project_id)

        stmt = (
            select(Specification)
            .where(Specification.project_id == project_id)
            .order_by(desc(Specification.version), desc(Specification.created_at))
        )
        result = await self.db.execute(stmt)
        return [mapper.to_response(specification) for specification in result.scalars().all()]

    async def get_specification(self, specification_id: UUID) -> SpecificationResponse:
        return mapper.to_response(await self.get_specification_or_raise(specification_id))

    async def update_specification(
        self, specification_id: UUID, specification_data: SpecificationUpdate
    ) -> SpecificationResponse:
        """Update a specification's title or status; the content is immutable."""
        specification = await self.get_specification_or_raise(specification_id)
        mapper.apply_update(specification_data, specification)

        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        return mapper.to_response(specification)

    async def delete_specification(self, specification_id: UUID) -> None:
        specification = await self.get_specification_or_raise(specification_id)

        try:
            await self.db.delete(specification)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        logger.info(f"Deleted specification {specification_id}")

    async def get_specification_or_raise(self, specification_id: UUID) -> Specification:
        stmt = select(Specification).where(Specification.id == specification_id)
        result = await self.db.execute(stmt)
        specification = result.scalar_one_or_none()
        if not specification:
            raise NotFoundError("Specification", specification_id)
        return specification
