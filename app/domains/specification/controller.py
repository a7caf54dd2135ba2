"""Specification API controller with FastAPI endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db
from app.domains.specification.service import SpecificationService
from app.schemas.error import ErrorResponse
from app.schemas.specification import SpecificationResponse, SpecificationUpdate

router = APIRouter(
    prefix="/api/v1",
    tags=["specifications"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("/projects/{project_id}/specifications", response_model=list[SpecificationResponse])
async def get_project_specifications(
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get the specification documents of a project, newest version first."""
    service = SpecificationService(db)
    return await service.list_specifications(project_id)


@router.get("/specifications/{specification_id}", response_model=SpecificationResponse)
async def get_specification(
    specification_id: UUID = Path(..., description="Specification ID"),
    db: AsyncSession = Depends(get_db),
):
    service = SpecificationService(db)
    return await service.get_specification(specification_id)


@router.put("/specifications/{specification_id}", response_model=SpecificationResponse)
async def update_specification(
    specification_data: SpecificationUpdate,
    specification_id: UUID = Path(..., description="Specification ID"),
    db: AsyncSession = Depends(get_db),
):
    """Update the title or status of a specification."""
    service = SpecificationService(db)
    return await service.update_specification(specification_id, specification_data)


@router.delete("/specifications/{specification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_specification(
    specification_id: UUID = Path(..., description="Specification ID"),
    db: AsyncSession = Depends(get_db),
):
    service = SpecificationService(db)
    await service.delete_specification(specification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
