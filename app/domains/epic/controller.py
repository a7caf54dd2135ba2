"""Epic API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db
from app.domains.epic.service import EpicService
from app.schemas.epic import EpicCreate, EpicResponse, EpicUpdate
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1",
    tags=["epics"],
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.get("/projects/{project_id}/epics", response_model=list[EpicResponse])
async def get_project_epics(
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get the epics of a project in display order."""
    service = EpicService(db)
    return await service.list_epics(project_id)


@router.post("/projects/{project_id}/epics", response_model=EpicResponse, status_code=status.HTTP_201_CREATED)
async def create_epic(
    epic_data: EpicCreate,
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Create an epic in a project."""
    service = EpicService(db)
    return await service.create_epic(project_id, epic_data)


@router.get("/epics/{epic_id}", response_model=EpicResponse)
async def get_epic(
    epic_id: UUID = Path(..., description="Epic ID"),
    db: AsyncSession = Depends(get_db),
):
    service = EpicService(db)
    return await service.get_epic(epic_id)


@router.put("/epics/{epic_id}", response_model=EpicResponse)
async def update_epic(
    epic_data: EpicUpdate,
    epic_id: UUID = Path(..., description="Epic ID"),
    db: AsyncSession = Depends(get_db),
):
    """Update an epic. Fields left out of the body are unchanged."""
    service = EpicService(db)
    return await service.update_epic(epic_id, epic_data)


@router.delete("/epics/{epic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_epic(
    epic_id: UUID = Path(..., description="Epic ID"),
    db: AsyncSession = Depends(get_db),
):
    """Delete an epic with its stories and tasks."""
    service = EpicService(db)
    await service.delete_epic(epic_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
