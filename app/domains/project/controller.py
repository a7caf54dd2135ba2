"""Project API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db
from app.domains.project.service import ProjectService
from app.schemas.error import ErrorResponse
from app.schemas.project import ProjectCreate, ProjectDetailResponse, ProjectResponse, ProjectUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/projects",
    tags=["projects"],
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new project."""
    service = ProjectService(db)
    return await service.create_project(project_data)


@router.get("", response_model=list[ProjectResponse])
async def get_projects(db: AsyncSession = Depends(get_db)):
    """Get all projects, newest first."""
    service = ProjectService(db)
    return await service.list_projects()


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific project by ID."""
    service = ProjectService(db)
    return await service.get_project(project_id)


@router.get("/{project_id}/detail", response_model=ProjectDetailResponse)
async def get_project_detail(
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get a project with its epics, stories and tasks."""
    service = ProjectService(db)
    return await service.get_project_detail(project_id)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_data: ProjectUpdate,
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Update a project. Fields left out of the body are unchanged."""
    service = ProjectService(db)
    return await service.update_project(project_id, project_data)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Delete a project and everything under it."""
    service = ProjectService(db)
    await service.delete_project(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
