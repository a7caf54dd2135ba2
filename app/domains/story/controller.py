"""User story API controller with FastAPI endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db
from app.domains.story.service import StoryService
from app.schemas.error import ErrorResponse
from app.schemas.story import UserStoryCreate, UserStoryResponse, UserStoryUpdate

router = APIRouter(
    prefix="/api/v1",
    tags=["stories"],
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.get("/epics/{epic_id}/stories", response_model=list[UserStoryResponse])
async def get_epic_stories(
    epic_id: UUID = Path(..., description="Epic ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get the user stories of an epic in display order."""
    service = StoryService(db)
    return await service.list_stories(epic_id)


@router.post("/epics/{epic_id}/stories", response_model=UserStoryResponse, status_code=status.HTTP_201_CREATED)
async def create_story(
    story_data: UserStoryCreate,
    epic_id: UUID = Path(..., description="Epic ID"),
    db: AsyncSession = Depends(get_db),
):
    """Create a user story in an epic."""
    service = StoryService(db)
    return await service.create_story(epic_id, story_data)


@router.get("/stories/{story_id}", response_model=UserStoryResponse)
async def get_story(
    story_id: UUID = Path(..., description="User story ID"),
    db: AsyncSession = Depends(get_db),
):
    service = StoryService(db)
    return await service.get_story(story_id)


@router.put("/stories/{story_id}", response_model=UserStoryResponse)
async def update_story(
    story_data: UserStoryUpdate,
    story_id: UUID = Path(..., description="User story ID"),
    db: AsyncSession = Depends(get_db),
):
    service = StoryService(db)
    return await service.update_story(story_id, story_data)


@router.delete("/stories/{story_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_story(
    story_id: UUID = Path(..., description="User story ID"),
    db: AsyncSession = Depends(get_db),
):
    service = StoryService(db)
    await service.delete_story(story_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
