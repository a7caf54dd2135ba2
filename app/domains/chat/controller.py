"""Conversation API controller with FastAPI endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db
from app.domains.chat.service import ConversationService
from app.schemas.chat import ConversationDetailResponse, ConversationResponse
from app.schemas.error import ErrorResponse

router = APIRouter(
    prefix="/api/v1",
    tags=["conversations"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("/projects/{project_id}/conversations", response_model=list[ConversationResponse])
async def get_project_conversations(
    project_id: UUID = Path(..., description="Project ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get the conversations of a project, newest first."""
    service = ConversationService(db)
    return await service.list_conversations(project_id)


@router.get("/conversations/{conversation_id}", response_model=ConversationDetailResponse)
async def get_conversation(
    conversation_id: UUID = Path(..., description="Conversation ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get a conversation with all its messages."""
    service = ConversationService(db)
    return await service.get_conversation(conversation_id)
