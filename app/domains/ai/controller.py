"""AI API controller: chat, specification generation and plan extraction."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path, status

from app.core.dependencies import get_ai_service
from app.domains.ai.service import AIService
from app.schemas.ai import ExtractPlanRequest, GenerateSpecificationRequest
from app.schemas.chat import ChatRequest, ChatResponse
from app.schemas.epic import EpicResponse
from app.schemas.error import ErrorResponse
from app.schemas.specification import SpecificationResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/projects",
    tags=["ai"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse, "description": "AI service failure"},
    },
)


@router.post("/{project_id}/chat", response_model=ChatResponse)
async def chat(
    chat_request: ChatRequest,
    project_id: UUID = Path(..., description="Project ID"),
    service: AIService = Depends(get_ai_service),
):
    """Send a message to the AI assistant about a project.

    Omit ``conversationId`` to start a new conversation.
    """
    return await service.chat(project_id, chat_request)


@router.post(
    "/{project_id}/generate",
    response_model=SpecificationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_specification(
    project_id: UUID = Path(..., description="Project ID"),
    generate_request: GenerateSpecificationRequest | None = Body(None),
    service: AIService = Depends(get_ai_service),
):
    """Generate a new version of the project's specification document."""
    return await service.generate_specification(project_id, generate_request)


@router.post(
    "/{project_id}/extract-plan",
    response_model=list[EpicResponse],
    status_code=status.HTTP_201_CREATED,
)
async def extract_plan(
    extract_request: ExtractPlanRequest,
    project_id: UUID = Path(..., description="Project ID"),
    service: AIService = Depends(get_ai_service),
):
    """Turn a conversation into epics, stories and tasks added to the project."""
    return await service.extract_plan(project_id, extract_request)
