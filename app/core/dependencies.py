# app/core/dependencies.py
"""Shared FastAPI dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.domains.ai.client import GeminiCompletionClient, get_completion_client
from app.domains.ai.service import AIService

__all__ = ["get_db", "get_completion_client", "get_ai_service"]


async def get_ai_service(
    db: AsyncSession = Depends(get_db),
    client: GeminiCompletionClient = Depends(get_completion_client),
) -> AIService:
    """Build the AI service for one request."""
    return AIService(db, client)
