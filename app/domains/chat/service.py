"""Conversation service layer: reading stored AI conversations."""

import logging
from uuid import UUID

from sqlalchemy import desc, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.domains.chat import mapper
from app.domains.project.service import ProjectService
from app.exceptions.base import NotFoundError
from app.schemas.chat import ConversationDetailResponse, ConversationResponse
from models.conversation import Conversation
from models.message import Message

logger = logging.getLogger(__name__)


class ConversationService:
    """Service class for conversation queries."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_conversations(self, project_id: UUID) -> list[ConversationResponse]:
        """List a project's conversations, newest first, with message counts."""
        await ProjectService(self.db).get_project_or_raise(project_id)

        stmt = (
            select(Conversation, func.count(Message.id))
            .outerjoin(Message, Message.conversation_id == Conversation.id)
            .where(Conversation.project_id == project_id)
            .group_by(Conversation.id)
            .order_by(desc(Conversation.created_at))
        )
        result = await self.db.execute(stmt)
        return [mapper.to_response(conversation, count) for conversation, count in result.all()]

    async def get_conversation(self, conversation_id: UUID) -> ConversationDetailResponse:
        """Get a conversation with its messages in order."""
        stmt = (
            select(Conversation)
            .options(selectinload(Conversation.messages))
            .where(Conversation.id == conversation_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        conversation = result.scalar_one_or_none()
        if not conversation:
            raise NotFoundError("Conversation", conversation_id)
        return mapper.to_detail_response(conversation)
