"""Conversation and message entity <-> schema conversions."""

from app.schemas.chat import ConversationDetailResponse, ConversationResponse, MessageResponse
from models.conversation import Conversation
from models.message import Message


def to_message_response(message: Message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        conversation_id=message.conversation_id,
        role=message.role,
        content=message.content,
        created_at=message.created_at,
        updated_at=message.updated_at,
    )


def to_response(conversation: Conversation, message_count: int = 0) -> ConversationResponse:
    return ConversationResponse(
        id=conversation.id,
        project_id=conversation.project_id,
        message_count=message_count,
        created_at=conversation.created_at,
        updated_at=conversation.updated_at,
    )


def to_detail_response(conversation: Conversation) -> ConversationDetailResponse:
    messages = [to_message_response(message) for message in conversation.messages or []]
    return ConversationDetailResponse(
        id=conversation.id,
        project_id=conversation.project_id,
        message_count=len(messages),
        messages=messages,
        created_at=conversation.created_at,
        updated_at=conversation.updated_at,
    )
