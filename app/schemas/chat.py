"""Chat schemas for request/response serialization."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from models.enums import MessageRole

from .base import BaseModelSchema, BaseSchema, clean_required_text


class ChatRequest(BaseSchema):
    """Schema for chat request."""

    message: str = Field(..., min_length=1, max_length=10000, description="Message content")
    conversation_id: UUID | None = Field(None, description="Existing conversation ID, null for new")

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        return clean_required_text(v, "Message")


class MessageResponse(BaseModelSchema):
    """Schema for chat message response."""

    conversation_id: UUID
    role: MessageRole
    content: str


class ConversationResponse(BaseModelSchema):
    """Schema for chat conversation response."""

    project_id: UUID
    message_count: int = Field(default=0, description="Number of messages in conversation")


class ConversationDetailResponse(ConversationResponse):
    """Schema for detailed chat conversation response with messages."""

    messages: list[MessageResponse] = Field(default=[], description="Conversation messages")


class ChatResponse(BaseSchema):
    """Schema for chat response: the persisted exchange."""

    conversation_id: UUID
    user_message: MessageResponse
    assistant_message: MessageResponse
