"""
Conversation model for AI assistant conversations about a project.
"""

from sqlalchemy import Column, ForeignKey
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class Conversation(BaseModel):
    """
    Represents a chat conversation entity in the application.

    Conversations have no terminal state; they are only removed together
    with their project.
    """

    __tablename__ = "conversations"

    project_id = Column(UUID(), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    project = relationship("Project", back_populates="conversations")
    messages = relationship(
        "Message",
        back_populates="conversation",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Message.created_at",
    )
