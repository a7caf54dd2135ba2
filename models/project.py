"""
Project model, the root of the planning hierarchy.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class Project(BaseModel):
    """
    Represents a project entity in the application.

    A project owns its epics, conversations and generated specifications.
    Deleting a project deletes all of them; the foreign keys cascade in the
    database so unloaded collections are never fetched just to be deleted.
    """

    __tablename__ = "projects"

    name = Column(String(100), nullable=False, unique=True)
    description = Column(String(500))

    # Relationships
    epics = relationship(
        "Epic",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[Epic.order_index, Epic.created_at]",
    )
    conversations = relationship(
        "Conversation",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Conversation.created_at",
    )
    specifications = relationship(
        "Specification",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Specification.version.desc()",
    )
