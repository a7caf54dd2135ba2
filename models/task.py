"""
Task model: the leaf of the planning hierarchy.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel
from .enums import Status, StatusType


class Task(BaseModel):
    """
    Represents a task entity in the application.
    """

    __tablename__ = "tasks"

    story_id = Column(UUID(), ForeignKey("user_stories.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(String(2000))
    status = Column(StatusType, nullable=False, default=Status.TODO)
    estimated_hours = Column(Integer)
    order_index = Column(Integer, nullable=False, default=0)

    # Relationships
    story = relationship("UserStory", back_populates="tasks")
