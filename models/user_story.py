"""
User story model: "as a / I want / so that" items inside an epic.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel
from .enums import Priority, PriorityType, Status, StatusType


class UserStory(BaseModel):
    """
    Represents a user story entity in the application.
    """

    __tablename__ = "user_stories"

    epic_id = Column(UUID(), ForeignKey("epics.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    as_a = Column(String(500))
    i_want = Column(String(500))
    so_that = Column(String(500))
    priority = Column(PriorityType, nullable=False, default=Priority.MEDIUM)
    status = Column(StatusType, nullable=False, default=Status.TODO)
    order_index = Column(Integer, nullable=False, default=0)

    # Relationships
    epic = relationship("Epic", back_populates="stories")
    tasks = relationship(
        "Task",
        back_populates="story",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[Task.order_index, Task.created_at]",
    )
