"""
Epic model for grouping user stories inside a project.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel
from .enums import Priority, PriorityType, Status, StatusType


class Epic(BaseModel):
    """
    Represents an epic entity in the application.
    """

    __tablename__ = "epics"

    project_id = Column(UUID(), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(150), nullable=False)
    description = Column(String(1000))
    priority = Column(PriorityType, nullable=False, default=Priority.MEDIUM)
    status = Column(StatusType, nullable=False, default=Status.TODO)
    order_index = Column(Integer, nullable=False, default=0)

    # Relationships
    project = relationship("Project", back_populates="epics")
    stories = relationship(
        "UserStory",
        back_populates="epic",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[UserStory.order_index, UserStory.created_at]",
    )
