"""
Specification model for AI-generated project specification documents.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel
from .enums import DocumentStatus, DocumentStatusType


class Specification(BaseModel):
    """
    Represents a versioned specification document of a project.

    :ivar content: The validated JSON document, stored as text.
    :type content: str
    :ivar version: 1 + the number of documents the project had when this one was generated.
    :type version: int
    """

    __tablename__ = "specifications"

    project_id = Column(UUID(), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    status = Column(DocumentStatusType, nullable=False, default=DocumentStatus.DRAFT)
    version = Column(Integer, nullable=False, default=1)

    # Relationships
    project = relationship("Project", back_populates="specifications")
