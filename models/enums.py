"""
Enumerations shared by the planning models and their schemas.
"""

import enum

from sqlalchemy import Enum as SAEnum


class Priority(str, enum.Enum):
    """Priority of an epic or user story."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Status(str, enum.Enum):
    """Progress status of an epic, user story or task."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class DocumentStatus(str, enum.Enum):
    """Lifecycle status of a generated specification document."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class MessageRole(str, enum.Enum):
    """Message role enumeration."""

    USER = "USER"
    ASSISTANT = "ASSISTANT"
    SYSTEM = "SYSTEM"


# Column types are shared so each PostgreSQL enum type is declared once.
PriorityType = SAEnum(Priority, name="priority")
StatusType = SAEnum(Status, name="work_status")
DocumentStatusType = SAEnum(DocumentStatus, name="document_status")
MessageRoleType = SAEnum(MessageRole, name="message_role")
