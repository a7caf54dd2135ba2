"""
Models package initialization.
"""

from .base import Base, BaseModel
from .conversation import Conversation
from .enums import DocumentStatus, MessageRole, Priority, Status
from .epic import Epic
from .message import Message
from .project import Project
from .specification import Specification
from .task import Task
from .user_story import UserStory

__all__ = [
    "Base",
    "BaseModel",
    "Project",
    "Epic",
    "UserStory",
    "Task",
    "Specification",
    # Chat models
    "Conversation",
    "Message",
    # Enumerations
    "Priority",
    "Status",
    "DocumentStatus",
    "MessageRole",
]
