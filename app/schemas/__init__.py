# ruff: noqa: F403, F401
"""Schemas package initialization."""

from .ai import *
from .base import *
from .chat import *
from .epic import *
from .error import *
from .project import *
from .specification import *
from .story import *
from .task import *
