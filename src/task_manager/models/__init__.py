"""SQLAlchemy ORM models for the task manager.

This package contains the task model and the base declarative class.
"""

from .base import Base
from .task import Task

__all__ = ["Base", "Task"]
