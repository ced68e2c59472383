"""Pydantic schemas for the task manager.

This package contains all Pydantic models for request/response validation
and serialization.
"""

from .task import (
    HealthResponse,
    TaskCreate,
    TaskDeleteResponse,
    TaskResponse,
    TaskUpdate,
)

__all__ = ["TaskCreate", "TaskUpdate", "TaskResponse", "TaskDeleteResponse", "HealthResponse"]
