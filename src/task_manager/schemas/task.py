"""Pydantic schemas for task-related operations.

This module defines the input and output schemas for task operations,
including validation and serialization models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskCreate(BaseModel):
    """Input schema for creating a new task.

    Only the title is accepted; identifier, completion flag and creation
    timestamp are assigned by the store.
    """
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"title": "Buy milk"}},
    )

    title: str = Field(..., description="Task title (required)")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate that title is non-empty after stripping whitespace."""
        if not v or not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


class TaskUpdate(BaseModel):
    """Patchable fields of a task.

    Every field is optional and only the fields present in the request body
    are applied. Keys that are not listed here (id, createdAt, ...) are
    dropped during validation, so server-assigned values cannot be
    overwritten by a client.
    """
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"completed": True}},
    )

    title: Optional[str] = Field(None, description="New task title")
    completed: Optional[bool] = Field(None, description="New completion flag")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        """If a title is provided it must be non-empty after stripping whitespace."""
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()


class TaskResponse(BaseModel):
    """Output schema for task responses."""
    id: str = Field(..., description="Unique task identifier (UUID as string)")
    title: str = Field(..., description="Task title")
    completed: bool = Field(..., description="Completion flag")
    createdAt: str = Field(..., description="Task creation timestamp (ISO format string)")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Buy milk",
                "completed": False,
                "createdAt": "2024-01-15T10:30:00+00:00"
            }
        }
    }


class TaskDeleteResponse(BaseModel):
    """Acknowledgment returned by the delete endpoint."""
    message: str = Field(..., description="Confirmation message")


class HealthResponse(BaseModel):
    """Static readiness indicator."""
    status: str = Field(..., description="Service status")
