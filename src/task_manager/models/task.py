"""Task SQLAlchemy ORM model.

The column set mirrors the storage contract of the task list: a required
title, a completion flag defaulting to false and a creation timestamp
defaulting to now. The identifier is generated on insert.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import Boolean, Column, DateTime, Index, String
from sqlalchemy.dialects.postgresql import UUID

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """A single entry of the task list."""
    __tablename__ = 'tasks'

    __table_args__ = (
        Index('idx_task_created_at', 'created_at'),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, unique=True, nullable=False)
    title = Column(String, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __init__(self, **kwargs):
        """Initialize Task with server-side defaults applied eagerly.

        Column defaults only fire on flush; setting them here means a
        freshly constructed Task already carries its id, flag and timestamp.
        """
        kwargs.setdefault('id', uuid.uuid4())
        kwargs.setdefault('completed', False)
        kwargs.setdefault('created_at', _utcnow())
        super().__init__(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Task to its wire representation.

        Returns:
            Dict with keys id (UUID string), title, completed and createdAt
            (ISO-8601 string, UTC).
        """
        created_at = self.created_at
        if created_at is not None and created_at.tzinfo is None:
            # SQLite returns naive datetimes - they were stored as UTC
            created_at = created_at.replace(tzinfo=timezone.utc)

        return {
            'id': str(self.id),
            'title': self.title,
            'completed': bool(self.completed),
            'createdAt': created_at.isoformat() if created_at else None,
        }

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', completed={self.completed})>"
