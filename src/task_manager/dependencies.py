"""FastAPI dependencies injecting the task store and a database session."""

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .database import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """Return the TaskStore created by the application lifespan."""
    return request.app.state.task_store


def get_db(store: TaskStore = Depends(get_task_store)) -> Generator[Session, None, None]:
    """Yield a per-request session from the injected store."""
    yield from store.session()
