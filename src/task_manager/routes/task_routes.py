"""FastAPI routes for task-related operations.

This module implements the REST endpoints of the task list: list, create,
update and delete.
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..database import TaskStoreError
from ..dependencies import get_db
from ..schemas.task import TaskCreate, TaskDeleteResponse, TaskResponse, TaskUpdate
from ..services.task_service import (
    TaskNotFoundError,
    create_task,
    delete_task,
    list_tasks,
    update_task,
)

logger = logging.getLogger(__name__)

# Create API router
task_router = APIRouter()


def _internal_error() -> HTTPException:
    return HTTPException(status_code=500, detail="Internal server error")


@task_router.get("/tasks", response_model=List[TaskResponse])
def list_tasks_endpoint(db: Session = Depends(get_db)) -> List[TaskResponse]:
    """Return all tasks ordered by creation time, newest first."""
    logger.info("GET /tasks request")

    try:
        return [TaskResponse(**task) for task in list_tasks(db)]
    except TaskStoreError as e:
        logger.error(e, exc_info=True)
        raise _internal_error()


@task_router.post("/tasks", response_model=TaskResponse)
def create_task_endpoint(payload: TaskCreate, db: Session = Depends(get_db)) -> TaskResponse:
    """Create a task from a title.

    Returns:
        The created task with its server-assigned id and createdAt

    Raises:
        HTTPException: 500 for database errors
    """
    logger.info("POST /tasks request")

    try:
        return TaskResponse(**create_task(payload, db))
    except TaskStoreError as e:
        logger.error(e, exc_info=True)
        raise _internal_error()


@task_router.put("/tasks/{task_id}", response_model=TaskResponse)
def update_task_endpoint(
    task_id: UUID,
    payload: TaskUpdate,
    db: Session = Depends(get_db)
) -> TaskResponse:
    """Overwrite the provided fields of a task.

    Args:
        task_id: UUID of the task to update
        payload: Patchable fields; anything else in the body is ignored
        db: Database session dependency

    Returns:
        The full updated task

    Raises:
        HTTPException: 404 if task not found, 500 for database errors
    """
    logger.info(f"PUT /tasks/{task_id} request")

    try:
        return TaskResponse(**update_task(task_id, payload, db))
    except TaskNotFoundError as e:
        logger.warning(f"Task not found: {e}")
        raise HTTPException(status_code=404, detail="Task not found")
    except TaskStoreError as e:
        logger.error(e, exc_info=True)
        raise _internal_error()


@task_router.delete("/tasks/{task_id}", response_model=TaskDeleteResponse)
def delete_task_endpoint(task_id: UUID, db: Session = Depends(get_db)) -> TaskDeleteResponse:
    """Delete a task by ID.

    The acknowledgment is the same whether or not the task existed.

    Raises:
        HTTPException: 500 for database errors
    """
    logger.info(f"DELETE /tasks/{task_id} request")

    try:
        if not delete_task(task_id, db):
            logger.info(f"Task {task_id} was already absent")
    except TaskStoreError as e:
        logger.error(e, exc_info=True)
        raise _internal_error()

    return TaskDeleteResponse(message="Task deleted")
