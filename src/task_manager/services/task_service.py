"""Task service layer for business logic and data persistence.

Each operation is a single read or write against the tasks table. Database
errors are rolled back, logged and re-raised as TaskStoreError so that the
HTTP layer can answer with a server error instead of an unhandled failure.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import TaskStoreError
from ..models.task import Task
from ..schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskNotFoundError(ValueError):
    """Exception raised when a task with the specified ID is not found."""
    pass


def list_tasks(db: Session) -> List[Dict[str, Any]]:
    """Return every task, newest first.

    Args:
        db: SQLAlchemy database session

    Returns:
        List of task dictionaries ordered by creation time descending, ties
        broken by id descending. An empty store yields an empty list.

    Raises:
        TaskStoreError: When the query fails
    """
    logger.info("Listing tasks")

    try:
        stmt = select(Task).order_by(Task.created_at.desc(), Task.id.desc())
        tasks = db.execute(stmt).scalars().all()
        task_dicts = [task.to_dict() for task in tasks]

        logger.info(f"Successfully retrieved {len(task_dicts)} tasks")
        return task_dicts

    except SQLAlchemyError as e:
        logger.error(e, exc_info=True)
        raise TaskStoreError("Failed to list tasks") from e


def create_task(payload: TaskCreate, db: Session) -> Dict[str, Any]:
    """Create a new task.

    Args:
        payload: TaskCreate Pydantic model with validated input data
        db: SQLAlchemy database session

    Returns:
        Dictionary representation of the created task, including the
        server-assigned id and createdAt and completed set to False

    Raises:
        TaskStoreError: When the insert fails
    """
    logger.info(f"Creating task with title: {payload.title}")

    task = Task(title=payload.title)

    try:
        db.add(task)
        db.commit()
        db.refresh(task)
        logger.info(f"Successfully created task with ID: {task.id}")
        return task.to_dict()

    except SQLAlchemyError as e:
        logger.error(e, exc_info=True)
        db.rollback()
        raise TaskStoreError("Failed to create task") from e


def update_task(task_id: UUID, payload: TaskUpdate, db: Session) -> Dict[str, Any]:
    """Overwrite the fields present in payload on an existing task.

    Only title and completed can change; the identifier and the creation
    timestamp are never touched. Concurrent updates are last-writer-wins.

    Args:
        task_id: UUID of the task to update
        payload: TaskUpdate with the fields to overwrite
        db: SQLAlchemy database session

    Returns:
        Dictionary representation of the full updated task

    Raises:
        TaskNotFoundError: When no task with task_id exists; nothing is created
        TaskStoreError: When the update fails
    """
    logger.info(f"Updating task with ID: {task_id}")

    try:
        task = db.get(Task, task_id)
        if task is None:
            raise TaskNotFoundError(f"Task with ID {task_id} not found")

        changes = payload.model_dump(exclude_unset=True)

        if changes.get('title') is not None:
            task.title = changes['title']
        if changes.get('completed') is not None:
            task.completed = changes['completed']

        db.add(task)
        db.commit()
        db.refresh(task)

        logger.info(f"Successfully updated task with ID: {task.id}")
        return task.to_dict()

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(e, exc_info=True)
        raise TaskStoreError(f"Failed to update task {task_id}") from e


def delete_task(task_id: UUID, db: Session) -> bool:
    """Permanently delete a task.

    Deleting an identifier that does not exist is not an error.

    Args:
        task_id: UUID of the task to delete
        db: SQLAlchemy database session

    Returns:
        True if a record was removed, False if there was nothing to delete

    Raises:
        TaskStoreError: When the delete fails
    """
    logger.info(f"Deleting task with ID: {task_id}")

    try:
        task = db.get(Task, task_id)
        if task is None:
            logger.info(f"Task with ID {task_id} not found, nothing to delete")
            return False

        db.delete(task)
        db.commit()

        logger.info(f"Successfully deleted task with ID: {task_id}")
        return True

    except SQLAlchemyError as e:
        logger.error(e, exc_info=True)
        db.rollback()
        raise TaskStoreError(f"Failed to delete task {task_id}") from e


def get_task_by_id(db: Session, task_id: UUID) -> Optional[Dict[str, Any]]:
    """Retrieve a task by its UUID.

    Args:
        db: SQLAlchemy database session
        task_id: UUID of the task to retrieve

    Returns:
        Dictionary representation of the task if found, None otherwise

    Raises:
        TaskStoreError: When the lookup fails
    """
    try:
        task = db.get(Task, task_id)
        return task.to_dict() if task is not None else None

    except SQLAlchemyError as e:
        logger.error(e, exc_info=True)
        raise TaskStoreError(f"Failed to retrieve task {task_id}") from e
