"""Service layer for the task manager.

This package contains the task persistence operations used by the API routes.
"""

from .task_service import (
    list_tasks,
    create_task,
    update_task,
    delete_task,
    get_task_by_id,
    TaskNotFoundError,
)

__all__ = [
    "list_tasks",
    "create_task",
    "update_task",
    "delete_task",
    "get_task_by_id",
    "TaskNotFoundError",
]
