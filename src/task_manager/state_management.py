"""State management for the Streamlit task list.

The session state holds a disposable copy of the task list as last returned
by the API. It is only ever changed after a request completes: a successful
response is applied to the cache, a failed one is logged and the cache is
left as it was.

Keys:
    tasks: list of task dictionaries, newest first
    loading: True until the first list request has completed
    new_task_title: current value of the new task input
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import streamlit as st

from .client import TaskApiClient, TaskApiError

logger = logging.getLogger(__name__)


def initialize_session_state() -> None:
    """Initialize the session state keys used by the task list.

    The function is idempotent - subsequent calls will not re-initialize if
    already done.
    """
    if st.session_state.get("initialized", False):
        return

    logger.info("Initializing Streamlit session state")
    st.session_state.initialized = True
    st.session_state.tasks = []
    st.session_state.loading = True
    st.session_state.new_task_title = ""


def load_tasks(client: TaskApiClient) -> None:
    """Replace the cached task list with the server's list.

    The loading flag is cleared whether the request succeeds or fails.
    """
    try:
        tasks = client.list_tasks()
        st.session_state.tasks = list(tasks)
        logger.info(f"Loaded {len(tasks)} tasks into session state")
    except TaskApiError as e:
        logger.error(f"Error fetching tasks: {e}")
    finally:
        st.session_state.loading = False


def add_task(client: TaskApiClient, title: str) -> Optional[Dict[str, Any]]:
    """Create a task and prepend it to the cache.

    Blank titles are ignored without a request. On success the input field
    is cleared; on failure both the cache and the input are left untouched.

    Returns:
        The created task, or None if nothing was created
    """
    if not title or not title.strip():
        return None

    try:
        task = client.create_task(title)
    except TaskApiError as e:
        logger.error(f"Error adding task: {e}")
        return None

    st.session_state.tasks = [task] + list(st.session_state.tasks)
    st.session_state.new_task_title = ""
    return task


def toggle_widget_key(task_id: str, completed: bool) -> str:
    """Session key of the completion checkbox rendered for a cached task."""
    return f"toggle_{task_id}_{completed}"


def toggle_task(client: TaskApiClient, task_id: str, completed: bool) -> Optional[Dict[str, Any]]:
    """Send the inverted completion flag and swap in the server's record.

    On failure the checkbox is reset to the cached flag, so the widget never
    shows a state the server did not confirm.
    """
    try:
        updated = client.update_task(task_id, completed=not completed)
    except TaskApiError as e:
        logger.error(f"Error toggling task: {e}")
        st.session_state[toggle_widget_key(task_id, completed)] = completed
        return None

    st.session_state.tasks = [
        updated if task.get("id") == task_id else task
        for task in st.session_state.tasks
    ]
    return updated


def delete_task(client: TaskApiClient, task_id: str) -> bool:
    """Delete a task and drop it from the cache.

    Returns:
        True if the server acknowledged the delete
    """
    try:
        client.delete_task(task_id)
    except TaskApiError as e:
        logger.error(f"Error deleting task: {e}")
        return False

    st.session_state.tasks = [
        task for task in st.session_state.tasks if task.get("id") != task_id
    ]
    return True


def get_tasks() -> List[Dict[str, Any]]:
    return st.session_state.get("tasks", [])


def get_task_counts() -> Tuple[int, int]:
    """Return (total, completed) computed from the current cache."""
    tasks = get_tasks()
    return len(tasks), sum(1 for task in tasks if task.get("completed"))
