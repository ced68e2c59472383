"""Task list component.

Renders one of three branches: a loading notice while the first list
request is pending, an empty-state message when the cache is empty, or a
row per cached task with a completion checkbox and a delete button.
"""

import logging
from typing import Any, Dict

import streamlit as st

from ..client import TaskApiClient
from ..state_management import delete_task, get_tasks, toggle_task, toggle_widget_key

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading tasks..."
EMPTY_MESSAGE = "No tasks yet. Add one to get started!"


def render_task_item(client: TaskApiClient, task: Dict[str, Any]) -> None:
    """Render a single task row.

    Args:
        client: API client used by the toggle and delete callbacks
        task: Task dictionary with id, title and completed keys
    """
    task_id = task.get("id", "")
    title = task.get("title", "")
    completed = bool(task.get("completed", False))

    col_check, col_title, col_delete = st.columns([1, 8, 2])
    with col_check:
        # The key includes the flag so the widget follows the cached value
        st.checkbox(
            "Done",
            value=completed,
            key=toggle_widget_key(task_id, completed),
            on_change=toggle_task,
            args=(client, task_id, completed),
            label_visibility="collapsed",
        )
    with col_title:
        st.markdown(f"~~{title}~~" if completed else title)
    with col_delete:
        st.button(
            "Delete",
            key=f"delete_{task_id}",
            on_click=delete_task,
            args=(client, task_id),
        )


def render_task_list(client: TaskApiClient) -> None:
    """Render the cached task list or its loading/empty placeholder."""
    if st.session_state.get("loading", False):
        st.info(LOADING_MESSAGE)
        return

    tasks = get_tasks()
    if not tasks:
        st.markdown("📝")
        st.write(EMPTY_MESSAGE)
        return

    for task in tasks:
        try:
            render_task_item(client, task)
        except Exception as task_error:
            logger.error(f"Error rendering task {task.get('id', 'unknown')}: {task_error}", exc_info=True)
            continue
