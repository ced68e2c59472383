"""Input component for adding a new task."""

import streamlit as st

from ..client import TaskApiClient
from ..state_management import add_task


def _on_add(client: TaskApiClient) -> None:
    # Runs before the next render, so the widget value may still be reset here
    add_task(client, st.session_state.get("new_task_title", ""))


def render_task_input(client: TaskApiClient) -> None:
    """Render the new task form.

    The form submits on the Add button or on Enter. The input is bound to
    the new_task_title session key, which add_task clears after a
    successful create.

    Args:
        client: API client used by the submit callback
    """
    with st.form("new_task_form", clear_on_submit=False):
        col_input, col_button = st.columns([5, 1])
        with col_input:
            st.text_input(
                "New task",
                key="new_task_title",
                placeholder="What needs to be done?",
                label_visibility="collapsed",
            )
        with col_button:
            st.form_submit_button("Add", on_click=_on_add, args=(client,))
