# Executed as a script by `streamlit run`, so imports are absolute.
import logging

import streamlit as st

from task_manager.client import TaskApiClient
from task_manager.logging_setup import setup_logging
from task_manager.state_management import initialize_session_state, load_tasks

from task_manager.components.task_header import render_task_header
from task_manager.components.task_input import render_task_input
from task_manager.components.task_list import render_task_list

st.set_page_config(page_title="Task Manager", page_icon="✨", layout="centered")

logger = logging.getLogger(__name__)


def get_api_client() -> TaskApiClient:
    """Return the API client of the current session, creating it once."""
    if "api_client" not in st.session_state:
        st.session_state.api_client = TaskApiClient()
    return st.session_state.api_client


def render_ui() -> None:
    """Render the task list page.

    On the first run of a session the task list is fetched from the API
    while a spinner is shown; later runs render from the session cache.
    """
    setup_logging()
    initialize_session_state()
    client = get_api_client()

    try:
        if st.session_state.loading:
            with st.spinner("Loading tasks..."):
                load_tasks(client)

        render_task_header()
        render_task_input(client)
        render_task_list(client)

    except Exception as e:
        logger.error(e, exc_info=True)
        st.error("An error occurred while rendering the task list. Please refresh the page.")


render_ui()
