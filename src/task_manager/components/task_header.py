"""Header component showing the app title and task counters."""

import streamlit as st

from ..state_management import get_task_counts


def render_task_header() -> None:
    """Render the title and the total/completed counters.

    Both counters are derived from the cached list on every render.
    """
    total, completed = get_task_counts()
    st.title("✨ Task Manager")
    st.caption(f"Total: {total} • Completed: {completed}")
