"""Components package for the task list UI.

This package contains modular UI components for the Streamlit application.
"""

from .task_header import render_task_header
from .task_input import render_task_input
from .task_list import render_task_list

__all__ = [
    "render_task_header",
    "render_task_input",
    "render_task_list",
]
