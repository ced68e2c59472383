"""Root logger configuration shared by the API service and the Streamlit UI."""

import logging
import sys

from . import config

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _TaskManagerHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces only our own handler."""


def setup_logging(level: str | int | None = None) -> None:
    """Configure the root logger with a single stderr handler.

    Safe to call more than once: Streamlit re-executes the entry script on
    every interaction, so the handler installed by a previous call is
    replaced rather than stacked. Handlers installed by others are kept.

    Args:
        level: Log level name or number. Defaults to config.LOG_LEVEL.
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        if isinstance(handler, _TaskManagerHandler):
            root.removeHandler(handler)

    handler = _TaskManagerHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
