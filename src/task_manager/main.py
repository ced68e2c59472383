"""Command line entry point serving the task store API with uvicorn."""

import logging

import uvicorn

from . import config
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run() -> None:
    """Serve the API on SERVICE_HOST:SERVICE_PORT."""
    setup_logging()
    logger.info(f"Backend running on port {config.SERVICE_PORT}")
    uvicorn.run(
        "task_manager.api.app:app",
        host=config.SERVICE_HOST,
        port=config.SERVICE_PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
