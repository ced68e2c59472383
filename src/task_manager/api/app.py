"""FastAPI application for the task store service.

This module creates and configures the FastAPI application instance with
the task routes, CORS middleware and the lifespan that owns the TaskStore.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import config
from ..database import TaskStore, TaskStoreError
from ..logging_setup import setup_logging
from ..routes.task_routes import task_router
from ..schemas.task import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the task store at startup and dispose it at shutdown.

    A failed connection is logged and the service keeps serving; requests
    that need the database then fail individually.
    """
    store = TaskStore()
    store.connect()
    app.state.task_store = store
    try:
        yield
    finally:
        store.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    setup_logging()

    app = FastAPI(
        title="Task Manager API",
        description="REST API for the task list",
        version="1.0.0",
        lifespan=lifespan,
    )

    allow_all = config.CORS_ALLOW_ORIGINS == ["*"] or not config.CORS_ALLOW_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else config.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TaskStoreError)
    async def task_store_error_handler(request: Request, exc: TaskStoreError) -> JSONResponse:
        """Answer 500 when no database session could be opened for a request."""
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # Include routers with API prefix
    app.include_router(task_router, prefix="/api")

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="ok")

    return app


app = create_app()
