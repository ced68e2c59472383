"""Database connection and session management using SQLAlchemy.

This module provides the TaskStore, the object that owns the engine and the
session factory for the lifetime of the service. It is constructed once at
startup and handed to request handlers through FastAPI dependencies.
"""

import logging
import os
import threading
from typing import Generator, Tuple

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Import config to ensure dotenv is loaded
from . import config
from .models.base import Base

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """Raised when the task store cannot be reached or a database operation fails."""
    pass


def get_db_url() -> str:
    """Get database URL from environment variables.

    Returns:
        Database URL string. Defaults to the taskmanager database on the
        postgres-service host if DATABASE_URL is not set.
    """
    return os.getenv("DATABASE_URL", config.DEFAULT_DATABASE_URL)


def create_engine_and_session_factory(db_url: str | None = None) -> Tuple[Engine, sessionmaker]:
    """Create SQLAlchemy engine and session factory.

    Args:
        db_url: Database URL. If None, uses get_db_url().

    Returns:
        Tuple of (engine, sessionmaker)

    Raises:
        Exception: If engine creation fails.
    """
    if db_url is None:
        db_url = get_db_url()

    try:
        if db_url.startswith("postgresql"):
            # PostgreSQL configuration with connection pooling
            engine = create_engine(
                db_url,
                pool_size=10,
                max_overflow=20,
                pool_timeout=30,
                pool_pre_ping=True
            )
        else:
            # SQLite configuration
            connect_args = {"check_same_thread": False}
            if db_url == "sqlite:///:memory:":
                # Use StaticPool for in-memory SQLite to maintain single connection
                engine = create_engine(
                    db_url,
                    connect_args=connect_args,
                    poolclass=StaticPool
                )
            else:
                engine = create_engine(db_url, connect_args=connect_args)

        SessionLocal = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False
        )

        return engine, SessionLocal

    except Exception as e:
        logger.error(f"Failed to create database engine: {e}", exc_info=True)
        raise


class TaskStore:
    """Process-wide handle on the task database.

    The engine is created by connect(). A store whose first connect() failed
    keeps serving: every later session() call retries the connection and
    raises TaskStoreError while the database is still unreachable.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self.db_url = db_url if db_url is not None else get_db_url()
        self.engine: Engine | None = None
        self.session_factory: sessionmaker | None = None
        self._schema_ready = False
        self._init_lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self._schema_ready

    def connect(self) -> bool:
        """Create the engine and the tasks table if needed.

        Returns:
            True when the database is reachable and the schema exists,
            False otherwise. Failures are logged, never raised.
        """
        try:
            self._ensure_initialized()
            logger.info("Database connected")
            return True
        except Exception as e:
            logger.error(f"Database connection error: {e}", exc_info=True)
            return False

    def _ensure_initialized(self) -> None:
        if self._schema_ready:
            return
        # Request threads may race here after a failed startup connect
        with self._init_lock:
            if self.session_factory is None:
                self.engine, self.session_factory = create_engine_and_session_factory(self.db_url)
            if not self._schema_ready:
                Base.metadata.create_all(bind=self.engine)
                self._schema_ready = True

    def session(self) -> Generator[Session, None, None]:
        """Get database session generator.

        Yields:
            SQLAlchemy Session instance.

        Raises:
            TaskStoreError: If the database cannot be reached.

        Ensures proper cleanup of the session even if errors occur.
        """
        try:
            self._ensure_initialized()
        except Exception as e:
            logger.error(f"Database unavailable: {e}", exc_info=True)
            raise TaskStoreError("Database unavailable") from e

        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def check_connection(self) -> bool:
        """Check database connectivity.

        Returns:
            True if connection successful, False otherwise.
        """
        db_gen = None
        try:
            db_gen = self.session()
            db = next(db_gen)
            db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database connection check failed: {e}", exc_info=True)
            return False
        finally:
            if db_gen is not None:
                db_gen.close()

    def dispose(self) -> None:
        """Dispose the engine; the next session() reconnects from scratch."""
        if self.engine is not None:
            try:
                self.engine.dispose()
            except Exception as e:
                logger.error(f"Error disposing database engine: {e}", exc_info=True)

        self.engine = None
        self.session_factory = None
        self._schema_ready = False
