"""Pytest configuration and fixtures for testing.

This module provides shared fixtures for database testing using in-memory SQLite
for fast and isolated test execution, and a stand-in for Streamlit's session state.
"""

import os

# The API module builds its app at import time; point it at SQLite before that
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from task_manager.api.app import app  # noqa: E402
from task_manager.database import TaskStore  # noqa: E402
from task_manager.dependencies import get_db  # noqa: E402
from task_manager.models.base import Base  # noqa: E402


class FakeSessionState(dict):
    """Dict with attribute access, mimicking st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        del self[name]


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite engine for testing.

    Yields:
        SQLAlchemy Engine instance configured for in-memory SQLite.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for testing.

    Yields:
        SQLAlchemy Session instance for database operations.
    """
    SessionLocal = sessionmaker(
        bind=db_engine,
        autoflush=False,
        expire_on_commit=False
    )

    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a FastAPI test client with database dependency override.

    Yields:
        TestClient instance configured with test database session.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def task_store():
    """A connected TaskStore backed by in-memory SQLite."""
    store = TaskStore("sqlite:///:memory:")
    assert store.connect() is True
    yield store
    store.dispose()


@pytest.fixture(scope="function")
def session_state():
    """Empty fake session state."""
    return FakeSessionState()
