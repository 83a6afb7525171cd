"""
Shared pytest fixtures.

The environment is pinned before the application is imported so that
settings resolve to an in-memory SQLite database with rate limiting off.
Every test gets a fresh database.
"""

import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "false"

from collections.abc import Iterator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from app.infrastructure.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    create_schema,
    get_session,
)
from app.main import app  # noqa: E402


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Fresh in-memory database with the schema created."""
    test_engine = build_engine("sqlite:///:memory:")
    create_schema(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    factory = build_session_factory(engine)
    with factory() as db_session:
        yield db_session


@pytest.fixture
def client(engine: Engine) -> Iterator[TestClient]:
    """TestClient whose requests run against the per-test database."""
    factory = build_session_factory(engine)

    def override_get_session() -> Iterator[Session]:
        db_session = factory()
        try:
            yield db_session
        finally:
            db_session.close()

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
