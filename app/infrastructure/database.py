"""
Database engine and session management.

A single engine is created per process and reused by every request;
SQLAlchemy's pool manages the underlying connections. Each request
gets its own short-lived Session through the get_session dependency.
"""

import logging
from collections.abc import Iterator
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


# Deferred until first use so importing the app never opens a connection.
engine: Optional[Engine] = None
SessionLocal: Optional[sessionmaker[Session]] = None


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine suited to the given URL.

    SQLite connections are shared across FastAPI's worker threads, and
    in-memory SQLite needs a single static connection to keep its data.

    Args:
        database_url: SQLAlchemy connection URL.
        echo: Log every SQL statement.

    Returns:
        A configured Engine.
    """
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)

    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=bind,
        autoflush=False,
        expire_on_commit=False,
    )


def init_database(database_url: Optional[str] = None) -> Engine:
    """Initialize the process-wide engine and session factory.

    Calling this again after a successful initialization is a no-op.

    Args:
        database_url: Override for settings.database_url.

    Returns:
        The shared Engine.
    """
    global engine, SessionLocal

    if engine is not None:
        return engine

    engine = build_engine(
        database_url or settings.database_url,
        echo=settings.log_level.upper() == "DEBUG",
    )
    SessionLocal = build_session_factory(engine)
    logger.info("Database engine initialized (dialect=%s)", engine.dialect.name)
    return engine


def create_schema(bind: Optional[Engine] = None) -> None:
    """Create any missing tables for the registered ORM models."""
    # Register models on Base.metadata.
    from app.infrastructure.items import models  # noqa: F401

    target = bind or init_database()
    Base.metadata.create_all(bind=target)
    logger.info("Database schema ensured")


def dispose_database() -> None:
    """Dispose the shared engine and reset the singleton."""
    global engine, SessionLocal

    if engine is not None:
        engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    SessionLocal = None


def get_session() -> Iterator[Session]:
    """Yield a database session for one request.

    Rolls back on error and always closes the session.

    Yields:
        Session: SQLAlchemy database session.
    """
    init_database()
    session = SessionLocal()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
