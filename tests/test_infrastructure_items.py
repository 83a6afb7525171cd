"""
Tests for the SQLAlchemy item repository and database helpers.

Runs against SQLite databases created per test.
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from app.domain.items.entities import Item
from app.infrastructure import database
from app.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from app.infrastructure.items.item_repository import SqlAlchemyItemRepository
from app.shared.errors import NotFoundError


@pytest.fixture
def repo(session: Session) -> SqlAlchemyItemRepository:
    return SqlAlchemyItemRepository(session)


class TestSqlAlchemyItemRepository:
    """Tests for SqlAlchemyItemRepository."""

    def test_add_assigns_incrementing_ids(self, repo: SqlAlchemyItemRepository) -> None:
        first = repo.add("a")
        second = repo.add("b")
        assert first == Item(id=first.id, name="a")
        assert second.id > first.id

    def test_list_all_ordered_by_id(self, repo: SqlAlchemyItemRepository) -> None:
        created = [repo.add(name) for name in ("c", "a", "b")]
        assert repo.list_all() == created

    def test_get_by_id_missing(self, repo: SqlAlchemyItemRepository) -> None:
        assert repo.get_by_id(123) is None

    def test_update_persists(
        self, repo: SqlAlchemyItemRepository, session: Session
    ) -> None:
        item = repo.add("old")
        updated = repo.update(item.id, "new")

        assert updated == Item(id=item.id, name="new")
        session.expire_all()
        assert repo.get_by_id(item.id) == updated

    def test_delete_removes_row(self, repo: SqlAlchemyItemRepository) -> None:
        item = repo.add("gone")
        repo.delete(item.id)
        assert repo.get_by_id(item.id) is None
        assert repo.list_all() == []

    def test_mutating_missing_row_raises(self, repo: SqlAlchemyItemRepository) -> None:
        with pytest.raises(NotFoundError):
            repo.update(99, "x")
        with pytest.raises(NotFoundError):
            repo.delete(99)

    def test_mutation_rereads_row_deleted_elsewhere(self, tmp_path) -> None:
        """A row removed by another session after the lookup is not found."""
        file_engine = build_engine(f"sqlite:///{tmp_path / 'items.db'}")
        create_schema(file_engine)
        factory = build_session_factory(file_engine)
        try:
            with factory() as first, factory() as second:
                repo = SqlAlchemyItemRepository(first)
                item = repo.add("shared")
                assert repo.get_by_id(item.id) is not None

                SqlAlchemyItemRepository(second).delete(item.id)

                with pytest.raises(NotFoundError):
                    repo.update(item.id, "renamed")
        finally:
            file_engine.dispose()


class TestDatabaseHelpers:
    """Tests for engine construction and the process-wide singleton."""

    def test_memory_sqlite_uses_static_pool(self) -> None:
        engine = build_engine("sqlite:///:memory:")
        try:
            assert isinstance(engine.pool, StaticPool)
        finally:
            engine.dispose()

    def test_schema_creates_items_table(self, engine) -> None:
        assert "items" in inspect(engine).get_table_names()

    def test_init_database_is_idempotent(self) -> None:
        database.dispose_database()
        try:
            first = database.init_database("sqlite:///:memory:")
            second = database.init_database("sqlite:///:memory:")
            assert first is second
            assert database.SessionLocal is not None
        finally:
            database.dispose_database()
        assert database.engine is None
        assert database.SessionLocal is None

    def test_get_session_closes_session(self) -> None:
        database.dispose_database()
        try:
            database.init_database("sqlite:///:memory:")
            generator = database.get_session()
            db_session = next(generator)
            assert isinstance(db_session, Session)
            with pytest.raises(StopIteration):
                next(generator)
        finally:
            database.dispose_database()
