"""
Tests for the item application layer (use cases).

Tests use cases with a mocked repository port. No real infrastructure
needed. Each test verifies orchestration, not persistence.
"""

from unittest.mock import MagicMock

import pytest

from app.application.items.create_item import CreateItemUseCase
from app.application.items.delete_item import DeleteItemUseCase
from app.application.items.dtos import (
    CreateItemCommand,
    DeleteItemCommand,
    GetItemQuery,
    ItemResult,
    UpdateItemCommand,
)
from app.application.items.get_item import GetItemUseCase
from app.application.items.list_items import ListItemsUseCase
from app.application.items.update_item import UpdateItemUseCase
from app.domain.items.entities import Item
from app.domain.items.ports import ItemRepository
from app.shared.errors import NotFoundError


@pytest.fixture
def repo() -> MagicMock:
    return MagicMock(spec=ItemRepository)


class TestCreateItemUseCase:
    """Tests for the CreateItemUseCase."""

    def test_returns_created_item(self, repo: MagicMock) -> None:
        """The repository's assigned id flows back to the caller."""
        repo.add.return_value = Item(id=7, name="widget")

        result = CreateItemUseCase(item_repo=repo).execute(
            CreateItemCommand(name="widget")
        )

        assert result == ItemResult(id=7, name="widget")
        repo.add.assert_called_once_with("widget")


class TestListItemsUseCase:
    """Tests for the ListItemsUseCase."""

    def test_empty(self, repo: MagicMock) -> None:
        repo.list_all.return_value = []
        assert ListItemsUseCase(item_repo=repo).execute() == []

    def test_preserves_repository_order(self, repo: MagicMock) -> None:
        repo.list_all.return_value = [Item(id=1, name="a"), Item(id=2, name="b")]

        results = ListItemsUseCase(item_repo=repo).execute()

        assert [r.id for r in results] == [1, 2]


class TestGetItemUseCase:
    """Tests for the GetItemUseCase."""

    def test_existing_item(self, repo: MagicMock) -> None:
        repo.get_by_id.return_value = Item(id=3, name="c")

        result = GetItemUseCase(item_repo=repo).execute(GetItemQuery(item_id=3))

        assert result == ItemResult(id=3, name="c")
        repo.get_by_id.assert_called_once_with(3)

    def test_missing_item_returns_none(self, repo: MagicMock) -> None:
        """Absence is reported as None, not as an error."""
        repo.get_by_id.return_value = None
        assert GetItemUseCase(item_repo=repo).execute(GetItemQuery(item_id=3)) is None


class TestUpdateItemUseCase:
    """Tests for the UpdateItemUseCase."""

    def test_checks_existence_then_updates(self, repo: MagicMock) -> None:
        repo.get_by_id.return_value = Item(id=4, name="old")
        repo.update.return_value = Item(id=4, name="new")

        result = UpdateItemUseCase(item_repo=repo).execute(
            UpdateItemCommand(item_id=4, name="new")
        )

        assert result == ItemResult(id=4, name="new")
        repo.get_by_id.assert_called_once_with(4)
        repo.update.assert_called_once_with(4, "new")

    def test_missing_item_raises_not_found(self, repo: MagicMock) -> None:
        repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as excinfo:
            UpdateItemUseCase(item_repo=repo).execute(
                UpdateItemCommand(item_id=4, name="new")
            )

        assert excinfo.value.message == "Item not found"
        repo.update.assert_not_called()


class TestDeleteItemUseCase:
    """Tests for the DeleteItemUseCase."""

    def test_checks_existence_then_deletes(self, repo: MagicMock) -> None:
        repo.get_by_id.return_value = Item(id=5, name="gone")

        DeleteItemUseCase(item_repo=repo).execute(DeleteItemCommand(item_id=5))

        repo.delete.assert_called_once_with(5)

    def test_missing_item_raises_not_found(self, repo: MagicMock) -> None:
        repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            DeleteItemUseCase(item_repo=repo).execute(DeleteItemCommand(item_id=5))

        repo.delete.assert_not_called()
