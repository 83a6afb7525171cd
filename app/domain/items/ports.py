"""
Port interfaces (ABCs) for the item resource.

Ports define the contracts the application layer requires from the
persistence layer. Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.items.entities import Item


class ItemRepository(ABC):
    """Port for persisting and retrieving items."""

    @abstractmethod
    def add(self, name: str) -> Item:
        """Insert a new item and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every item ordered by ascending id."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, item_id: int) -> Optional[Item]:
        """Return an item by its id, or None if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    def update(self, item_id: int, name: str) -> Item:
        """Rename an existing item and return the updated row.

        Callers check existence first; behaviour for a missing id is
        adapter-defined.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, item_id: int) -> None:
        """Remove an existing item."""
        raise NotImplementedError
