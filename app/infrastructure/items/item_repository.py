"""
Adapter: Item repository.

Implements the ItemRepository port on top of a SQLAlchemy Session.
Each mutation commits immediately; one use case maps to one unit of work.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.domain.items.entities import RESOURCE_NAME, Item
from app.domain.items.ports import ItemRepository
from app.infrastructure.items.models import ItemModel
from app.shared.errors import NotFoundError

logger = logging.getLogger(__name__)


def _to_entity(row: ItemModel) -> Item:
    return Item(id=row.id, name=row.name)


class SqlAlchemyItemRepository(ItemRepository):
    """SQLAlchemy implementation of the item repository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, name: str) -> Item:
        """Insert a new item.

        Args:
            name: Display name of the item.

        Returns:
            The stored item with its database-assigned id.
        """
        row = ItemModel(name=name)
        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return _to_entity(row)

    def list_all(self) -> list[Item]:
        rows = self._session.scalars(select(ItemModel).order_by(ItemModel.id)).all()
        return [_to_entity(row) for row in rows]

    def get_by_id(self, item_id: int) -> Optional[Item]:
        row = self._session.get(ItemModel, item_id)
        return _to_entity(row) if row is not None else None

    def update(self, item_id: int, name: str) -> Item:
        """Rename an item.

        Raises:
            NotFoundError: If the row was deleted since the existence check.
        """
        row = self._require(item_id)
        row.name = name
        self._session.commit()
        self._session.refresh(row)
        return _to_entity(row)

    def delete(self, item_id: int) -> None:
        row = self._require(item_id)
        self._session.delete(row)
        self._session.commit()

    def _require(self, item_id: int) -> ItemModel:
        # Re-read instead of trusting the identity map filled by get_by_id.
        row = self._session.get(ItemModel, item_id, populate_existing=True)
        if row is None:
            logger.warning("Item id=%d disappeared before mutation", item_id)
            raise NotFoundError(RESOURCE_NAME)
        return row
