"""
Use case: List all items.

Output: list[ItemResult], ordered by id.
Side effects: None.
"""

import logging

from app.application.items.dtos import ItemResult
from app.domain.items.ports import ItemRepository

logger = logging.getLogger(__name__)


class ListItemsUseCase:
    """Returns every stored item."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self) -> list[ItemResult]:
        items = self._item_repo.list_all()
        logger.info("Listed %d items", len(items))
        return [ItemResult.from_entity(item) for item in items]
