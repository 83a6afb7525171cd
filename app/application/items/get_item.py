"""
Use case: Retrieve a single item.

Input: GetItemQuery (item_id)
Output: ItemResult, or None when the item does not exist.
Side effects: None.
"""

import logging
from typing import Optional

from app.application.items.dtos import GetItemQuery, ItemResult
from app.domain.items.ports import ItemRepository

logger = logging.getLogger(__name__)


class GetItemUseCase:
    """Looks up one item by id.

    Absence is not an error at this layer; the caller decides how
    to report it.
    """

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self, query: GetItemQuery) -> Optional[ItemResult]:
        """Run the get-item use case.

        Args:
            query: The lookup request carrying the item id.

        Returns:
            The item, or None if no row has that id.
        """
        logger.info("Retrieving item id=%d", query.item_id)
        item = self._item_repo.get_by_id(query.item_id)
        if item is None:
            return None
        return ItemResult.from_entity(item)
