"""
Use case: Create an item.

Input: CreateItemCommand (name)
Output: ItemResult
Side effects: Inserts one row.
Failure cases: Persistence errors propagate.
"""

import logging

from app.application.items.dtos import CreateItemCommand, ItemResult
from app.domain.items.ports import ItemRepository

logger = logging.getLogger(__name__)


class CreateItemUseCase:
    """Persists a new item and returns it with its assigned id."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self, command: CreateItemCommand) -> ItemResult:
        """Run the create-item use case.

        Args:
            command: The creation request carrying the item name.

        Returns:
            The created item.
        """
        item = self._item_repo.add(command.name)
        logger.info("Created item id=%d", item.id)
        return ItemResult.from_entity(item)
