"""
Use case: Rename an existing item.

Input: UpdateItemCommand (item_id, name)
Output: ItemResult
Side effects: Updates one row.
Failure cases: NotFoundError when the item does not exist.
"""

import logging

from app.application.items.dtos import ItemResult, UpdateItemCommand
from app.domain.items.entities import RESOURCE_NAME
from app.domain.items.ports import ItemRepository
from app.shared.errors import NotFoundError

logger = logging.getLogger(__name__)


class UpdateItemUseCase:
    """Checks that the item exists, then renames it."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self, command: UpdateItemCommand) -> ItemResult:
        """Run the update-item use case.

        Args:
            command: The update request carrying id and new name.

        Returns:
            The updated item.

        Raises:
            NotFoundError: If no item has the given id.
        """
        if self._item_repo.get_by_id(command.item_id) is None:
            raise NotFoundError(RESOURCE_NAME)

        item = self._item_repo.update(command.item_id, command.name)
        logger.info("Updated item id=%d", item.id)
        return ItemResult.from_entity(item)
