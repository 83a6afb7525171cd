"""
Use case: Delete an existing item.

Input: DeleteItemCommand (item_id)
Output: None
Side effects: Deletes one row.
Failure cases: NotFoundError when the item does not exist.
"""

import logging

from app.application.items.dtos import DeleteItemCommand
from app.domain.items.entities import RESOURCE_NAME
from app.domain.items.ports import ItemRepository
from app.shared.errors import NotFoundError

logger = logging.getLogger(__name__)


class DeleteItemUseCase:
    """Checks that the item exists, then removes it."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self, command: DeleteItemCommand) -> None:
        if self._item_repo.get_by_id(command.item_id) is None:
            raise NotFoundError(RESOURCE_NAME)

        self._item_repo.delete(command.item_id)
        logger.info("Deleted item id=%d", command.item_id)
