"""
Dependency injection for the item resource.

Provides FastAPI dependency functions that wire the SQLAlchemy
repository into use cases via constructor injection.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.application.items.create_item import CreateItemUseCase
from app.application.items.delete_item import DeleteItemUseCase
from app.application.items.get_item import GetItemUseCase
from app.application.items.list_items import ListItemsUseCase
from app.application.items.update_item import UpdateItemUseCase
from app.domain.items.ports import ItemRepository
from app.infrastructure.database import get_session
from app.infrastructure.items.item_repository import SqlAlchemyItemRepository


def get_item_repository(session: Session = Depends(get_session)) -> ItemRepository:
    """Build the item repository bound to the request's session."""
    return SqlAlchemyItemRepository(session)


def get_create_item_use_case(
    item_repo: ItemRepository = Depends(get_item_repository),
) -> CreateItemUseCase:
    return CreateItemUseCase(item_repo=item_repo)


def get_list_items_use_case(
    item_repo: ItemRepository = Depends(get_item_repository),
) -> ListItemsUseCase:
    return ListItemsUseCase(item_repo=item_repo)


def get_get_item_use_case(
    item_repo: ItemRepository = Depends(get_item_repository),
) -> GetItemUseCase:
    return GetItemUseCase(item_repo=item_repo)


def get_update_item_use_case(
    item_repo: ItemRepository = Depends(get_item_repository),
) -> UpdateItemUseCase:
    return UpdateItemUseCase(item_repo=item_repo)


def get_delete_item_use_case(
    item_repo: ItemRepository = Depends(get_item_repository),
) -> DeleteItemUseCase:
    return DeleteItemUseCase(item_repo=item_repo)
