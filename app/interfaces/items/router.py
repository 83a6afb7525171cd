"""
FastAPI router for the item resource.

All routes delegate to exactly one use case. No business logic here.
Input validation is handled by Pydantic schemas.
Errors are raised, never written here; the centralized error handlers
render them, so each request produces exactly one response.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

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
from app.domain.items.entities import RESOURCE_NAME
from app.interfaces.items.dependencies import (
    get_create_item_use_case,
    get_delete_item_use_case,
    get_get_item_use_case,
    get_list_items_use_case,
    get_update_item_use_case,
)
from app.interfaces.items.schemas import (
    MAX_ITEM_ID,
    MIN_ITEM_ID,
    ItemCreateRequest,
    ItemResponse,
    ItemUpdateRequest,
)
from app.interfaces.schemas import ErrorResponse
from app.shared.errors import NotFoundError

router = APIRouter(prefix="/items", tags=["items"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse}}

ItemId = Annotated[int, Path(ge=MIN_ITEM_ID, le=MAX_ITEM_ID, description="Item id")]


def _to_response(result: ItemResult) -> ItemResponse:
    return ItemResponse(id=result.id, name=result.name)


@router.post(
    "",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an item",
)
def create_item(
    request: ItemCreateRequest,
    use_case: CreateItemUseCase = Depends(get_create_item_use_case),
) -> ItemResponse:
    """Create a new item and return it with its assigned id."""
    result = use_case.execute(CreateItemCommand(name=request.name))
    return _to_response(result)


@router.get(
    "",
    response_model=list[ItemResponse],
    summary="List items",
)
def list_items(
    use_case: ListItemsUseCase = Depends(get_list_items_use_case),
) -> list[ItemResponse]:
    """Return every item."""
    return [_to_response(result) for result in use_case.execute()]


@router.get(
    "/{item_id}",
    response_model=ItemResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Get an item",
)
def get_item(
    item_id: ItemId,
    use_case: GetItemUseCase = Depends(get_get_item_use_case),
) -> ItemResponse:
    """Return one item, or 404 if it does not exist."""
    result = use_case.execute(GetItemQuery(item_id=item_id))
    if result is None:
        raise NotFoundError(RESOURCE_NAME)
    return _to_response(result)


@router.put(
    "/{item_id}",
    response_model=ItemResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Update an item",
)
def update_item(
    item_id: ItemId,
    request: ItemUpdateRequest,
    use_case: UpdateItemUseCase = Depends(get_update_item_use_case),
) -> ItemResponse:
    """Rename an existing item."""
    result = use_case.execute(UpdateItemCommand(item_id=item_id, name=request.name))
    return _to_response(result)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete an item",
)
def delete_item(
    item_id: ItemId,
    use_case: DeleteItemUseCase = Depends(get_delete_item_use_case),
) -> Response:
    """Delete an item; responds with an empty body."""
    use_case.execute(DeleteItemCommand(item_id=item_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
