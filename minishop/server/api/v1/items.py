"""
Item Endpoints.

Items are created under identifiers chosen by the client.
"""

from typing import List

from fastapi import APIRouter, status

from minishop.core.database.entities.item import Item
from minishop.core.logging_config import get_logger
from minishop.core.models.io.items import ItemCreateRequest, ItemRead, ItemUpdateRequest
from minishop.server.services.deps import ItemServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["items"])


@router.post(
    "",
    response_model=ItemRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Item",
    description="Stock a new item under the identifier given in the body.",
    responses={409: {"description": "An item with this identifier already exists"}},
)
async def create_item(request: ItemCreateRequest, item_service: ItemServiceDep) -> ItemRead:
    """
    Create an item.

    - **id**: Item identifier chosen by the client (e.g. an SKU).
    - **name**, **price**, **stock_quantity**: Item details.
    """
    item = Item(**request.model_dump())
    saved = await item_service.save_item(item)
    return ItemRead.model_validate(saved)


@router.post(
    "/{item_id}",
    response_model=ItemRead,
    summary="Update Item",
    description="Change the name, price or stock of an item. Omitted fields are kept.",
    responses={404: {"description": "Item not found"}},
)
async def update_item(item_id: str, request: ItemUpdateRequest, item_service: ItemServiceDep) -> ItemRead:
    """Update an item in place."""
    item = await item_service.update_item(item_id, **request.model_dump(exclude_unset=True))
    return ItemRead.model_validate(item)


@router.get("", response_model=List[ItemRead], summary="List Items")
async def list_items(item_service: ItemServiceDep) -> List[ItemRead]:
    """List every item ordered by identifier."""
    items = await item_service.find_items()
    return [ItemRead.model_validate(item) for item in items]


@router.get(
    "/{item_id}",
    response_model=ItemRead,
    summary="Get Item",
    responses={404: {"description": "Item not found"}},
)
async def get_item(item_id: str, item_service: ItemServiceDep) -> ItemRead:
    """Get one item by identifier."""
    return ItemRead.model_validate(await item_service.find_one(item_id))
