"""
Item service.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from minishop.core.database.entities.item import Item
from minishop.core.database.repositories.items import ItemRepository
from minishop.core.exceptions import EntityNotFoundError
from minishop.core.logging_config import get_logger
from minishop.core.monitoring import log_domain_event

from .transaction import transactional

logger = get_logger(__name__)


class ItemService:
    """Use cases around stock items."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.items = ItemRepository(session)

    @transactional
    async def save_item(self, item: Item) -> Item:
        """Store ``item``; a never-saved item is inserted, a detached one merged."""
        saved = await self.items.save(item)
        log_domain_event("item saved", item_id=saved.id)
        return saved

    @transactional
    async def update_item(
        self,
        item_id: str,
        name: Optional[str] = None,
        price: Optional[int] = None,
        stock_quantity: Optional[int] = None,
    ) -> Item:
        """Change the given fields of a stored item; ``None`` leaves a field as is."""
        item = await self.find_one(item_id)
        if name is not None:
            item.name = name
        if price is not None:
            item.price = price
        if stock_quantity is not None:
            item.stock_quantity = stock_quantity
        log_domain_event("item updated", item_id=item_id)
        return item

    async def find_items(self) -> List[Item]:
        return await self.items.find_all()

    async def find_one(self, item_id: str) -> Item:
        item = await self.items.find_one(item_id)
        if item is None:
            raise EntityNotFoundError("Item", item_id)
        return item
