"""
Item repository.

Items carry caller-assigned identifiers, so ``save`` relies on
``Item.is_new`` to choose between INSERT and merge.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.item import Item
from .base import AsyncBaseRepository


class ItemRepository(AsyncBaseRepository[Item]):
    """Repository for item data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Item)

    async def find_one(self, item_id: str) -> Optional[Item]:
        return await self.get_by_id(item_id)

    async def find_all(self) -> List[Item]:
        result = await self.session.execute(select(Item).order_by(Item.id))
        return list(result.scalars().all())
