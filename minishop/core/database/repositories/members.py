"""
Member repository.

Data access for registered members: save, lookup by id and by name.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.member import Member
from .base import AsyncBaseRepository


class MemberRepository(AsyncBaseRepository[Member]):
    """Repository for member data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Member)

    async def find_one(self, member_id: int) -> Optional[Member]:
        return await self.get_by_id(member_id)

    async def find_all(self) -> List[Member]:
        result = await self.session.execute(select(Member).order_by(Member.id))
        return list(result.scalars().all())

    async def find_by_name(self, name: str) -> List[Member]:
        """All members registered under exactly ``name``."""
        result = await self.session.execute(select(Member).where(Member.name == name).order_by(Member.id))
        return list(result.scalars().all())
