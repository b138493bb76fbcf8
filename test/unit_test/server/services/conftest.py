from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from minishop.core.database.entities import Address, Item, Member


@pytest.fixture
async def member(session: AsyncSession) -> Member:
    member = Member(name="userA")
    member.set_address(Address(city="Seoul", street="Gangnam-daero 1", zipcode="06000"))
    session.add(member)
    await session.commit()
    return member


@pytest.fixture
async def item(session: AsyncSession) -> Item:
    item = Item(id="BOOK-1", name="Book", price=10000, stock_quantity=10)
    session.add(item)
    await session.commit()
    return item
