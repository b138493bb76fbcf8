"""Test configuration for database unit tests.

This module provides common fixtures for testing the database layer
against in-memory SQLite: an engine with every table created, a session on
top of it and a few stored entities to query.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from minishop.core.database import create_all, create_engine, create_sessionmaker
from minishop.core.database.entities import Address, Delivery, Item, Member, Order, OrderItem


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine with all tables."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest.fixture(scope="function")
def sample_address() -> Address:
    return Address(city="Seoul", street="Gangnam-daero 1", zipcode="06000")


@pytest.fixture(scope="function")
def sample_item_data() -> dict:
    """Sample item data for testing."""
    return {"id": "BOOK-JPA", "name": "JPA Book", "price": 10000, "stock_quantity": 100}


async def store_order(session: AsyncSession, member: Member, item: Item, count: int) -> Order:
    """Place and flush an order of ``count`` units of ``item`` for ``member``."""
    order = Order.create(
        member,
        Delivery.for_address(member.address),
        OrderItem.create(item, order_price=item.price, count=count),
    )
    session.add(order)
    await session.flush()
    return order


@pytest.fixture(scope="function")
async def stored_orders(in_memory_session: AsyncSession, sample_address: Address) -> list:
    """Two members with one order each; the second order is cancelled."""
    user_a = Member(name="userA")
    user_a.set_address(sample_address)
    user_b = Member(name="userB")
    user_b.set_address(Address(city="Busan", street="Haeundae-ro 2", zipcode="48000"))
    book = Item(id="BOOK-1", name="Book", price=10000, stock_quantity=100)
    in_memory_session.add_all([user_a, user_b, book])
    await in_memory_session.flush()

    first = await store_order(in_memory_session, user_a, book, 1)
    second = await store_order(in_memory_session, user_b, book, 2)
    second.cancel()
    await in_memory_session.commit()
    return [first, second]
