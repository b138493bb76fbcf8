"""Unit tests for ItemService."""

import pytest
from sqlalchemy.exc import IntegrityError

from minishop.core.database.entities import Item
from minishop.core.exceptions import EntityNotFoundError
from minishop.server.services import ItemService


async def test_save_and_find(session):
    service = ItemService(session)

    saved = await service.save_item(Item(id="A", name="Pen", price=300, stock_quantity=5))

    assert saved.created_date is not None
    assert (await service.find_one("A")).name == "Pen"


async def test_save_duplicate_id_rolls_back(session, session_maker):
    await ItemService(session).save_item(Item(id="A", name="Pen", price=300))

    async with session_maker() as other:
        with pytest.raises(IntegrityError):
            await ItemService(other).save_item(Item(id="A", name="Other", price=1))

    assert [i.name for i in await ItemService(session).find_items()] == ["Pen"]


async def test_update_only_given_fields(session):
    service = ItemService(session)
    await service.save_item(Item(id="A", name="Pen", price=300, stock_quantity=5))

    updated = await service.update_item("A", price=500)

    assert (updated.name, updated.price, updated.stock_quantity) == ("Pen", 500, 5)


async def test_find_missing_item(session):
    with pytest.raises(EntityNotFoundError):
        await ItemService(session).find_one("nope")
