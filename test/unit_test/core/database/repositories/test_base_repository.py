"""Unit tests for AsyncBaseRepository save/insert-or-merge and CRUD helpers."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from minishop.core.database.base import utc_now
from minishop.core.database.entities import Item, Member
from minishop.core.database.repositories import ItemRepository, MemberRepository


class TestSave:
    async def test_new_entity_is_added_not_merged(self, sample_item_data):
        session = MagicMock()
        session.flush = AsyncMock()
        session.merge = AsyncMock()
        item = Item(**sample_item_data)

        saved = await ItemRepository(session).save(item)

        assert saved is item
        session.add.assert_called_once_with(item)
        session.merge.assert_not_called()

    async def test_stored_entity_is_merged(self, sample_item_data):
        session = MagicMock()
        session.flush = AsyncMock()
        merged = Item(**sample_item_data)
        session.merge = AsyncMock(return_value=merged)
        item = Item(**sample_item_data, created_date=utc_now())

        saved = await ItemRepository(session).save(item)

        assert saved is merged
        session.add.assert_not_called()
        session.merge.assert_awaited_once_with(item)

    async def test_insert_then_merge_detached_copy(self, in_memory_session, sample_item_data):
        repo = ItemRepository(in_memory_session)
        stored = await repo.save(Item(**sample_item_data))
        await in_memory_session.commit()
        in_memory_session.expunge_all()

        detached = Item(**{**sample_item_data, "price": 12000}, created_date=stored.created_date)
        merged = await repo.save(detached)
        await in_memory_session.commit()

        assert merged is not detached
        assert merged.price == 12000
        assert merged.created_date == stored.created_date
        assert len(await repo.find_all()) == 1

    async def test_member_gets_generated_id(self, in_memory_session):
        member = await MemberRepository(in_memory_session).save(Member(name="userA"))

        assert member.id is not None
        assert member.created_date is not None


class TestLookups:
    async def test_find_by_name(self, in_memory_session):
        repo = MemberRepository(in_memory_session)
        await repo.save(Member(name="userA"))
        await repo.save(Member(name="userB"))

        assert [m.name for m in await repo.find_by_name("userA")] == ["userA"]
        assert await repo.find_by_name("userC") == []

    async def test_find_all_ordered_by_id(self, in_memory_session):
        repo = MemberRepository(in_memory_session)
        for name in ("b", "a", "c"):
            await repo.save(Member(name=name))

        assert [m.name for m in await repo.find_all()] == ["b", "a", "c"]

    async def test_list_with_filters_and_paging(self, in_memory_session):
        repo = ItemRepository(in_memory_session)
        for index in range(3):
            await repo.save(Item(id=f"I-{index}", name="same" if index else "other", price=index))

        assert [i.id for i in await repo.list(filters={"name": "same"})] == ["I-1", "I-2"]
        assert len(await repo.list(limit=1, offset=1)) == 1

    async def test_delete(self, in_memory_session, sample_item_data):
        repo = ItemRepository(in_memory_session)
        await repo.save(Item(**sample_item_data))

        assert await repo.delete(sample_item_data["id"]) is True
        assert await repo.delete(sample_item_data["id"]) is False
        assert await repo.find_one(sample_item_data["id"]) is None
