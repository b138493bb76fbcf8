"""API tests for placing, cancelling and searching orders."""

import pytest
from httpx import AsyncClient
from sqlmodel import select

from minishop.core.database.entities import Order


@pytest.fixture
async def member_id(client: AsyncClient) -> int:
    response = await client.post(
        "/api/v1/members", json={"name": "userA", "city": "Seoul", "street": "Gangnam-daero 1", "zipcode": "06000"}
    )
    return response.json()["id"]


@pytest.fixture
async def item_id(client: AsyncClient) -> str:
    await client.post("/api/v1/items", json={"id": "BOOK-1", "name": "Book", "price": 10000, "stock_quantity": 10})
    return "BOOK-1"


async def place(client: AsyncClient, member_id: int, item_id: str, count: int = 2) -> int:
    response = await client.post("/api/v1/orders", json={"member_id": member_id, "item_id": item_id, "count": count})
    assert response.status_code == 200
    return response.json()["id"]


class TestCreateOrder:
    async def test_place_order(self, client: AsyncClient, member_id, item_id):
        order_id = await place(client, member_id, item_id)

        order = (await client.get(f"/api/v1/orders/{order_id}")).json()
        assert order["name"] == "userA"
        assert order["order_status"] == "ORDER"
        assert order["address"] == {"city": "Seoul", "street": "Gangnam-daero 1", "zipcode": "06000"}
        assert order["order_items"] == [{"item_id": "BOOK-1", "item_name": "Book", "order_price": 10000, "count": 2}]
        assert order["total_price"] == 20000
        assert (await client.get(f"/api/v1/items/{item_id}")).json()["stock_quantity"] == 8

    async def test_not_enough_stock(self, client: AsyncClient, member_id, item_id):
        response = await client.post("/api/v1/orders", json={"member_id": member_id, "item_id": item_id, "count": 11})

        assert response.status_code == 409
        assert response.json()["error_type"] == "NotEnoughStockError"
        assert (await client.get(f"/api/v1/items/{item_id}")).json()["stock_quantity"] == 10

    async def test_unknown_member(self, client: AsyncClient, item_id):
        response = await client.post("/api/v1/orders", json={"member_id": 999, "item_id": item_id, "count": 1})

        assert response.status_code == 404

    async def test_zero_count_rejected(self, client: AsyncClient, member_id, item_id):
        response = await client.post("/api/v1/orders", json={"member_id": member_id, "item_id": item_id, "count": 0})

        assert response.status_code == 422

    async def test_auditor_from_header(self, client: AsyncClient, session, member_id, item_id):
        response = await client.post(
            "/api/v1/orders",
            json={"member_id": member_id, "item_id": item_id, "count": 1},
            headers={"X-User-Id": "alice"},
        )

        order = (await session.execute(select(Order).where(Order.id == response.json()["id"]))).scalar_one()
        assert order.created_by == "alice"
        assert order.last_modified_by == "alice"


class TestCancelOrder:
    async def test_cancel(self, client: AsyncClient, member_id, item_id):
        order_id = await place(client, member_id, item_id)

        response = await client.post(f"/api/v1/orders/{order_id}/cancel")

        assert response.status_code == 200
        assert response.json() == {"id": order_id, "status": "CANCEL"}
        assert (await client.get(f"/api/v1/items/{item_id}")).json()["stock_quantity"] == 10

    async def test_cancel_missing(self, client: AsyncClient):
        response = await client.post("/api/v1/orders/999/cancel")

        assert response.status_code == 404


class TestSearchOrders:
    @pytest.fixture
    async def orders(self, client: AsyncClient, member_id, item_id) -> list:
        other = (await client.post("/api/v1/members", json={"name": "userB"})).json()["id"]
        first = await place(client, member_id, item_id, 1)
        second = await place(client, other, item_id, 1)
        await client.post(f"/api/v1/orders/{second}/cancel")
        return [first, second]

    async def test_no_filters(self, client: AsyncClient, orders):
        response = await client.get("/api/v1/orders")

        assert [o["order_id"] for o in response.json()] == orders

    async def test_by_status(self, client: AsyncClient, orders):
        response = await client.get("/api/v1/orders", params={"status": "CANCEL"})

        assert [o["name"] for o in response.json()] == ["userB"]

    async def test_by_member_name(self, client: AsyncClient, orders):
        response = await client.get("/api/v1/orders", params={"member_name": "rA"})

        assert [o["name"] for o in response.json()] == ["userA"]

    async def test_unknown_status_rejected(self, client: AsyncClient):
        response = await client.get("/api/v1/orders", params={"status": "SHIPPED"})

        assert response.status_code == 422
