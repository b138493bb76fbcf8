"""API tests for the item endpoints."""

from httpx import AsyncClient

BOOK = {"id": "BOOK-1", "name": "Book", "price": 10000, "stock_quantity": 10}


class TestCreateItem:
    async def test_create(self, client: AsyncClient):
        response = await client.post("/api/v1/items", json=BOOK)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "BOOK-1"
        assert data["stock_quantity"] == 10
        assert data["created_date"] is not None

    async def test_duplicate_id_conflicts(self, client: AsyncClient):
        await client.post("/api/v1/items", json=BOOK)

        response = await client.post("/api/v1/items", json={**BOOK, "name": "Other"})

        assert response.status_code == 409
        assert response.json()["error_type"] == "IntegrityError"

    async def test_negative_price_rejected(self, client: AsyncClient):
        response = await client.post("/api/v1/items", json={**BOOK, "price": -1})

        assert response.status_code == 422


class TestUpdateItem:
    async def test_partial_update(self, client: AsyncClient):
        await client.post("/api/v1/items", json=BOOK)

        response = await client.post("/api/v1/items/BOOK-1", json={"stock_quantity": 3})

        assert response.status_code == 200
        assert response.json()["stock_quantity"] == 3
        assert response.json()["price"] == 10000

    async def test_missing_item(self, client: AsyncClient):
        response = await client.post("/api/v1/items/nope", json={"price": 1})

        assert response.status_code == 404


async def test_list_and_get(client: AsyncClient):
    await client.post("/api/v1/items", json={**BOOK, "id": "B"})
    await client.post("/api/v1/items", json={**BOOK, "id": "A"})

    listed = await client.get("/api/v1/items")
    single = await client.get("/api/v1/items/A")

    assert [item["id"] for item in listed.json()] == ["A", "B"]
    assert single.json()["id"] == "A"
