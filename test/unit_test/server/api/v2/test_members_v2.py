"""API tests for the DTO-based member endpoints."""

from httpx import AsyncClient


class TestSaveMemberV2:
    async def test_register(self, client: AsyncClient):
        response = await client.post("/api/v2/members", json={"name": "kim"})

        assert response.status_code == 200
        assert set(response.json()) == {"id"}

    async def test_empty_name_rejected(self, client: AsyncClient):
        response = await client.post("/api/v2/members", json={"name": ""})

        assert response.status_code == 422

    async def test_duplicate_name_conflicts(self, client: AsyncClient):
        await client.post("/api/v2/members", json={"name": "kim"})

        response = await client.post("/api/v2/members", json={"name": "kim"})

        assert response.status_code == 409
        assert response.json()["detail"] == "Member 'kim' already exists"


class TestUpdateMemberV2:
    async def test_rename(self, client: AsyncClient):
        member_id = (await client.post("/api/v2/members", json={"name": "kim"})).json()["id"]

        response = await client.post(f"/api/v2/members/{member_id}", json={"name": "lee"})

        assert response.status_code == 200
        assert response.json() == {"id": member_id, "name": "lee"}

    async def test_missing_member(self, client: AsyncClient):
        response = await client.post("/api/v2/members/999", json={"name": "lee"})

        assert response.status_code == 404
        assert response.json() == {"detail": "Member 999 not found", "error_type": "EntityNotFoundError"}


async def test_list_wraps_names_in_result(client: AsyncClient):
    for name in ("kim", "lee"):
        await client.post("/api/v2/members", json={"name": name})

    response = await client.get("/api/v2/members")

    assert response.status_code == 200
    assert response.json() == {"data": [{"name": "kim"}, {"name": "lee"}]}
