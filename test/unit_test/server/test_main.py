"""Unit tests for the application wiring."""

from unittest.mock import AsyncMock, patch

from minishop.server.main import app, lifespan


def test_routes_registered():
    paths = set(app.openapi()["paths"])

    assert {
        "/health",
        "/version",
        "/api/v1/members",
        "/api/v2/members",
        "/api/v2/members/{member_id}",
        "/api/v1/items",
        "/api/v1/items/{item_id}",
        "/api/v1/orders",
        "/api/v1/orders/{order_id}",
        "/api/v1/orders/{order_id}/cancel",
        "/api/v2/simple-orders",
        "/api/v3/simple-orders",
        "/api/v4/simple-orders",
    } <= paths


async def test_lifespan_initializes_and_disposes():
    with patch("minishop.server.main.init_db", new=AsyncMock()) as mock_init_db, patch(
        "minishop.server.main.engine"
    ) as mock_engine:
        mock_engine.dispose = AsyncMock()

        async with lifespan(app):
            mock_init_db.assert_awaited_once()

        mock_engine.dispose.assert_awaited_once()
