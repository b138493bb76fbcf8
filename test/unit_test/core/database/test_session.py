"""Unit tests for the global session dependency and startup table creation."""

from unittest.mock import AsyncMock, patch

import pytest

from minishop.core.database import session as session_module
from minishop.core.database.session import get_session, init_db


class TestInitDb:
    async def test_creates_tables_when_enabled(self, monkeypatch):
        monkeypatch.setattr(session_module.settings, "create_tables_on_startup", True)

        with patch.object(session_module, "create_all", new=AsyncMock()) as mock_create_all:
            await init_db()

            mock_create_all.assert_awaited_once_with(session_module.engine)

    async def test_skips_when_disabled(self, monkeypatch):
        monkeypatch.setattr(session_module.settings, "create_tables_on_startup", False)

        with patch.object(session_module, "create_all", new=AsyncMock()) as mock_create_all:
            await init_db()

            mock_create_all.assert_not_awaited()


async def test_get_session_rolls_back_on_error():
    sessions = get_session()
    session = await sessions.__anext__()

    with patch.object(session, "rollback", new=AsyncMock()) as mock_rollback:
        with pytest.raises(RuntimeError):
            await sessions.athrow(RuntimeError("boom"))

        mock_rollback.assert_awaited_once()
