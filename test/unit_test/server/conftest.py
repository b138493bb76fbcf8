from __future__ import annotations

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from minishop.core.database import create_all, create_engine, create_sessionmaker


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database with all tables for one test."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(test_engine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(test_engine)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """A session for seeding and inspecting the test database directly."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client whose requests each get a session on the test database."""
    from minishop.core.database import get_session
    from minishop.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override

    # ASGITransport does not run the lifespan, so init_db never touches the real engine
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
