"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from minishop.core.logging_config import get_logger
from minishop.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database_url, echo=settings.database_echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    One session spans one request. Work that was not committed when the
    request fails is rolled back before the session is closed.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Initialize the database.

    Creates missing tables when ``MINISHOP_CREATE_TABLES`` is enabled.
    NOTE: In production, Alembic migrations should be used instead and the
    flag switched off.
    """
    if not settings.create_tables_on_startup:
        logger.info("Table creation on startup disabled; expecting Alembic-managed schema")
        return
    await create_all(engine)
    logger.info("Database tables created")
