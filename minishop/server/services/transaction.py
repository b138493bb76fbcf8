"""
Service-level transaction boundary.

``@transactional`` wraps an async service method: the session is committed
when the method returns and rolled back when it raises. The wrapped object
must expose its ``AsyncSession`` as ``self.session``.
"""

from __future__ import annotations

import functools
from typing import Any, Awaitable, Callable, TypeVar

from minishop.core.logging_config import get_logger

logger = get_logger(__name__)

R = TypeVar("R")


def transactional(func: Callable[..., Awaitable[R]]) -> Callable[..., Awaitable[R]]:
    """Commit on success, roll back and re-raise on failure."""

    @functools.wraps(func)
    async def wrapper(self: Any, *args: Any, **kwargs: Any) -> R:
        try:
            result = await func(self, *args, **kwargs)
        except Exception:
            await self.session.rollback()
            logger.debug(f"Rolled back transaction of {type(self).__name__}.{func.__name__}")
            raise
        await self.session.commit()
        return result

    return wrapper
