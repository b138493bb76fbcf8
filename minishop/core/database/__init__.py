"""
Centralized database layer for minishop.

Structure:
- entities/: SQLModel table models (member, item, order, delivery)
- repositories/: Data access layer, one repository per aggregate
- base.py: SQLModel base classes and auditing mixins
- listeners.py: Entity lifecycle listeners filling the auditing columns
- persistable.py: Insert-or-merge decision used by repository ``save``
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and schema helpers
"""

from .base import Base, BaseEntity, BaseTimeEntity, utc_now
from .listeners import register_auditing_listeners
from .persistable import Persistable, entity_is_new
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

register_auditing_listeners()

__all__ = [
    "Base",
    "BaseEntity",
    "BaseTimeEntity",
    "Persistable",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "entity_is_new",
    "get_session",
    "init_db",
    "register_auditing_listeners",
    "utc_now",
]
