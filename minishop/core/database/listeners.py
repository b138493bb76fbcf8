"""
Entity lifecycle listeners.

Mapper-level ``before_insert`` / ``before_update`` hooks fill the auditing
columns declared on :class:`~.base.BaseTimeEntity` and
:class:`~.base.BaseEntity`. They are registered once, globally, on
``sqlalchemy.orm.Mapper`` so every mapped entity is covered.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import event
from sqlalchemy.orm import Mapper

from minishop.core.auditing import get_current_auditor
from minishop.core.logging_config import get_logger

from .base import BaseEntity, BaseTimeEntity, utc_now

logger = get_logger(__name__)


def stamp_created(mapper: Mapper, connection: Any, target: Any) -> None:
    """Fill creation and modification fields on a row about to be inserted."""
    if not isinstance(target, BaseTimeEntity):
        return

    now = utc_now()
    if target.created_date is None:
        target.created_date = now
    target.last_modified_date = now

    if isinstance(target, BaseEntity):
        auditor = get_current_auditor()
        if target.created_by is None:
            target.created_by = auditor
        target.last_modified_by = auditor


def stamp_modified(mapper: Mapper, connection: Any, target: Any) -> None:
    """Refresh modification fields on a row about to be updated."""
    if not isinstance(target, BaseTimeEntity):
        return

    target.last_modified_date = utc_now()
    if isinstance(target, BaseEntity):
        target.last_modified_by = get_current_auditor()


def register_auditing_listeners() -> None:
    """Attach the auditing hooks to every mapper. Safe to call repeatedly."""
    if event.contains(Mapper, "before_insert", stamp_created):
        return
    event.listen(Mapper, "before_insert", stamp_created)
    event.listen(Mapper, "before_update", stamp_modified)
    logger.debug("Auditing listeners registered")
