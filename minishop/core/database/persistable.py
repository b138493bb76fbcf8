"""
Insert-or-merge decision for repository ``save``.

A new entity is handed to ``session.add`` and becomes a plain INSERT at flush.
Anything else goes through ``session.merge``, which first SELECTs the row by
primary key and then INSERTs or UPDATEs. Entities whose primary key is
assigned by the caller therefore implement :class:`Persistable` so the
repository can skip that SELECT for rows that were never stored.
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Protocol, runtime_checkable

from sqlalchemy import inspect as sa_inspect


@runtime_checkable
class Persistable(Protocol):
    """Entity that decides for itself whether it still has to be inserted."""

    def is_new(self) -> bool: ...


def _is_unset_identifier(value: Any) -> bool:
    if value is None:
        return True
    # Numeric identifiers start at zero before the database assigns one
    return isinstance(value, Number) and not isinstance(value, bool) and value == 0


def entity_is_new(entity: Any) -> bool:
    """Return True when ``entity`` has never been persisted.

    Entities implementing :class:`Persistable` answer for themselves. For the
    rest every primary-key column is inspected: an unset (``None``) or zero
    numeric value marks the entity as new.
    """
    if isinstance(entity, Persistable):
        return entity.is_new()

    mapper = sa_inspect(entity).mapper
    identity = mapper.primary_key_from_instance(entity)
    return any(_is_unset_identifier(value) for value in identity)
