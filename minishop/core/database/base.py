"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the centralized database layer using SQLModel.

Auditing columns are declared here but never filled at construction time;
the lifecycle listeners in :mod:`.listeners` stamp them during flush.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import ConfigDict
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


class BaseTimeEntity(Base):
    """Creation and last-modification timestamps maintained by the auditing listener.

    Values are timezone-aware UTC; the column type stores them as UTC and
    hands them back aware, SQLite included.
    """

    created_date: Optional[datetime] = Field(default=None, description="Set once, when the row is inserted")
    last_modified_date: Optional[datetime] = Field(default=None, description="Refreshed on every insert and update")


class BaseEntity(BaseTimeEntity):
    """Timestamps plus the auditor who created and last modified the row."""

    created_by: Optional[str] = Field(default=None, max_length=64, description="Auditor at insert time")
    last_modified_by: Optional[str] = Field(default=None, max_length=64, description="Auditor at last write")
