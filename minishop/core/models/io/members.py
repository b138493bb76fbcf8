"""
Member I/O models for API requests and responses.

These are the dedicated request/response shapes of the member API. The
collection endpoint wraps its list in :class:`Result` so fields such as a
count can be added later without breaking clients.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class CreateMemberRequest(BaseModel):
    """Schema for registering a member."""

    name: str = Field(min_length=1, max_length=100, description="Member name")


class CreateMemberResponse(BaseModel):
    """Identifier of the member that was registered."""

    id: int


class UpdateMemberRequest(BaseModel):
    """Schema for renaming a member."""

    name: str = Field(min_length=1, max_length=100, description="New member name")


class UpdateMemberResponse(BaseModel):
    """Member state after an update."""

    id: int
    name: str


class MemberDto(BaseModel):
    """Public view of a member in collection responses."""

    name: str


class Result(BaseModel, Generic[T]):
    """Envelope around collection payloads."""

    data: T
