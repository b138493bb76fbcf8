"""
Member entity models.

A member is a registered customer. ``MemberBase`` holds the columns a
client may supply; the table model adds the identifier, the auditing
timestamps and the inverse side of the member-order association.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from ..base import BaseTimeEntity
from .address import AddressColumns

if TYPE_CHECKING:
    from .order import Order


class MemberBase(AddressColumns):
    """Base fields for member."""

    name: str = Field(min_length=1, max_length=100, index=True, description="Member name")


class Member(MemberBase, BaseTimeEntity, table=True):
    """Persistent member record.

    Table: member
    """

    __tablename__ = "member"

    id: Optional[int] = Field(default=None, primary_key=True)

    orders: List["Order"] = Relationship(back_populates="member")

    def __repr__(self) -> str:
        return f"Member(id={self.id}, name={self.name})"
