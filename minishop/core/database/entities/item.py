"""
Item entity models.

Items are keyed by an identifier the caller assigns (an SKU), not by a
database sequence. Because the key is always set, the primary key alone
cannot tell a fresh item from a stored one; :meth:`Item.is_new` looks at
the creation timestamp instead, which only the insert listener ever fills.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from minishop.core.exceptions import NotEnoughStockError

from ..base import Base, BaseTimeEntity


class ItemBase(Base):
    """Base fields for item."""

    name: str = Field(min_length=1, max_length=200, description="Item name")
    price: int = Field(default=0, ge=0, description="Unit price")
    stock_quantity: int = Field(default=0, ge=0, description="Units in stock")


class Item(ItemBase, BaseTimeEntity, table=True):
    """Persistent stock item.

    Table: item
    """

    __tablename__ = "item"

    id: str = Field(primary_key=True, max_length=64, description="Caller-assigned item identifier")

    def is_new(self) -> bool:
        return self.created_date is None

    def add_stock(self, quantity: int) -> None:
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock.

        Raises:
            NotEnoughStockError: if fewer than ``quantity`` units are left.
        """
        rest = self.stock_quantity - quantity
        if rest < 0:
            raise NotEnoughStockError(self.id, requested=quantity, available=self.stock_quantity)
        self.stock_quantity = rest

    def __repr__(self) -> str:
        return f"Item(id={self.id}, name={self.name}, stock={self.stock_quantity})"
