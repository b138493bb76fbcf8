"""
Order entity models.

This module contains the order aggregate: the order itself, its order lines
and its delivery. Orders reference the member who placed them; each order
line references the item it sells.

Stock moves with the aggregate: creating an order line takes stock out of
the item, cancelling the order puts it back.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from minishop.core.exceptions import OrderNotCancellableError

from ..base import Base, BaseEntity, utc_now
from .address import Address, AddressColumns

if TYPE_CHECKING:
    from .item import Item
    from .member import Member


class OrderStatus(str, Enum):
    """Lifecycle state of an order."""

    ORDER = "ORDER"
    CANCEL = "CANCEL"


class DeliveryStatus(str, Enum):
    """Shipping state of a delivery."""

    READY = "READY"
    COMP = "COMP"


class Delivery(AddressColumns, table=True):
    """Shipping record of an order.

    Table: delivery
    """

    __tablename__ = "delivery"

    id: Optional[int] = Field(default=None, primary_key=True)
    status: DeliveryStatus = Field(default=DeliveryStatus.READY)

    order: Optional["Order"] = Relationship(back_populates="delivery", sa_relationship_kwargs={"uselist": False})

    @classmethod
    def for_address(cls, address: Optional[Address]) -> "Delivery":
        """A delivery, ready to ship, addressed to ``address``."""
        delivery = cls(status=DeliveryStatus.READY)
        delivery.set_address(address)
        return delivery

    def __repr__(self) -> str:
        return f"Delivery(id={self.id}, status={self.status})"


class OrderItem(Base, table=True):
    """One line of an order: an item, the unit price charged and a quantity.

    Table: order_item
    """

    __tablename__ = "order_item"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: Optional[int] = Field(default=None, foreign_key="orders.id", index=True)
    item_id: Optional[str] = Field(default=None, foreign_key="item.id", max_length=64, index=True)

    order_price: int = Field(ge=0, description="Unit price at the time of ordering")
    count: int = Field(gt=0, description="Ordered quantity")

    order: Optional["Order"] = Relationship(back_populates="order_items")
    item: Optional["Item"] = Relationship()

    @classmethod
    def create(cls, item: "Item", order_price: int, count: int) -> "OrderItem":
        """Create an order line and take ``count`` units out of ``item``'s stock."""
        order_item = cls(order_price=order_price, count=count)
        order_item.item = item
        item.remove_stock(count)
        return order_item

    def cancel(self) -> None:
        self.item.add_stock(self.count)

    def total_price(self) -> int:
        return self.order_price * self.count

    def __repr__(self) -> str:
        return f"OrderItem(id={self.id}, item_id={self.item_id}, count={self.count})"


class Order(BaseEntity, table=True):
    """Persistent order.

    Table: orders
    """

    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    member_id: Optional[int] = Field(default=None, foreign_key="member.id", index=True)
    delivery_id: Optional[int] = Field(default=None, foreign_key="delivery.id", unique=True)

    order_date: datetime = Field(default_factory=utc_now, index=True)
    status: OrderStatus = Field(default=OrderStatus.ORDER, index=True)

    member: Optional["Member"] = Relationship(back_populates="orders")
    delivery: Optional[Delivery] = Relationship(back_populates="order")
    order_items: List[OrderItem] = Relationship(back_populates="order")

    @classmethod
    def create(cls, member: "Member", delivery: Delivery, *order_items: OrderItem) -> "Order":
        """Place an order for ``member`` with the given lines."""
        order = cls(status=OrderStatus.ORDER, order_date=utc_now())
        order.member = member
        order.delivery = delivery
        for order_item in order_items:
            order.add_order_item(order_item)
        return order

    def add_order_item(self, order_item: OrderItem) -> None:
        self.order_items.append(order_item)

    def cancel(self) -> None:
        """Cancel the order and return every line's stock. Cancelling twice is a no-op.

        Raises:
            OrderNotCancellableError: if the delivery has already completed.
        """
        if self.status == OrderStatus.CANCEL:
            return
        if self.delivery is not None and self.delivery.status == DeliveryStatus.COMP:
            raise OrderNotCancellableError(self.id)

        self.status = OrderStatus.CANCEL
        for order_item in self.order_items:
            order_item.cancel()

    def total_price(self) -> int:
        return sum(order_item.total_price() for order_item in self.order_items)

    def __repr__(self) -> str:
        return f"Order(id={self.id}, member_id={self.member_id}, status={self.status})"
