"""
Order I/O models for API requests and responses.

``OrderSearch`` carries the optional filters of the dynamic order query.
``SimpleOrderDto`` is built from loaded entities while
``OrderSimpleQueryDto`` is filled directly from a column projection.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from minishop.core.database.entities.address import Address
from minishop.core.database.entities.order import Order, OrderItem, OrderStatus


class OrderSearch(BaseModel):
    """Optional filters for the order search; unset filters match everything."""

    member_name: Optional[str] = Field(default=None, description="Substring of the member name")
    order_status: Optional[OrderStatus] = Field(default=None, description="Exact order status")


class OrderCreateRequest(BaseModel):
    """Schema for placing an order of a single item."""

    member_id: int
    item_id: str = Field(min_length=1, max_length=64)
    count: int = Field(gt=0, description="Quantity to order")


class OrderCreateResponse(BaseModel):
    id: int


class SimpleOrderDto(BaseModel):
    """Order summary: who ordered, when, its status and where it ships."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: Address

    @classmethod
    def from_entity(cls, order: Order) -> "SimpleOrderDto":
        """Map an order whose member and delivery are loaded."""
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=order.delivery.address,
        )


class OrderSimpleQueryDto(BaseModel):
    """Same shape as :class:`SimpleOrderDto`, produced by a projection query."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: Address


class OrderItemDto(BaseModel):
    """One order line in an order response."""

    item_id: Optional[str]
    item_name: str
    order_price: int
    count: int

    @classmethod
    def from_entity(cls, order_item: OrderItem) -> "OrderItemDto":
        return cls(
            item_id=order_item.item_id,
            item_name=order_item.item.name,
            order_price=order_item.order_price,
            count=order_item.count,
        )


class OrderDto(SimpleOrderDto):
    """Order summary plus its lines and total."""

    order_items: List[OrderItemDto]
    total_price: int

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDto":
        """Map an order whose member, delivery and lines (with items) are loaded."""
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=order.delivery.address,
            order_items=[OrderItemDto.from_entity(order_item) for order_item in order.order_items],
            total_price=order.total_price(),
        )


class OrderCancelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: OrderStatus
