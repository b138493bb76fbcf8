"""
Database entity models.

Modules:
- address: Address value object and the address-column mixin
- member: Registered members
- item: Stock items with caller-assigned identifiers
- order: Orders, order lines and deliveries
"""

from .address import Address, AddressColumns
from .item import Item, ItemBase
from .member import Member, MemberBase
from .order import Delivery, DeliveryStatus, Order, OrderItem, OrderStatus

__all__ = [
    "Address",
    "AddressColumns",
    "Delivery",
    "DeliveryStatus",
    "Item",
    "ItemBase",
    "Member",
    "MemberBase",
    "Order",
    "OrderItem",
    "OrderStatus",
]
