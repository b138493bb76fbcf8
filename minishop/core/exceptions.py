"""
Domain exceptions.

Services and entities raise these; the server package maps each one to an
HTTP status in ``minishop.server.exception_handlers``.
"""

from __future__ import annotations

from typing import Any


class ShopError(Exception):
    """Base class for every business rule violation raised by minishop."""


class EntityNotFoundError(ShopError):
    """Lookup by primary key found nothing."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class DuplicateMemberError(ShopError):
    """A member with the same name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Member '{name}' already exists")


class NotEnoughStockError(ShopError):
    """Removing stock would leave an item with a negative quantity."""

    def __init__(self, item_id: str, requested: int, available: int) -> None:
        self.item_id = item_id
        self.requested = requested
        self.available = available
        super().__init__(f"Not enough stock for item {item_id}: requested {requested}, available {available}")


class OrderNotCancellableError(ShopError):
    """The order's delivery has already been completed."""

    def __init__(self, order_id: Any) -> None:
        self.order_id = order_id
        super().__init__(f"Order {order_id} has already been delivered and cannot be cancelled")
