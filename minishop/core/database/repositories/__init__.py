"""
Database repository layer using SQLModel.

Modules:
- base: AsyncBaseRepository and QueryBuilder utilities
- members: Member repository operations
- items: Item repository operations
- orders: Order repository operations, including the dynamic order search
"""

from .base import AsyncBaseRepository, QueryBuilder
from .items import ItemRepository
from .members import MemberRepository
from .orders import OrderRepository

__all__ = [
    "AsyncBaseRepository",
    "ItemRepository",
    "MemberRepository",
    "OrderRepository",
    "QueryBuilder",
]
