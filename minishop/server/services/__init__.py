"""
Business services.

Each service owns the transaction boundary of its use cases and delegates
data access to the repositories.
"""

from .item_service import ItemService
from .member_service import MemberService
from .order_service import OrderService

__all__ = ["ItemService", "MemberService", "OrderService"]
