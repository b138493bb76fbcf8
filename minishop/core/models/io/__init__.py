"""
I/O models for API requests and responses.

Modules:
- members: Member request/response DTOs and the Result envelope
- orders: Order search filters, order DTOs and projections
- items: Item request/response DTOs
"""

from .items import ItemCreateRequest, ItemRead, ItemUpdateRequest
from .members import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberDto,
    Result,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from .orders import (
    OrderCancelResponse,
    OrderCreateRequest,
    OrderCreateResponse,
    OrderDto,
    OrderItemDto,
    OrderSearch,
    OrderSimpleQueryDto,
    SimpleOrderDto,
)

__all__ = [
    "CreateMemberRequest",
    "CreateMemberResponse",
    "ItemCreateRequest",
    "ItemRead",
    "ItemUpdateRequest",
    "MemberDto",
    "OrderCancelResponse",
    "OrderCreateRequest",
    "OrderCreateResponse",
    "OrderDto",
    "OrderItemDto",
    "OrderSearch",
    "OrderSimpleQueryDto",
    "Result",
    "SimpleOrderDto",
    "UpdateMemberRequest",
    "UpdateMemberResponse",
]
