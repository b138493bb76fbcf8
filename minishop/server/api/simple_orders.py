"""
Simple Order Endpoints.

Three ways of producing the same order summary:

- v2: search all orders, then map the loaded entities to DTOs
- v3: one statement fetching orders with member and delivery, with paging
- v4: a projection query that selects only the summary columns
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from minishop.core.logging_config import get_logger
from minishop.core.models.io.orders import OrderSearch, OrderSimpleQueryDto, SimpleOrderDto
from minishop.server.core import constant
from minishop.server.services.deps import OrderServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["simple-orders"])


@router.get(
    f"{constant.API_V2_STR}/simple-orders",
    response_model=List[SimpleOrderDto],
    summary="Simple Orders (entity mapping)",
)
async def orders_v2(order_service: OrderServiceDep) -> List[SimpleOrderDto]:
    """Load every order and map it to a summary DTO."""
    orders = await order_service.find_orders(OrderSearch())
    return [SimpleOrderDto.from_entity(order) for order in orders]


@router.get(
    f"{constant.API_V3_STR}/simple-orders",
    response_model=List[SimpleOrderDto],
    summary="Simple Orders (fetch join)",
)
async def orders_v3(
    order_service: OrderServiceDep,
    offset: int = Query(default=0, ge=0),
    limit: Optional[int] = Query(default=100, ge=1),
) -> List[SimpleOrderDto]:
    """Load a page of orders with member and delivery in one statement."""
    orders = await order_service.find_orders_with_member_delivery(offset=offset, limit=limit)
    return [SimpleOrderDto.from_entity(order) for order in orders]


@router.get(
    f"{constant.API_V4_STR}/simple-orders",
    response_model=List[OrderSimpleQueryDto],
    summary="Simple Orders (projection)",
)
async def orders_v4(order_service: OrderServiceDep) -> List[OrderSimpleQueryDto]:
    """Read the summaries straight from a column projection."""
    return await order_service.find_order_dtos()
