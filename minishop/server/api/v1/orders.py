"""
Order Endpoints.

Place and cancel orders, and search them by status and member name.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from minishop.core.database.entities.order import OrderStatus
from minishop.core.logging_config import get_logger
from minishop.core.models.io.orders import (
    OrderCancelResponse,
    OrderCreateRequest,
    OrderCreateResponse,
    OrderDto,
    OrderSearch,
)
from minishop.server.services.deps import OrderServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["orders"])


def order_search_params(
    member_name: Optional[str] = None,
    status: Optional[OrderStatus] = None,
) -> OrderSearch:
    """Build an :class:`OrderSearch` from query parameters."""
    return OrderSearch(member_name=member_name, order_status=status)


@router.post(
    "",
    response_model=OrderCreateResponse,
    summary="Place Order",
    description="Order a quantity of one item for a member; stock is reserved immediately.",
    responses={
        404: {"description": "Member or item not found"},
        409: {"description": "Not enough stock"},
    },
)
async def create_order(request: OrderCreateRequest, order_service: OrderServiceDep) -> OrderCreateResponse:
    """
    Place an order.

    - **member_id**: The ordering member.
    - **item_id**: The item to order.
    - **count**: Quantity, at least 1.
    """
    order_id = await order_service.order(request.member_id, request.item_id, request.count)
    return OrderCreateResponse(id=order_id)


@router.post(
    "/{order_id}/cancel",
    response_model=OrderCancelResponse,
    summary="Cancel Order",
    description="Cancel an order that has not been delivered and return its stock.",
    responses={
        404: {"description": "Order not found"},
        409: {"description": "Order already delivered"},
    },
)
async def cancel_order(order_id: int, order_service: OrderServiceDep) -> OrderCancelResponse:
    """Cancel an order."""
    order = await order_service.cancel_order(order_id)
    return OrderCancelResponse.model_validate(order)


@router.get(
    "",
    response_model=List[OrderDto],
    summary="Search Orders",
    description="Search orders by exact status and by a substring of the member name. Both filters are optional.",
)
async def search_orders(
    order_service: OrderServiceDep,
    order_search: OrderSearch = Depends(order_search_params),
) -> List[OrderDto]:
    """
    Search orders.

    - **status**: ``ORDER`` or ``CANCEL``.
    - **member_name**: Text contained in the ordering member's name.
    """
    orders = await order_service.find_orders(order_search)
    return [OrderDto.from_entity(order) for order in orders]


@router.get(
    "/{order_id}",
    response_model=OrderDto,
    summary="Get Order",
    responses={404: {"description": "Order not found"}},
)
async def get_order(order_id: int, order_service: OrderServiceDep) -> OrderDto:
    """Get one order with its lines."""
    return OrderDto.from_entity(await order_service.find_one(order_id))
