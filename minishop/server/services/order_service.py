"""
Order service.

Placing an order loads the member and the item, ships to the member's
address and takes stock out of the item in the same transaction. Cancelling
puts the stock back.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from minishop.core.database.entities.order import Delivery, Order, OrderItem
from minishop.core.database.repositories.items import ItemRepository
from minishop.core.database.repositories.members import MemberRepository
from minishop.core.database.repositories.orders import OrderRepository
from minishop.core.exceptions import EntityNotFoundError
from minishop.core.logging_config import get_logger
from minishop.core.models.io.orders import OrderSearch, OrderSimpleQueryDto
from minishop.core.monitoring import log_domain_event

from .transaction import transactional

logger = get_logger(__name__)


class OrderService:
    """Use cases around placing, cancelling and querying orders."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.orders = OrderRepository(session)
        self.members = MemberRepository(session)
        self.items = ItemRepository(session)

    @transactional
    async def order(self, member_id: int, item_id: str, count: int) -> int:
        """
        Place an order of ``count`` units of one item.

        Returns:
            The generated order id

        Raises:
            EntityNotFoundError: if the member or the item does not exist
            NotEnoughStockError: if the item has fewer than ``count`` units
        """
        member = await self.members.find_one(member_id)
        if member is None:
            raise EntityNotFoundError("Member", member_id)
        item = await self.items.find_one(item_id)
        if item is None:
            raise EntityNotFoundError("Item", item_id)

        delivery = Delivery.for_address(member.address)
        order_item = OrderItem.create(item, order_price=item.price, count=count)
        order = Order.create(member, delivery, order_item)

        await self.orders.save(order)
        log_domain_event("order placed", order_id=order.id, member_id=member_id, item_id=item_id, count=count)
        return order.id

    @transactional
    async def cancel_order(self, order_id: int) -> Order:
        """Cancel an order and return its stock."""
        order = await self.find_one(order_id)
        order.cancel()
        log_domain_event("order cancelled", order_id=order_id)
        return order

    async def find_one(self, order_id: int) -> Order:
        order = await self.orders.find_one(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)
        return order

    async def find_orders(self, order_search: OrderSearch) -> List[Order]:
        orders = await self.orders.find_all_by_criteria(order_search)
        logger.debug(
            f"Order search matched {len(orders)} orders "
            f"(status={order_search.order_status}, member_name={order_search.member_name})"
        )
        return orders

    async def find_orders_with_member_delivery(
        self, offset: Optional[int] = None, limit: Optional[int] = None
    ) -> List[Order]:
        return await self.orders.find_all_with_member_delivery(offset=offset, limit=limit)

    async def find_order_dtos(self) -> List[OrderSimpleQueryDto]:
        return await self.orders.find_order_dtos()
