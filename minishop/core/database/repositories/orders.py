"""
Order repository.

Besides saving and loading single orders, this repository offers the
order queries the API exposes:

- ``find_all_by_criteria``: a dynamic query whose WHERE clause is assembled
  from the optional filters of an :class:`OrderSearch`
- ``find_all_with_member_delivery``: orders with member and delivery fetched
  in the same statement
- ``find_order_dtos``: a column projection read straight into DTOs

Lazy loading is not available on an async session, so every query states
which associations it loads.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, selectinload
from sqlmodel import col, select

from minishop.core.models.io.orders import OrderSearch, OrderSimpleQueryDto
from minishop.server.core.config import settings

from ..entities.address import Address
from ..entities.member import Member
from ..entities.order import Delivery, Order, OrderItem
from .base import AsyncBaseRepository, QueryBuilder


class OrderRepository(AsyncBaseRepository[Order]):
    """Repository for order data access operations using SQLModel."""

    def __init__(self, session: AsyncSession, max_results: Optional[int] = None) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
            max_results: Row cap for the criteria search; defaults to
                ``MINISHOP_ORDER_SEARCH_MAX_RESULTS``
        """
        super().__init__(session, Order)
        self.max_results = max_results if max_results is not None else settings.order_search_max_results

    async def find_one(self, order_id: int) -> Optional[Order]:
        """Load an order with its member, delivery and order lines (and their items)."""
        stmt = (
            select(Order)
            .where(Order.id == order_id)
            .options(
                selectinload(Order.member),
                selectinload(Order.delivery),
                selectinload(Order.order_items).selectinload(OrderItem.item),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def find_all_by_criteria(self, order_search: OrderSearch) -> List[Order]:
        """Search orders by status and member name.

        Each filter present on ``order_search`` contributes one predicate:
        ``status`` must equal the requested status, the member name must
        contain the requested text. Predicates are AND-ed; with none, every
        order matches. At most ``max_results`` rows are returned.
        """
        stmt = select(Order).join(Order.member)

        criteria = []
        if order_search.order_status is not None:
            criteria.append(col(Order.status) == order_search.order_status)
        if order_search.member_name and order_search.member_name.strip():
            criteria.append(col(Member.name).like(f"%{order_search.member_name}%"))

        if criteria:
            stmt = stmt.where(and_(*criteria))

        stmt = (
            stmt.options(
                contains_eager(Order.member),
                selectinload(Order.delivery),
                selectinload(Order.order_items).selectinload(OrderItem.item),
            )
            .order_by(col(Order.id))
            .limit(self.max_results)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    async def find_all_with_member_delivery(
        self, offset: Optional[int] = None, limit: Optional[int] = None
    ) -> List[Order]:
        """Orders joined to their member and delivery, both populated from the same row."""
        stmt = (
            select(Order)
            .join(Order.member)
            .join(Order.delivery)
            .options(contains_eager(Order.member), contains_eager(Order.delivery))
            .order_by(col(Order.id))
        )
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    async def find_order_dtos(self) -> List[OrderSimpleQueryDto]:
        """Select only the columns the simple order view needs."""
        stmt = (
            select(
                Order.id,
                Member.name,
                Order.order_date,
                Order.status,
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
            )
            .join(Member, col(Order.member_id) == col(Member.id))
            .join(Delivery, col(Order.delivery_id) == col(Delivery.id))
            .order_by(col(Order.id))
        )
        result = await self.session.execute(stmt)
        return [
            OrderSimpleQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=Address(city=city, street=street, zipcode=zipcode),
            )
            for order_id, name, order_date, status, city, street, zipcode in result.all()
        ]
