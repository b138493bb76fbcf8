"""
Service Dependencies.

Provides per-request service instances for API endpoints. All services of
one request share the request's database session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minishop.core.database import get_session

from .item_service import ItemService
from .member_service import MemberService
from .order_service import OrderService


def get_member_service(session: AsyncSession = Depends(get_session)) -> MemberService:
    return MemberService(session)


def get_item_service(session: AsyncSession = Depends(get_session)) -> ItemService:
    return ItemService(session)


def get_order_service(session: AsyncSession = Depends(get_session)) -> OrderService:
    return OrderService(session)


MemberServiceDep = Annotated[MemberService, Depends(get_member_service)]
ItemServiceDep = Annotated[ItemService, Depends(get_item_service)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
