"""
Member Endpoints, version 1.

These endpoints bind the ``Member`` entity directly at the API boundary:
the request body is validated against the entity's own fields and the
listing returns every column of every member. Any change to the table
changes the API contract; version 2 replaces them with dedicated DTOs.
"""

from typing import List

from fastapi import APIRouter

from minishop.core.database.entities.member import Member, MemberBase
from minishop.core.logging_config import get_logger
from minishop.core.models.io.members import CreateMemberResponse
from minishop.server.services.deps import MemberServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["members-v1"])


@router.post(
    "",
    response_model=CreateMemberResponse,
    summary="Register Member (entity body)",
    description="Register a member from a body shaped like the member entity. Superseded by POST /api/v2/members.",
    responses={409: {"description": "A member with this name already exists"}},
)
async def save_member_v1(member: MemberBase, member_service: MemberServiceDep) -> CreateMemberResponse:
    """
    Register a member.

    - **name**: Member name, must not be empty.
    - **city**, **street**, **zipcode**: Optional address.
    """
    member_id = await member_service.join(Member.model_validate(member))
    return CreateMemberResponse(id=member_id)


@router.get(
    "",
    response_model=List[Member],
    summary="List Members (entities)",
    description="Return the member entities as stored, all columns included. Superseded by GET /api/v2/members.",
)
async def members_v1(member_service: MemberServiceDep) -> List[Member]:
    """List every member entity."""
    return await member_service.find_members()
