"""
Member Endpoints, version 2.

Requests and responses use dedicated DTOs, so the member table can change
without changing the API. Collections are wrapped in a ``Result`` envelope.
"""

from typing import List

from fastapi import APIRouter

from minishop.core.database.entities.member import Member
from minishop.core.logging_config import get_logger
from minishop.core.models.io.members import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberDto,
    Result,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from minishop.server.services.deps import MemberServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["members"])


@router.post(
    "",
    response_model=CreateMemberResponse,
    summary="Register Member",
    description="Register a new member under a unique name.",
    response_description="The generated member id.",
    responses={409: {"description": "A member with this name already exists"}},
)
async def save_member_v2(request: CreateMemberRequest, member_service: MemberServiceDep) -> CreateMemberResponse:
    """
    Register a member.

    - **name**: Member name, must not be empty and must not be taken.
    """
    member = Member(name=request.name)
    member_id = await member_service.join(member)
    return CreateMemberResponse(id=member_id)


@router.post(
    "/{member_id}",
    response_model=UpdateMemberResponse,
    summary="Update Member",
    description="Rename an existing member.",
    response_description="The member after the update.",
    responses={404: {"description": "Member not found"}},
)
async def update_member_v2(
    member_id: int, request: UpdateMemberRequest, member_service: MemberServiceDep
) -> UpdateMemberResponse:
    """
    Update a member.

    The rename runs in its own transaction; the member is then read back
    and returned.
    """
    await member_service.update(member_id, request.name)
    find_member = await member_service.find_one(member_id)
    return UpdateMemberResponse(id=find_member.id, name=find_member.name)


@router.get(
    "",
    response_model=Result[List[MemberDto]],
    summary="List Members",
    description="List member names wrapped in a result envelope.",
)
async def members_v2(member_service: MemberServiceDep) -> Result[List[MemberDto]]:
    """List members as DTOs."""
    find_members = await member_service.find_members()
    collect = [MemberDto(name=member.name) for member in find_members]
    return Result(data=collect)
