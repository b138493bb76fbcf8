"""
Member service.

Registration rejects duplicate names; renames rely on dirty checking, the
loaded member is modified in place and flushed on commit.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from minishop.core.database.entities.member import Member
from minishop.core.database.repositories.members import MemberRepository
from minishop.core.exceptions import DuplicateMemberError, EntityNotFoundError
from minishop.core.logging_config import get_logger
from minishop.core.monitoring import log_domain_event

from .transaction import transactional

logger = get_logger(__name__)


class MemberService:
    """Use cases around member registration and lookup."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.members = MemberRepository(session)

    @transactional
    async def join(self, member: Member) -> int:
        """
        Register a member.

        Args:
            member: Transient member to store

        Returns:
            The generated member id

        Raises:
            DuplicateMemberError: if a member with the same name exists
        """
        await self._validate_duplicate_member(member)
        saved = await self.members.save(member)
        log_domain_event("member joined", member_id=saved.id)
        return saved.id

    async def _validate_duplicate_member(self, member: Member) -> None:
        if await self.members.find_by_name(member.name):
            raise DuplicateMemberError(member.name)

    async def find_members(self) -> List[Member]:
        members = await self.members.find_all()
        logger.debug(f"Retrieved {len(members)} members")
        return members

    async def find_one(self, member_id: int) -> Member:
        member = await self.members.find_one(member_id)
        if member is None:
            raise EntityNotFoundError("Member", member_id)
        return member

    @transactional
    async def update(self, member_id: int, name: str) -> None:
        """Rename a member."""
        member = await self.find_one(member_id)
        member.name = name
        log_domain_event("member renamed", member_id=member_id)
