"""
Family Member Service.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.backend.models.family_member import FamilyMember
from fittrack.backend.repositories.family_member import FamilyMemberRepository
from fittrack.backend.schemas.family_member import FamilyMemberCreate, FamilyMemberUpdate
from fittrack.backend.services.base import BaseService


class FamilyMemberService(BaseService):
    """Service for creating, reading and updating family members."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = FamilyMemberRepository(session)

    async def create_family_member(self, data: FamilyMemberCreate) -> FamilyMember:
        """
        Create a new family member.

        Args:
            data: Member creation data

        Returns:
            Created family member
        """
        self._log_operation("Creating family member", name=data.name)

        member = await self._execute_db_operation(
            "create_family_member",
            self.repo.create(
                name=data.name,
                email=data.email,
                age=data.age,
            ),
        )

        self._log_debug("Family member created", member_id=member.id)
        return member

    async def get_family_member(self, member_id: int) -> FamilyMember:
        """
        Get a family member by ID.

        Raises:
            NotFoundError: If the member does not exist
        """
        return await self._get_or_404(self.repo, member_id)

    async def list_family_members(
        self,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[FamilyMember], int]:
        """
        List family members with total count for pagination.

        Returns:
            Tuple of (members, total count)
        """
        members = await self._execute_db_operation(
            "list_family_members",
            self.repo.get_all(limit=limit, offset=offset),
        )
        total = await self._execute_db_operation("count_family_members", self.repo.count())
        return members, total

    async def update_family_member(
        self,
        member_id: int,
        data: FamilyMemberUpdate,
    ) -> FamilyMember:
        """
        Update an existing family member.

        Args:
            member_id: Member ID to update
            data: Update data (only fields present in the request are written)

        Raises:
            NotFoundError: If the member does not exist
        """
        update_data = data.model_dump(exclude_unset=True)

        if not update_data:
            return await self._get_or_404(self.repo, member_id)

        self._log_operation(
            "Updating family member",
            member_id=member_id,
            fields=list(update_data.keys()),
        )

        return await self._execute_db_operation(
            "update_family_member",
            self.repo.update(member_id, **update_data),
        )
