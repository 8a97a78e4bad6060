"""
Family Member Repository.
"""

from fittrack.backend.models.family_member import FamilyMember
from fittrack.backend.repositories.base import BaseRepository


class FamilyMemberRepository(BaseRepository[FamilyMember]):
    """Data access for the family_members table."""

    model = FamilyMember
    label = "Family member"
