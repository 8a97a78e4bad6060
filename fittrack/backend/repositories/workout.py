"""
Workout Repository.

Data access layer for workouts, including lookups by owning member.
"""

from sqlalchemy import select

from fittrack.backend.models.workout import Workout
from fittrack.backend.repositories.base import BaseRepository


class WorkoutRepository(BaseRepository[Workout]):
    """Repository for Workout model. Listings are newest workout date first."""

    model = Workout
    label = "Workout"

    async def get_all(self, limit: int = 50, offset: int = 0) -> list[Workout]:
        """Get workouts across all members, newest first."""
        result = await self.session.execute(
            select(Workout)
            .order_by(Workout.workout_date.desc(), Workout.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def get_by_family_member(self, family_member_id: int) -> list[Workout]:
        """
        Get every workout belonging to one family member.

        Args:
            family_member_id: Owning member ID

        Returns:
            Workouts ordered by workout date, newest first
        """
        result = await self.session.execute(
            select(Workout)
            .where(Workout.family_member_id == family_member_id)
            .order_by(Workout.workout_date.desc(), Workout.id.desc())
        )
        return list(result.scalars().all())
