"""
Exercise Log Repository.
"""

from sqlalchemy import select

from fittrack.backend.models.exercise_log import ExerciseLog
from fittrack.backend.repositories.base import BaseRepository


class ExerciseLogRepository(BaseRepository[ExerciseLog]):
    """Repository for ExerciseLog model."""

    model = ExerciseLog
    label = "Exercise log"

    async def get_by_workout(self, workout_id: int) -> list[ExerciseLog]:
        """Get the exercises logged in one workout, in the order they were logged."""
        result = await self.session.execute(
            select(ExerciseLog)
            .where(ExerciseLog.workout_id == workout_id)
            .order_by(ExerciseLog.id)
        )
        return list(result.scalars().all())
