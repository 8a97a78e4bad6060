"""
Workout Service.

Business logic for workouts. A workout can only be created for a family
member that exists.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.backend.models.workout import Workout
from fittrack.backend.repositories.family_member import FamilyMemberRepository
from fittrack.backend.repositories.workout import WorkoutRepository
from fittrack.backend.schemas.workout import WorkoutCreate, WorkoutUpdate
from fittrack.backend.services.base import BaseService


class WorkoutService(BaseService):
    """Service for workout business logic."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = WorkoutRepository(session)
        self.member_repo = FamilyMemberRepository(session)

    async def create_workout(self, data: WorkoutCreate) -> Workout:
        """
        Log a workout for a family member.

        Args:
            data: Workout creation data

        Returns:
            Created workout

        Raises:
            ReferenceNotFoundError: If the family member does not exist
        """
        await self._ensure_referenced(
            self.member_repo, "family_member_id", data.family_member_id
        )

        self._log_operation(
            "Creating workout",
            family_member_id=data.family_member_id,
            workout_date=data.workout_date.isoformat(),
        )

        workout = await self._execute_db_operation(
            "create_workout",
            self.repo.create(
                family_member_id=data.family_member_id,
                name=data.name,
                duration_minutes=data.duration_minutes,
                notes=data.notes,
                workout_date=data.workout_date,
            ),
        )

        self._log_debug("Workout created", workout_id=workout.id)
        return workout

    async def get_workout(self, workout_id: int) -> Workout:
        """
        Get a workout by ID.

        Raises:
            NotFoundError: If the workout does not exist
        """
        return await self._get_or_404(self.repo, workout_id)

    async def list_workouts(
        self,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Workout], int]:
        """
        List workouts of all members, newest first.

        Returns:
            Tuple of (workouts, total count)
        """
        workouts = await self._execute_db_operation(
            "list_workouts",
            self.repo.get_all(limit=limit, offset=offset),
        )
        total = await self._execute_db_operation("count_workouts", self.repo.count())
        return workouts, total

    async def get_workouts_by_member(self, family_member_id: int) -> list[Workout]:
        """
        Get all workouts of one family member, newest first.

        Raises:
            NotFoundError: If the family member does not exist
        """
        await self._ensure_exists(self.member_repo, family_member_id)
        return await self._execute_db_operation(
            "get_workouts_by_member",
            self.repo.get_by_family_member(family_member_id),
        )

    async def update_workout(self, workout_id: int, data: WorkoutUpdate) -> Workout:
        """
        Update a workout. Only fields present in the request are written.

        Raises:
            NotFoundError: If the workout does not exist
        """
        update_data = data.model_dump(exclude_unset=True)

        if not update_data:
            return await self._get_or_404(self.repo, workout_id)

        self._log_operation(
            "Updating workout",
            workout_id=workout_id,
            fields=list(update_data.keys()),
        )

        return await self._execute_db_operation(
            "update_workout",
            self.repo.update(workout_id, **update_data),
        )
