"""
Exercise Log Service.

Business logic for exercise logs. The workout, and the equipment when
one is referenced, must exist before a log is written.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.backend.models.exercise_log import ExerciseLog
from fittrack.backend.repositories.equipment import EquipmentRepository
from fittrack.backend.repositories.exercise_log import ExerciseLogRepository
from fittrack.backend.repositories.workout import WorkoutRepository
from fittrack.backend.schemas.exercise_log import ExerciseLogCreate, ExerciseLogUpdate
from fittrack.backend.services.base import BaseService


class ExerciseLogService(BaseService):
    """Service for exercise log business logic."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = ExerciseLogRepository(session)
        self.workout_repo = WorkoutRepository(session)
        self.equipment_repo = EquipmentRepository(session)

    async def create_exercise_log(self, data: ExerciseLogCreate) -> ExerciseLog:
        """
        Log an exercise inside a workout.

        Raises:
            ReferenceNotFoundError: If the workout or the referenced equipment does not exist
        """
        await self._ensure_referenced(self.workout_repo, "workout_id", data.workout_id)
        if data.equipment_id is not None:
            await self._ensure_referenced(self.equipment_repo, "equipment_id", data.equipment_id)

        self._log_operation(
            "Creating exercise log",
            workout_id=data.workout_id,
            exercise_name=data.exercise_name,
        )

        log = await self._execute_db_operation(
            "create_exercise_log",
            self.repo.create(
                workout_id=data.workout_id,
                equipment_id=data.equipment_id,
                exercise_name=data.exercise_name,
                sets=data.sets,
                repetitions=data.repetitions,
                weight_lbs=data.weight_lbs,
                notes=data.notes,
            ),
        )

        self._log_debug("Exercise log created", exercise_log_id=log.id)
        return log

    async def get_exercise_log(self, log_id: int) -> ExerciseLog:
        """
        Get an exercise log by ID.

        Raises:
            NotFoundError: If the log does not exist
        """
        return await self._get_or_404(self.repo, log_id)

    async def get_exercise_logs_by_workout(self, workout_id: int) -> list[ExerciseLog]:
        """
        Get the exercises of one workout in logging order.

        An unknown workout ID yields an empty list, not a 404.
        """
        return await self._execute_db_operation(
            "get_exercise_logs_by_workout",
            self.repo.get_by_workout(workout_id),
        )

    async def update_exercise_log(
        self,
        log_id: int,
        data: ExerciseLogUpdate,
    ) -> ExerciseLog:
        """
        Update an exercise log. Only fields present in the request are written.

        Raises:
            NotFoundError: If the log does not exist
            ReferenceNotFoundError: If newly referenced equipment does not exist
        """
        update_data = data.model_dump(exclude_unset=True)

        if not update_data:
            return await self._get_or_404(self.repo, log_id)

        if update_data.get("equipment_id") is not None:
            await self._ensure_referenced(
                self.equipment_repo, "equipment_id", update_data["equipment_id"]
            )

        self._log_operation(
            "Updating exercise log",
            exercise_log_id=log_id,
            fields=list(update_data.keys()),
        )

        return await self._execute_db_operation(
            "update_exercise_log",
            self.repo.update(log_id, **update_data),
        )
