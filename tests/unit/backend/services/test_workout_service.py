"""
Unit Tests for WorkoutService.

The owning family member must exist before a workout is written.
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from fittrack.backend.core.exceptions import DatabaseError, NotFoundError, ReferenceNotFoundError
from fittrack.backend.schemas.workout import WorkoutCreate, WorkoutUpdate
from fittrack.backend.services.workout import WorkoutService


@pytest.fixture
def service(mock_db_session) -> WorkoutService:
    return WorkoutService(mock_db_session)


def _create_data(**overrides) -> WorkoutCreate:
    payload = {
        "family_member_id": 1,
        "name": "Leg day",
        "duration_minutes": 45,
        "workout_date": "2024-03-18",
    }
    payload.update(overrides)
    return WorkoutCreate(**payload)


class TestCreateWorkout:
    """Tests for workout creation."""

    async def test_create_for_existing_member(self, service, workout_row):
        with patch.object(service.member_repo, "exists", return_value=True), \
             patch.object(service.repo, "create", return_value=workout_row) as mock_create:
            result = await service.create_workout(_create_data())

        mock_create.assert_called_once_with(
            family_member_id=1,
            name="Leg day",
            duration_minutes=45,
            notes=None,
            workout_date=date(2024, 3, 18),
        )
        assert result.id == 3

    async def test_create_for_missing_member_inserts_nothing(self, service):
        with patch.object(service.member_repo, "exists", return_value=False), \
             patch.object(service.repo, "create") as mock_create:
            with pytest.raises(ReferenceNotFoundError, match="Family member with id 1 not found") as exc_info:
                await service.create_workout(_create_data())

        assert exc_info.value.details["field"] == "family_member_id"

        mock_create.assert_not_called()


class TestQueryWorkouts:
    """Tests for workout lookups."""

    async def test_list_returns_items_and_total(self, service):
        rows = [MagicMock(), MagicMock(), MagicMock()]
        with patch.object(service.repo, "get_all", return_value=rows) as mock_get_all, \
             patch.object(service.repo, "count", return_value=3):
            items, total = await service.list_workouts()

        mock_get_all.assert_called_once_with(limit=50, offset=0)
        assert total == 3
        assert items == rows

    async def test_by_member_checks_member(self, service):
        with patch.object(service.member_repo, "exists", return_value=False), \
             patch.object(service.repo, "get_by_family_member") as mock_query:
            with pytest.raises(NotFoundError) as exc_info:
                await service.get_workouts_by_member(4)

        assert exc_info.value.code == "RES_NOT_FOUND"

        mock_query.assert_not_called()

    async def test_by_member_returns_rows(self, service, workout_row):
        with patch.object(service.member_repo, "exists", return_value=True), \
             patch.object(
                 service.repo, "get_by_family_member", return_value=[workout_row]
             ) as mock_query:
            result = await service.get_workouts_by_member(1)

        mock_query.assert_called_once_with(1)
        assert result == [workout_row]


class TestUpdateWorkout:
    """Tests for partial updates."""

    async def test_update_only_given_fields(self, service, workout_row):
        with patch.object(service.repo, "update", return_value=workout_row) as mock_update:
            await service.update_workout(3, WorkoutUpdate(duration_minutes=50))

        mock_update.assert_called_once_with(3, duration_minutes=50)

    async def test_update_truncates_datetime(self, service, workout_row):
        with patch.object(service.repo, "update", return_value=workout_row) as mock_update:
            await service.update_workout(3, WorkoutUpdate(workout_date="2024-04-01T18:45:00"))

        mock_update.assert_called_once_with(3, workout_date=date(2024, 4, 1))

    async def test_update_missing_workout_raises(self, service):
        with patch.object(
            service.repo, "update", side_effect=NotFoundError("Workout with id 9 not found")
        ):
            with pytest.raises(NotFoundError):
                await service.update_workout(9, WorkoutUpdate(name="Renamed"))


class TestDatabaseFailures:
    """Reads that fail in the database surface as DatabaseError (503)."""

    async def test_get_wraps_operational_error(self, failing_db_session):
        with pytest.raises(DatabaseError, match="get_workouts"):
            await WorkoutService(failing_db_session).get_workout(1)

    async def test_empty_update_wraps_operational_error(self, failing_db_session):
        with pytest.raises(DatabaseError):
            await WorkoutService(failing_db_session).update_workout(1, WorkoutUpdate())

    async def test_by_member_wraps_operational_error(self, failing_db_session):
        with pytest.raises(DatabaseError, match="check_family_members"):
            await WorkoutService(failing_db_session).get_workouts_by_member(1)
