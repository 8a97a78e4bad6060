"""
Integration Tests for Repositories.

Runs the data access layer against a real database session.
"""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.backend.core.exceptions import NotFoundError
from fittrack.backend.repositories.equipment import EquipmentRepository
from fittrack.backend.repositories.exercise_log import ExerciseLogRepository
from fittrack.backend.repositories.family_member import FamilyMemberRepository
from fittrack.backend.repositories.workout import WorkoutRepository


@pytest.fixture
def members(db_session: AsyncSession) -> FamilyMemberRepository:
    return FamilyMemberRepository(db_session)


@pytest.fixture
def workouts(db_session: AsyncSession) -> WorkoutRepository:
    return WorkoutRepository(db_session)


class TestBaseRepository:

    async def test_create_assigns_id_and_timestamps(self, members):
        member = await members.create(name="Sam", email=None, age=12)

        assert member.id is not None
        assert member.created_at is not None
        assert member.updated_at is not None

    async def test_get_by_id_round_trip(self, members):
        created = await members.create(name="Sam", email="sam@example.com", age=12)

        fetched = await members.get_by_id(created.id)

        assert (fetched.name, fetched.email, fetched.age) == ("Sam", "sam@example.com", 12)

    async def test_get_by_id_missing_raises(self, members):
        with pytest.raises(NotFoundError, match="Family member with id 404 not found"):
            await members.get_by_id(404)

    async def test_get_by_id_or_none(self, members):
        assert await members.get_by_id_or_none(404) is None

    async def test_exists(self, members):
        member = await members.create(name="Sam")

        assert await members.exists(member.id) is True
        assert await members.exists(member.id + 1) is False

    async def test_update_sets_only_given_columns(self, members):
        member = await members.create(name="Sam", email="sam@example.com", age=12)

        updated = await members.update(member.id, age=13)

        assert updated.age == 13
        assert updated.email == "sam@example.com"

    async def test_update_missing_raises(self, members):
        with pytest.raises(NotFoundError):
            await members.update(12, name="Nobody")

    async def test_get_all_and_count(self, db_session):
        repo = EquipmentRepository(db_session)
        for name in ("Barbell", "Bench", "Rack"):
            await repo.create(name=name)

        page = await repo.get_all(limit=2, offset=1)

        assert [e.name for e in page] == ["Bench", "Rack"]
        assert await repo.count() == 3


class TestWorkoutRepository:

    async def test_get_by_family_member_filters_and_orders(self, members, workouts):
        sam = await members.create(name="Sam")
        ann = await members.create(name="Ann")
        await workouts.create(family_member_id=sam.id, name="Jan", workout_date=date(2024, 1, 1))
        await workouts.create(family_member_id=ann.id, name="Ann's", workout_date=date(2024, 2, 1))
        await workouts.create(family_member_id=sam.id, name="Mar", workout_date=date(2024, 3, 1))

        result = await workouts.get_by_family_member(sam.id)

        assert [w.name for w in result] == ["Mar", "Jan"]

    async def test_same_day_newest_entry_first(self, members, workouts):
        sam = await members.create(name="Sam")
        first = await workouts.create(family_member_id=sam.id, name="AM", workout_date=date(2024, 3, 1))
        second = await workouts.create(family_member_id=sam.id, name="PM", workout_date=date(2024, 3, 1))

        result = await workouts.get_all()

        assert [w.id for w in result] == [second.id, first.id]


class TestExerciseLogRepository:

    async def test_get_by_workout_filters_in_insert_order(self, db_session, members, workouts):
        logs = ExerciseLogRepository(db_session)
        sam = await members.create(name="Sam")
        legs = await workouts.create(family_member_id=sam.id, name="Legs", workout_date=date(2024, 3, 1))
        arms = await workouts.create(family_member_id=sam.id, name="Arms", workout_date=date(2024, 3, 2))

        await logs.create(workout_id=legs.id, exercise_name="Squat", sets=5, repetitions=5, weight_lbs=185.0)
        await logs.create(workout_id=arms.id, exercise_name="Curl", sets=3, repetitions=12)
        await logs.create(workout_id=legs.id, exercise_name="Lunge", sets=3, repetitions=10)

        result = await logs.get_by_workout(legs.id)

        assert [log.exercise_name for log in result] == ["Squat", "Lunge"]
        assert result[0].weight_lbs == 185.0
        assert result[1].weight_lbs is None
