"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from datetime import date, datetime
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_service(mock_db_session: AsyncMock):
            service = WorkoutService(mock_db_session)
    """
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def failing_db_session() -> AsyncMock:
    """Session whose every query fails as if PostgreSQL were unreachable."""
    session = AsyncMock()
    session.add = MagicMock()
    session.execute.side_effect = OperationalError(
        "SELECT", {}, Exception("connection refused")
    )
    return session


def make_row(**fields: Any) -> SimpleNamespace:
    """Build an ORM-like object with timestamps for response schemas."""
    now = datetime(2024, 3, 18, 7, 30)
    return SimpleNamespace(created_at=now, updated_at=now, **fields)


@pytest.fixture
def member_row() -> SimpleNamespace:
    return make_row(id=1, name="Sam", email="sam@example.com", age=12)


@pytest.fixture
def workout_row() -> SimpleNamespace:
    return make_row(
        id=3,
        family_member_id=1,
        name="Leg day",
        duration_minutes=45,
        notes=None,
        workout_date=date(2024, 3, 18),
    )


@pytest.fixture
def exercise_log_row() -> SimpleNamespace:
    return make_row(
        id=7,
        workout_id=3,
        equipment_id=None,
        exercise_name="Squat",
        sets=5,
        repetitions=5,
        weight_lbs=185.0,
        notes=None,
    )
