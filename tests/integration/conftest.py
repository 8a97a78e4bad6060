"""
Integration Test Fixtures.

Fixtures for integration tests - uses real database and services.
These fixtures build on the root conftest.py database fixtures.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.backend.core.database import get_db_session


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def client(
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with database session override.

    Every request in a test shares the test session, so rows written by
    one request are visible to the next.

    Usage:
        async def test_list_members(client: AsyncClient):
            response = await client.get("/api/v1/family-members")
            assert response.status_code == 200
    """
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    from fittrack.backend.main import create_app

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Seed Helpers
# =============================================================================


@pytest.fixture
def seed(client: AsyncClient):
    """
    Create rows through the API and return their `data` payloads.

    Usage:
        member = await seed.member(name="Sam")
        workout = await seed.workout(member["id"], workout_date="2024-03-18")
    """
    return Seeder(client)


class Seeder:

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        response = await self.client.post(f"/api/v1{path}", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    async def member(self, name: str = "Sam", **fields: Any) -> dict[str, Any]:
        return await self._post("/family-members", {"name": name, **fields})

    async def equipment(self, name: str = "Barbell", **fields: Any) -> dict[str, Any]:
        return await self._post("/equipment", {"name": name, **fields})

    async def workout(
        self,
        family_member_id: int,
        name: str = "Leg day",
        workout_date: str = "2024-03-18",
        **fields: Any,
    ) -> dict[str, Any]:
        return await self._post(
            "/workouts",
            {
                "family_member_id": family_member_id,
                "name": name,
                "workout_date": workout_date,
                **fields,
            },
        )

    async def exercise_log(
        self,
        workout_id: int,
        exercise_name: str = "Squat",
        sets: int = 5,
        repetitions: int = 5,
        **fields: Any,
    ) -> dict[str, Any]:
        return await self._post(
            "/exercise-logs",
            {
                "workout_id": workout_id,
                "exercise_name": exercise_name,
                "sets": sets,
                "repetitions": repetitions,
                **fields,
            },
        )


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_success(response: Any, expected_status: int = 200) -> dict[str, Any]:
        """
        Assert API response is successful.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is True, f"Response not successful: {data}"
        return data

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is False, f"Response should be error: {data}"
        assert data.get("error") is not None, f"Missing error details: {data}"

        if expected_code:
            actual_code = data["error"].get("code")
            assert actual_code == expected_code, (
                f"Expected error code {expected_code}, got {actual_code}"
            )

        return data

    @staticmethod
    def assert_not_found(response: Any) -> dict[str, Any]:
        """Assert API response is a 404 with RES_NOT_FOUND."""
        return ApiAssertions.assert_error(response, 404, "RES_NOT_FOUND")

    @staticmethod
    def assert_reference_not_found(response: Any, field: str) -> dict[str, Any]:
        """Assert API response is a 404 for a body field pointing at a missing row."""
        data = ApiAssertions.assert_error(response, 404, "RES_REFERENCE_NOT_FOUND")
        assert data["error"]["details"]["field"] == field, data["error"]
        return data

    @staticmethod
    def assert_validation_error(
        response: Any,
        field: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is a validation error (422).

        Args:
            response: httpx Response object
            field: Expected field with validation error (optional)
        """
        data = ApiAssertions.assert_error(response, 422, "VAL_REQUEST_INVALID")

        if field:
            errors = data["error"].get("details", {}).get("validation_errors", [])
            fields = [e.get("field", "") for e in errors]
            assert any(field in f for f in fields), (
                f"Expected validation error for field '{field}', "
                f"got errors for: {fields}"
            )

        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
