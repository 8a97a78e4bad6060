"""
Integration Tests for Request Context Middleware and Health Routes.
"""

from unittest.mock import patch

from httpx import AsyncClient


class TestRequestContext:

    async def test_generates_request_id(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.headers["X-Request-ID"]
        assert response.headers["X-Response-Time"].endswith("ms")

    async def test_propagates_request_id_into_envelope(self, client: AsyncClient, api):
        response = await client.get(
            "/api/v1/family-members",
            headers={"X-Request-ID": "trace-abc", "X-Frontend-ID": "cli"},
        )

        body = api.assert_success(response)
        assert response.headers["X-Request-ID"] == "trace-abc"
        assert body["metadata"]["request_id"] == "trace-abc"

    async def test_error_envelope_carries_request_id(self, client: AsyncClient, api):
        response = await client.get(
            "/api/v1/workouts/12",
            headers={"X-Request-ID": "trace-404"},
        )

        data = api.assert_not_found(response)
        assert data["metadata"]["request_id"] == "trace-404"


class TestHealthRoutes:

    async def test_ready_returns_503_when_database_down(self, client: AsyncClient):
        with patch(
            "fittrack.backend.api.health.check_database",
            return_value={"status": "unhealthy", "error": "down"},
        ):
            response = await client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["detail"]["status"] == "unhealthy"

    async def test_detailed(self, client: AsyncClient):
        with patch(
            "fittrack.backend.api.health.check_database",
            return_value={"status": "healthy", "latency_ms": 1},
        ):
            response = await client.get("/health/detailed")

        body = response.json()
        assert response.status_code == 200
        assert body["application"]["name"] == "FitTrack"
