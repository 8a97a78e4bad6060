"""
Unit Tests for Exception Handlers.

Application exceptions map to HTTP status codes and the error envelope.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi.exceptions import RequestValidationError

from fittrack.backend.core.exception_handlers import (
    application_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from fittrack.backend.core.exceptions import (
    DatabaseError,
    NotFoundError,
    ReferenceNotFoundError,
)


@pytest.fixture
def mock_request() -> MagicMock:
    request = MagicMock()
    request.state.request_id = "req-123"
    request.state.frontend = "cli"
    request.url.path = "/api/v1/workouts/9"
    request.method = "GET"
    return request


def _body(response) -> dict:
    return json.loads(response.body)


class TestStatusCodes:

    def test_each_error_carries_its_status(self):
        assert NotFoundError().status_code == 404
        assert ReferenceNotFoundError("Workout with id 1 not found", "workout_id", 1).status_code == 404
        assert DatabaseError().status_code == 503


class TestApplicationErrorHandler:

    async def test_not_found(self, mock_request):
        response = await application_error_handler(
            mock_request, NotFoundError("Workout with id 9 not found")
        )

        assert response.status_code == 404
        body = _body(response)
        assert body["success"] is False
        assert body["data"] is None
        assert body["error"]["code"] == "RES_NOT_FOUND"
        assert body["error"]["details"] is None
        assert body["metadata"]["request_id"] == "req-123"

    async def test_reference_not_found_names_the_field(self, mock_request):
        exc = ReferenceNotFoundError("Family member with id 77 not found", "family_member_id", 77)
        response = await application_error_handler(mock_request, exc)

        assert response.status_code == 404
        error = _body(response)["error"]
        assert error["code"] == "RES_REFERENCE_NOT_FOUND"
        assert error["details"] == {"field": "family_member_id", "id": 77}

    async def test_database_error_is_503(self, mock_request):
        response = await application_error_handler(mock_request, DatabaseError())
        assert response.status_code == 503
        assert _body(response)["error"]["code"] == "SYS_DATABASE_ERROR"

    async def test_request_id_falls_back_to_header(self):
        request = MagicMock()
        del request.state.request_id
        request.headers = {"x-request-id": "from-header"}

        response = await application_error_handler(request, NotFoundError())

        assert _body(response)["metadata"]["request_id"] == "from-header"


class TestValidationErrorHandler:

    async def test_lists_each_field(self, mock_request):
        exc = RequestValidationError([
            {"loc": ("body", "name"), "msg": "Field required", "type": "missing"},
            {"loc": ("body", "sets"), "msg": "Input should be greater than 0", "type": "greater_than"},
        ])
        response = await validation_error_handler(mock_request, exc)

        assert response.status_code == 422
        error = _body(response)["error"]
        assert error["code"] == "VAL_REQUEST_INVALID"
        fields = [e["field"] for e in error["details"]["validation_errors"]]
        assert fields == ["body.name", "body.sets"]


class TestUnhandledExceptionHandler:

    async def test_hides_internals(self, mock_request):
        try:
            raise RuntimeError("secret path /etc")
        except RuntimeError as exc:
            response = await unhandled_exception_handler(mock_request, exc)

        assert response.status_code == 500
        error = _body(response)["error"]
        assert error["code"] == "SYS_INTERNAL_ERROR"
        assert "secret" not in error["message"]
