"""
Exception Handlers.

Turn every failure into the ErrorResponse envelope:

    ApplicationError subclasses  -> their own status_code and code
    RequestValidationError       -> 422 VAL_REQUEST_INVALID, one entry per field
    anything else                -> 500 SYS_INTERNAL_ERROR, internals hidden

Usage:
    from fittrack.backend.core.exception_handlers import register_exception_handlers

    register_exception_handlers(app)
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fittrack.backend.core.exceptions import ApplicationError
from fittrack.backend.core.logging import get_logger
from fittrack.backend.schemas.base import ErrorDetail, ErrorResponse, ResponseMetadata

logger = get_logger(__name__)


def _request_context(request: Request) -> dict[str, Any]:
    """Fields identifying the failed request in log records and envelopes."""
    return {
        "request_id": getattr(request.state, "request_id", None)
        or request.headers.get("x-request-id"),
        "frontend": getattr(request.state, "frontend", None),
        "method": request.method,
        "path": request.url.path,
    }


def _error_response(
    status_code: int,
    code: str,
    message: str,
    request_id: str | None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details),
        metadata=ResponseMetadata(request_id=request_id),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> JSONResponse:
    """
    Handle NotFoundError, ReferenceNotFoundError and DatabaseError.

    404s are logged as warnings, database failures as errors.
    """
    context = _request_context(request)
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Request failed",
        extra={**context, "code": exc.code, "status": exc.status_code, "message": exc.message},
    )
    return _error_response(
        exc.status_code, exc.code, exc.message, context["request_id"], exc.details
    )


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report every rejected field, e.g. body.sets or body.workout_date."""
    context = _request_context(request)
    validation_errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", [])),
            "message": err.get("msg", "Validation error"),
            "type": err.get("type", "unknown"),
        }
        for err in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        extra={**context, "fields": [e["field"] for e in validation_errors]},
    )
    return _error_response(
        422,
        "VAL_REQUEST_INVALID",
        "Request validation failed",
        context["request_id"],
        {"validation_errors": validation_errors},
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Log the traceback and answer with a generic 500."""
    context = _request_context(request)
    logger.exception(
        "Unhandled exception",
        extra={**context, "exception_type": type(exc).__name__},
    )
    return _error_response(
        500,
        "SYS_INTERNAL_ERROR",
        "An unexpected error occurred",
        context["request_id"],
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
