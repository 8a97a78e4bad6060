"""
Request Context Middleware.

Tags every request with an ID and the calling frontend, binds both to
structlog so service and repository logs carry them, and reports the
request ID and elapsed time back in the response headers.
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from fittrack.backend.core.logging import get_logger

logger = get_logger(__name__)

# Clients that identify themselves with X-Frontend-ID. The Typer CLI is the
# only one; anything else is logged as "unknown".
KNOWN_FRONTENDS = frozenset({"cli"})


def resolve_frontend(header_value: str | None) -> str:
    """Normalise X-Frontend-ID to a known frontend name or "unknown"."""
    frontend = (header_value or "").strip().lower()
    return frontend if frontend in KNOWN_FRONTENDS else "unknown"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Sets request.state.request_id and request.state.frontend.

    Response headers:
        X-Request-ID     - the caller's ID, or a generated UUID
        X-Response-Time  - handling time in milliseconds
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        frontend = resolve_frontend(request.headers.get("X-Frontend-ID"))

        request.state.request_id = request_id
        request.state.frontend = frontend

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            source="api",
            request_id=request_id,
            frontend=frontend,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed with exception",
                extra={"duration_ms": _elapsed_ms(started), "error_type": type(exc).__name__},
            )
            raise
        else:
            duration_ms = _elapsed_ms(started)
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"
            logger.debug(
                "Request completed",
                extra={"status_code": response.status_code, "duration_ms": duration_ms},
            )
            return response
        finally:
            structlog.contextvars.clear_contextvars()


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
