"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every exception carries the HTTP status it maps to, so the handler in
exception_handlers.py never needs a lookup table.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "SYS_INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when the addressed row (the ID in the URL) does not exist."""

    status_code = 404

    def __init__(
        self,
        message: str = "Resource not found",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code="RES_NOT_FOUND", details=details)


class ReferenceNotFoundError(NotFoundError):
    """
    Raised when a foreign key in the request body points at a missing row.

    Examples: a workout for family_member_id 77, or an exercise log naming
    equipment_id 99. details["field"] names the offending body field.
    """

    def __init__(self, message: str, field: str, id: int) -> None:
        super().__init__(message, details={"field": field, "id": id})
        self.code = "RES_REFERENCE_NOT_FOUND"


class DatabaseError(ApplicationError):
    """Raised when a database operation fails."""

    status_code = 503

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")
