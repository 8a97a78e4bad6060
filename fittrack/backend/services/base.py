"""
Base Service.

Base class for all services. Services orchestrate repositories, check
that referenced rows exist, and convert database failures into
application exceptions.

Usage:
    from fittrack.backend.services.base import BaseService

    class WorkoutService(BaseService):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(session)
            self.repo = WorkoutRepository(session)
            self.member_repo = FamilyMemberRepository(session)

        async def create_workout(self, data: WorkoutCreate) -> Workout:
            await self._ensure_referenced(
                self.member_repo, "family_member_id", data.family_member_id
            )
            return await self._execute_db_operation(
                "create_workout", self.repo.create(**data.model_dump())
            )
"""

from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.backend.core.exceptions import DatabaseError
from fittrack.backend.core.logging import get_logger
from fittrack.backend.repositories.base import BaseRepository

T = TypeVar("T")


class BaseService:
    """
    Base class for all services.

    Provides:
    - Database session management
    - Logging context
    - Error wrapping for database operations
    - Foreign-key existence checks

    Subclasses should call super().__init__(session) and initialize
    their repositories in __init__.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        return self._session

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Any,
    ) -> T:
        """
        Execute a database operation with error handling.

        SQLAlchemy exceptions become DatabaseError. Application exceptions
        raised by the coroutine (e.g. NotFoundError) propagate unchanged.

        Raises:
            DatabaseError: For any database failure
        """
        try:
            return await coro
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database constraint violation: {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    async def _get_or_404(self, repo: BaseRepository, id: int) -> Any:
        """
        Load the row addressed by the URL.

        Raises:
            NotFoundError: If no row with this ID exists
            DatabaseError: If the lookup itself fails
        """
        table = repo.model.__tablename__
        return await self._execute_db_operation(f"get_{table}", repo.get_by_id(id))

    async def _ensure_exists(self, repo: BaseRepository, id: int) -> None:
        """
        Check that the row addressed by the URL exists.

        Raises:
            NotFoundError: If no row with this ID exists
        """
        table = repo.model.__tablename__
        if not await self._execute_db_operation(f"check_{table}", repo.exists(id)):
            raise repo.not_found(id)

    async def _ensure_referenced(self, repo: BaseRepository, field: str, id: int) -> None:
        """
        Check that a foreign key in the request body points at an existing row.

        Raises:
            ReferenceNotFoundError: If the referenced row does not exist
        """
        table = repo.model.__tablename__
        if not await self._execute_db_operation(f"check_{table}", repo.exists(id)):
            self._log_debug("Referenced row missing", field=field, id=id)
            raise repo.reference_not_found(field, id)

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """Log a service operation with context."""
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """Log debug information."""
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
