"""
Base Repository.

Base class for all repositories with common create/read/update operations.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.backend.core.exceptions import NotFoundError, ReferenceNotFoundError
from fittrack.backend.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common operations.

    Subclasses set the model class and a human-readable label used in
    not-found messages:

        class EquipmentRepository(BaseRepository[Equipment]):
            model = Equipment
            label = "Equipment"
    """

    model: type[ModelType]
    label: str = "Resource"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def not_found(self, id: int) -> NotFoundError:
        """Build the NotFoundError raised for a missing ID."""
        return NotFoundError(f"{self.label} with id {id} not found")

    def reference_not_found(self, field: str, id: int) -> ReferenceNotFoundError:
        """Build the error raised when a request body field points at a missing row."""
        return ReferenceNotFoundError(f"{self.label} with id {id} not found", field, id)

    async def get_by_id(self, id: int) -> ModelType:
        """
        Get a single record by ID.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id_or_none(id)
        if instance is None:
            raise self.not_found(id)
        return instance

    async def get_by_id_or_none(self, id: int) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_all(self, limit: int = 50, offset: int = 0) -> list[ModelType]:
        """Get records in insertion order with pagination."""
        result = await self.session.execute(
            select(self.model).order_by(self.model.id).limit(limit).offset(offset)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        """Get total number of records."""
        result = await self.session.execute(
            select(func.count()).select_from(self.model)
        )
        return result.scalar_one()

    async def create(self, **kwargs: Any) -> ModelType:
        """Create a new record."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, id: int, **kwargs: Any) -> ModelType:
        """
        Update an existing record with the given column values.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id(id)

        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def exists(self, id: int) -> bool:
        """Check if a record exists by ID."""
        result = await self.session.execute(
            select(self.model.id).where(self.model.id == id)
        )
        return result.scalar_one_or_none() is not None
