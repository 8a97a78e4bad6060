"""
Equipment Service.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.backend.models.equipment import Equipment
from fittrack.backend.repositories.equipment import EquipmentRepository
from fittrack.backend.schemas.equipment import EquipmentCreate, EquipmentUpdate
from fittrack.backend.services.base import BaseService


class EquipmentService(BaseService):
    """Service for the family's equipment inventory."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = EquipmentRepository(session)

    async def create_equipment(self, data: EquipmentCreate) -> Equipment:
        """Register a new piece of equipment."""
        self._log_operation("Creating equipment", name=data.name)

        equipment = await self._execute_db_operation(
            "create_equipment",
            self.repo.create(
                name=data.name,
                description=data.description,
                category=data.category,
            ),
        )

        self._log_debug("Equipment created", equipment_id=equipment.id)
        return equipment

    async def get_equipment(self, equipment_id: int) -> Equipment:
        """
        Get equipment by ID.

        Raises:
            NotFoundError: If the equipment does not exist
        """
        return await self._get_or_404(self.repo, equipment_id)

    async def list_equipment(
        self,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Equipment], int]:
        """List equipment with total count for pagination."""
        items = await self._execute_db_operation(
            "list_equipment",
            self.repo.get_all(limit=limit, offset=offset),
        )
        total = await self._execute_db_operation("count_equipment", self.repo.count())
        return items, total

    async def update_equipment(
        self,
        equipment_id: int,
        data: EquipmentUpdate,
    ) -> Equipment:
        """
        Update equipment. Only fields present in the request are written.

        Raises:
            NotFoundError: If the equipment does not exist
        """
        update_data = data.model_dump(exclude_unset=True)

        if not update_data:
            return await self._get_or_404(self.repo, equipment_id)

        self._log_operation(
            "Updating equipment",
            equipment_id=equipment_id,
            fields=list(update_data.keys()),
        )

        return await self._execute_db_operation(
            "update_equipment",
            self.repo.update(equipment_id, **update_data),
        )
