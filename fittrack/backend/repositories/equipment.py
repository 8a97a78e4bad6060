"""
Equipment Repository.
"""

from fittrack.backend.models.equipment import Equipment
from fittrack.backend.repositories.base import BaseRepository


class EquipmentRepository(BaseRepository[Equipment]):
    """Data access for the equipment table."""

    model = Equipment
    label = "Equipment"
