"""
Equipment Schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fittrack.backend.schemas.base import reject_null


class EquipmentCreate(BaseModel):
    """Schema for registering a piece of equipment."""

    name: str = Field(
        ...,
        min_length=1,
        examples=["Adjustable dumbbells"],
    )
    description: str | None = Field(
        default=None,
        examples=["5-52.5 lb pair"],
    )
    category: str | None = Field(
        default=None,
        examples=["Free weights"],
    )


class EquipmentUpdate(BaseModel):
    """Schema for updating equipment. Only provided fields are written."""

    name: str | None = Field(
        default=None,
        min_length=1,
    )
    description: str | None = None
    category: str | None = None

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value: str | None) -> str:
        return reject_null(value, "name")


class EquipmentResponse(BaseModel):
    """Schema for equipment in API responses."""

    id: int
    name: str
    description: str | None
    category: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
