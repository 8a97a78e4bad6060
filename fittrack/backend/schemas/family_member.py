"""
Family Member Schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fittrack.backend.schemas.base import EMAIL_PATTERN, reject_null


class FamilyMemberCreate(BaseModel):
    """Schema for creating a family member."""

    name: str = Field(
        ...,
        min_length=1,
        description="Display name",
        examples=["Alex"],
    )
    email: str | None = Field(
        default=None,
        pattern=EMAIL_PATTERN,
        description="Contact e-mail",
        examples=["alex@example.com"],
    )
    age: int | None = Field(
        default=None,
        gt=0,
        description="Age in years",
        examples=[34],
    )


class FamilyMemberUpdate(BaseModel):
    """Schema for updating a family member. Only provided fields are written."""

    name: str | None = Field(
        default=None,
        min_length=1,
    )
    email: str | None = Field(
        default=None,
        pattern=EMAIL_PATTERN,
    )
    age: int | None = Field(default=None, gt=0)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value: str | None) -> str:
        return reject_null(value, "name")


class FamilyMemberResponse(BaseModel):
    """Schema for a family member in API responses."""

    id: int
    name: str
    email: str | None
    age: int | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
