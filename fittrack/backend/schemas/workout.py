"""
Workout Schemas.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fittrack.backend.schemas.base import coerce_to_date, reject_null


class WorkoutCreate(BaseModel):
    """Schema for logging a new workout."""

    family_member_id: int = Field(
        ...,
        description="Owning family member",
        examples=[1],
    )
    name: str = Field(
        ...,
        min_length=1,
        examples=["Upper body"],
    )
    duration_minutes: int | None = Field(
        default=None,
        gt=0,
        examples=[45],
    )
    notes: str | None = None
    workout_date: date = Field(
        ...,
        description="Day the workout took place (YYYY-MM-DD)",
        examples=["2024-03-18"],
    )

    @field_validator("workout_date", mode="before")
    @classmethod
    def _truncate_datetime(cls, value):
        return coerce_to_date(value)


class WorkoutUpdate(BaseModel):
    """
    Schema for updating a workout.

    The owning family member cannot be changed.
    """

    name: str | None = Field(
        default=None,
        min_length=1,
    )
    duration_minutes: int | None = Field(default=None, gt=0)
    notes: str | None = None
    workout_date: date | None = None

    @field_validator("workout_date", mode="before")
    @classmethod
    def _truncate_datetime(cls, value):
        return coerce_to_date(value)

    @field_validator("name", "workout_date")
    @classmethod
    def _not_null(cls, value, info):
        return reject_null(value, info.field_name)


class WorkoutResponse(BaseModel):
    """Schema for a workout in API responses."""

    id: int
    family_member_id: int
    name: str
    duration_minutes: int | None
    notes: str | None
    workout_date: date
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
