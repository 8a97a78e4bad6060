"""
Exercise Log Schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fittrack.backend.schemas.base import reject_null

# numeric(6, 2): two decimals, so anything below 0.01 would be stored as 0.00
MIN_WEIGHT_LBS = 0.01
MAX_WEIGHT_LBS = 9999.99


class ExerciseLogCreate(BaseModel):
    """Schema for logging an exercise inside a workout."""

    workout_id: int = Field(..., examples=[1])
    equipment_id: int | None = Field(default=None, examples=[2])
    exercise_name: str = Field(
        ...,
        min_length=1,
        examples=["Bench press"],
    )
    sets: int = Field(..., gt=0, examples=[3])
    repetitions: int = Field(..., gt=0, examples=[10])
    weight_lbs: float | None = Field(
        default=None,
        ge=MIN_WEIGHT_LBS,
        le=MAX_WEIGHT_LBS,
        examples=[135.0],
    )
    notes: str | None = None


class ExerciseLogUpdate(BaseModel):
    """
    Schema for updating an exercise log.

    The workout a log belongs to cannot be changed.
    """

    equipment_id: int | None = None
    exercise_name: str | None = Field(
        default=None,
        min_length=1,
    )
    sets: int | None = Field(default=None, gt=0)
    repetitions: int | None = Field(default=None, gt=0)
    weight_lbs: float | None = Field(default=None, ge=MIN_WEIGHT_LBS, le=MAX_WEIGHT_LBS)
    notes: str | None = None

    @field_validator("exercise_name", "sets", "repetitions")
    @classmethod
    def _not_null(cls, value, info):
        return reject_null(value, info.field_name)


class ExerciseLogResponse(BaseModel):
    """Schema for an exercise log in API responses."""

    id: int
    workout_id: int
    equipment_id: int | None
    exercise_name: str
    sets: int
    repetitions: int
    weight_lbs: float | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
