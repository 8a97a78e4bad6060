"""
Exercise Log Model.

One exercise performed during a workout: sets x repetitions, optionally
on a piece of equipment and at a given weight.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fittrack.backend.models.base import Base, IntegerIDMixin, TimestampMixin

if TYPE_CHECKING:
    from fittrack.backend.models.workout import Workout


class ExerciseLog(IntegerIDMixin, TimestampMixin, Base):
    """Exercise log database model."""

    __tablename__ = "exercise_logs"

    workout_id: Mapped[int] = mapped_column(
        ForeignKey("workouts.id"),
        nullable=False,
        index=True,
    )
    equipment_id: Mapped[int | None] = mapped_column(
        ForeignKey("equipment.id"),
        nullable=True,
    )
    exercise_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    sets: Mapped[int] = mapped_column(nullable=False)
    repetitions: Mapped[int] = mapped_column(nullable=False)
    # numeric(6, 2) read back as float
    weight_lbs: Mapped[float | None] = mapped_column(
        Numeric(6, 2, asdecimal=False),
        nullable=True,
    )
    notes: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    workout: Mapped["Workout"] = relationship(
        back_populates="exercise_logs",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return (
            f"<ExerciseLog(id={self.id}, workout={self.workout_id}, "
            f"exercise={self.exercise_name!r})>"
        )
