"""
Workout Model.

A dated training session belonging to one family member.
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fittrack.backend.models.base import Base, IntegerIDMixin, TimestampMixin

if TYPE_CHECKING:
    from fittrack.backend.models.exercise_log import ExerciseLog
    from fittrack.backend.models.family_member import FamilyMember


class Workout(IntegerIDMixin, TimestampMixin, Base):
    """
    Workout database model.

    The owning family member is fixed at creation; updates never move a
    workout to another member.
    """

    __tablename__ = "workouts"

    family_member_id: Mapped[int] = mapped_column(
        ForeignKey("family_members.id"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    duration_minutes: Mapped[int | None] = mapped_column(
        nullable=True,
    )
    notes: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    workout_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        index=True,
    )

    family_member: Mapped["FamilyMember"] = relationship(
        back_populates="workouts",
        lazy="raise",
    )
    exercise_logs: Mapped[list["ExerciseLog"]] = relationship(
        back_populates="workout",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return (
            f"<Workout(id={self.id}, member={self.family_member_id}, "
            f"date={self.workout_date})>"
        )
