"""
Family Member Model.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fittrack.backend.models.base import Base, IntegerIDMixin, TimestampMixin

if TYPE_CHECKING:
    from fittrack.backend.models.workout import Workout


class FamilyMember(IntegerIDMixin, TimestampMixin, Base):
    """A person in the family whose workouts are tracked."""

    __tablename__ = "family_members"

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        index=True,
    )
    email: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    age: Mapped[int | None] = mapped_column(
        nullable=True,
    )

    workouts: Mapped[list["Workout"]] = relationship(
        back_populates="family_member",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<FamilyMember(id={self.id}, name={self.name!r})>"
