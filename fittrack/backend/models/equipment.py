"""
Equipment Model.
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.backend.models.base import Base, IntegerIDMixin, TimestampMixin


class Equipment(IntegerIDMixin, TimestampMixin, Base):
    """A piece of gym equipment that exercises can be logged against."""

    __tablename__ = "equipment"

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    category: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Equipment(id={self.id}, name={self.name!r})>"
