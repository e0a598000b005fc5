"""
Campground Model.

A bookable site. `daily_capacity` bounds how many reservations
a single calendar day can hold.
"""

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campground_api.models.base import Base, TimestampMixin, UUIDMixin

NAME_MAX_LENGTH = 50
TELEPHONE_PATTERN = r"^0\d{9}$"


class Campground(UUIDMixin, TimestampMixin, Base):
    """Campground database model."""

    __tablename__ = "campgrounds"
    __table_args__ = (
        CheckConstraint("daily_capacity >= 1", name="ck_campgrounds_daily_capacity"),
    )

    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH),
        unique=True,
        nullable=False,
        index=True,
    )
    address: Mapped[str] = mapped_column(Text, nullable=False)
    telephone: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    daily_capacity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    def __repr__(self) -> str:
        return f"<Campground(id={self.id}, name={self.name!r})>"
