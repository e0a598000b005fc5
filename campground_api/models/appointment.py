"""
Appointment Model.

A reservation of one campground by one user on a given date. The API
exposes the same records under both /appointments and /bookings.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from campground_api.models.base import Base, TimestampMixin, UUIDMixin
from campground_api.models.campground import Campground


class Appointment(UUIDMixin, TimestampMixin, Base):
    """Appointment database model."""

    __tablename__ = "appointments"

    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    campground_id: Mapped[str] = mapped_column(
        ForeignKey("campgrounds.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    appt_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)

    campground: Mapped[Campground] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return (
            f"<Appointment(id={self.id}, campground_id={self.campground_id}, "
            f"appt_date={self.appt_date.isoformat()})>"
        )
