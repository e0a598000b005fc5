"""
Appointment Repository.

Data access for reservations. Every query eager-loads the campground
through the relationship's selectin strategy.
"""

from datetime import datetime

from sqlalchemy import delete, func, select

from campground_api.models.appointment import Appointment
from campground_api.repositories.base import BaseRepository


class AppointmentRepository(BaseRepository[Appointment]):
    """Repository for Appointment model."""

    model = Appointment

    async def list_for(
        self,
        user_id: str | None = None,
        campground_id: str | None = None,
    ) -> list[Appointment]:
        """
        List reservations, optionally narrowed to a user and/or campground.

        Ordered by appointment date, earliest first.
        """
        stmt = select(Appointment)
        if user_id is not None:
            stmt = stmt.where(Appointment.user_id == user_id)
        if campground_id is not None:
            stmt = stmt.where(Appointment.campground_id == campground_id)

        result = await self.session.execute(
            stmt.order_by(Appointment.appt_date.asc(), Appointment.created_at.asc())
        )
        return list(result.scalars().all())

    async def count_for_user(self, user_id: str) -> int:
        """Number of reservations held by a user."""
        result = await self.session.execute(
            select(func.count())
            .select_from(Appointment)
            .where(Appointment.user_id == user_id)
        )
        return result.scalar_one()

    async def dates_between(
        self,
        campground_id: str,
        start: datetime,
        end: datetime,
    ) -> list[datetime]:
        """Appointment datetimes of a campground in the closed range [start, end]."""
        result = await self.session.execute(
            select(Appointment.appt_date)
            .where(Appointment.campground_id == campground_id)
            .where(Appointment.appt_date >= start)
            .where(Appointment.appt_date <= end)
        )
        return list(result.scalars().all())

    async def delete_for_campground(self, campground_id: str) -> int:
        """Delete every reservation of a campground. Returns rows removed."""
        result = await self.session.execute(
            delete(Appointment).where(Appointment.campground_id == campground_id)
        )
        return result.rowcount or 0
