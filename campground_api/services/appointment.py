"""
Appointment Service.

Reservations of campgrounds by users. The same records are served
under /appointments and /bookings; `noun` only changes the wording
of messages so each surface speaks its own vocabulary.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from campground_api.core.config import get_app_config
from campground_api.core.exceptions import BookingLimitError, NotFoundError
from campground_api.models.appointment import Appointment
from campground_api.models.user import User
from campground_api.repositories.appointment import AppointmentRepository
from campground_api.repositories.campground import CampgroundRepository
from campground_api.schemas.appointment import AppointmentCreate, AppointmentUpdate
from campground_api.services.base import BaseService


class AppointmentService(BaseService):
    """Service for reservation business logic."""

    def __init__(self, session: AsyncSession, noun: str = "appointment") -> None:
        super().__init__(session)
        self.noun = noun
        self.repo = AppointmentRepository(session)
        self.campgrounds = CampgroundRepository(session)

    async def list_appointments(
        self,
        user: User,
        campground_id: str | None = None,
    ) -> list[Appointment]:
        """
        List reservations visible to the user.

        Admins see everything (optionally for one campground); other
        users only ever see their own.
        """
        if user.is_admin:
            return await self.repo.list_for(campground_id=campground_id)
        return await self.repo.list_for(user_id=user.id, campground_id=campground_id)

    async def get_appointment(self, appointment_id: str, user: User) -> Appointment:
        """
        Get a reservation owned by the user (any reservation for admins).

        Raises:
            NotFoundError: Unknown reservation
            AuthorizationError: Reservation belongs to someone else
        """
        appointment = await self._get_or_404(appointment_id)
        self._ensure_owner_or_admin(user, appointment.user_id, "view", self.noun)
        return appointment

    async def create_appointment(
        self,
        campground_id: str,
        user: User,
        data: AppointmentCreate,
    ) -> Appointment:
        """
        Book a campground for the user.

        Raises:
            NotFoundError: Unknown campground
            BookingLimitError: Non-admin user already holds the maximum
        """
        campground = await self.campgrounds.get_by_id_or_none(campground_id)
        if campground is None:
            raise NotFoundError(f"No campground with the id of {campground_id}")

        limit = get_app_config().application.booking.max_per_user
        if not user.is_admin:
            existing = await self.repo.count_for_user(user.id)
            if existing >= limit:
                raise BookingLimitError(
                    f"The user with ID {user.id} has already made {limit} {self.noun}s",
                    limit=limit,
                )

        self._log_operation(
            f"Creating {self.noun}",
            user_id=user.id,
            campground_id=campground_id,
            appt_date=data.appt_date.isoformat(),
        )
        appointment = await self._execute_db_operation(
            f"create_{self.noun}",
            self.repo.create(
                user_id=user.id,
                campground=campground,
                appt_date=data.appt_date,
            ),
        )
        return appointment

    async def update_appointment(
        self,
        appointment_id: str,
        user: User,
        data: AppointmentUpdate,
    ) -> Appointment:
        """
        Move a reservation to another date.

        Raises:
            NotFoundError: Unknown reservation
            AuthorizationError: Reservation belongs to someone else
        """
        appointment = await self._get_or_404(appointment_id)
        self._ensure_owner_or_admin(user, appointment.user_id, "update", self.noun)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if not update_data:
            return appointment

        self._log_operation(
            f"Updating {self.noun}",
            appointment_id=appointment_id,
            fields=list(update_data.keys()),
        )
        return await self._execute_db_operation(
            f"update_{self.noun}",
            self.repo.update(appointment_id, **update_data),
        )

    async def delete_appointment(self, appointment_id: str, user: User) -> None:
        """
        Cancel a reservation.

        Raises:
            NotFoundError: Unknown reservation
            AuthorizationError: Reservation belongs to someone else
        """
        appointment = await self._get_or_404(appointment_id)
        self._ensure_owner_or_admin(user, appointment.user_id, "delete", self.noun)

        self._log_operation(f"Deleting {self.noun}", appointment_id=appointment_id)
        await self._execute_db_operation(
            f"delete_{self.noun}",
            self.repo.delete(appointment_id),
        )

    async def _get_or_404(self, appointment_id: str) -> Appointment:
        appointment = await self.repo.get_by_id_or_none(appointment_id)
        if appointment is None:
            raise NotFoundError(f"No {self.noun} found with id of {appointment_id}")
        return appointment
