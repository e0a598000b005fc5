"""
Availability Calendar.

Counts reservations per calendar day and compares each day with the
campground's daily capacity.

The window is either a rolling number of days starting today or one
whole calendar month. Day boundaries are UTC midnights.
"""

import calendar
from collections import Counter
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from campground_api.core.config import get_app_config
from campground_api.core.exceptions import NotFoundError, ValidationError
from campground_api.core.utils import utc_today
from campground_api.repositories.appointment import AppointmentRepository
from campground_api.repositories.campground import CampgroundRepository
from campground_api.schemas.availability import AvailabilityResponse, DayAvailability
from campground_api.services.base import BaseService


def resolve_window(
    today: date,
    month: int | None = None,
    year: int | None = None,
    window_days: int = 30,
) -> tuple[date, date]:
    """
    Work out the calendar window to report on.

    Returns:
        (first_day, last_day), both inclusive

    Raises:
        ValidationError: `year` given without `month`, or month out of range
    """
    if month is None:
        if year is not None:
            raise ValidationError(
                "A month is required when a year is given",
                details={"month": "missing"},
            )
        return today, today + timedelta(days=window_days - 1)

    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12", details={"month": month})

    year = year if year is not None else today.year
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def count_per_day(appointment_dates: Iterable[datetime]) -> Counter[date]:
    """Number of reservations on each calendar day."""
    return Counter(value.date() for value in appointment_dates)


def build_calendar(
    counts: Counter[date],
    capacity: int,
    start: date,
    end: date,
) -> list[DayAvailability]:
    """One entry per day in [start, end], in date order."""
    days: list[DayAvailability] = []
    for offset in range((end - start).days + 1):
        current = start + timedelta(days=offset)
        booked = counts.get(current, 0)
        days.append(
            DayAvailability(
                date=current,
                booked=booked,
                available=max(0, capacity - booked),
                is_full=booked >= capacity,
            )
        )
    return days


class AvailabilityService(BaseService):
    """Builds availability calendars from stored reservations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.campgrounds = CampgroundRepository(session)
        self.appointments = AppointmentRepository(session)

    async def get_availability(
        self,
        campground_id: str,
        month: int | None = None,
        year: int | None = None,
        today: date | None = None,
    ) -> AvailabilityResponse:
        """
        Availability of a campground over the default window or one month.

        Raises:
            NotFoundError: Unknown campground
            ValidationError: Invalid month/year combination
        """
        campground = await self.campgrounds.get_by_id_or_none(campground_id)
        if campground is None:
            raise NotFoundError(f"No campground with the id of {campground_id}")

        window_days = get_app_config().application.availability.window_days
        start, end = resolve_window(
            today or utc_today(),
            month=month,
            year=year,
            window_days=window_days,
        )

        dates = await self.appointments.dates_between(
            campground_id,
            datetime.combine(start, time.min),
            datetime.combine(end, time.max),
        )
        self._log_debug(
            "Computing availability",
            campground_id=campground_id,
            start=start.isoformat(),
            end=end.isoformat(),
            appointments=len(dates),
        )

        return AvailabilityResponse(
            campground_id=campground.id,
            campground=campground.name,
            daily_capacity=campground.daily_capacity,
            start=start,
            end=end,
            availability=build_calendar(
                count_per_day(dates),
                campground.daily_capacity,
                start,
                end,
            ),
        )
