"""
Unit Tests for the Availability Calendar.

Window and calendar helpers are pure functions; the service is tested
with its repositories patched.
"""

from collections import Counter
from datetime import date, datetime, time
from unittest.mock import patch

import pytest

from campground_api.core.exceptions import NotFoundError, ValidationError
from campground_api.services.availability import (
    AvailabilityService,
    build_calendar,
    count_per_day,
    resolve_window,
)


class TestResolveWindow:
    def test_default_window_starts_today(self):
        start, end = resolve_window(date(2025, 3, 10), window_days=30)
        assert start == date(2025, 3, 10)
        assert end == date(2025, 4, 8)

    def test_month_of_given_year(self):
        assert resolve_window(date(2025, 3, 10), month=2, year=2024) == (
            date(2024, 2, 1),
            date(2024, 2, 29),
        )

    def test_month_defaults_to_current_year(self):
        assert resolve_window(date(2025, 3, 10), month=12) == (
            date(2025, 12, 1),
            date(2025, 12, 31),
        )

    def test_last_representable_month(self):
        assert resolve_window(date(2025, 3, 10), month=12, year=9999) == (
            date(9999, 12, 1),
            date(9999, 12, 31),
        )

    def test_year_without_month_is_rejected(self):
        with pytest.raises(ValidationError, match="month is required"):
            resolve_window(date(2025, 3, 10), year=2025)

    def test_month_out_of_range_is_rejected(self):
        with pytest.raises(ValidationError):
            resolve_window(date(2025, 3, 10), month=13)


class TestCountPerDay:
    def test_groups_by_calendar_day(self):
        counts = count_per_day(
            [
                datetime(2025, 5, 1, 9, 0),
                datetime(2025, 5, 1, 23, 59),
                datetime(2025, 5, 2, 0, 0),
            ]
        )
        assert counts == Counter({date(2025, 5, 1): 2, date(2025, 5, 2): 1})


class TestBuildCalendar:
    def test_one_entry_per_day(self):
        days = build_calendar(Counter(), capacity=2, start=date(2025, 5, 1), end=date(2025, 5, 3))
        assert [d.date for d in days] == [date(2025, 5, 1), date(2025, 5, 2), date(2025, 5, 3)]
        assert all(d.available == 2 and not d.is_full for d in days)

    def test_includes_end_day(self):
        days = build_calendar(Counter(), capacity=1, start=date(2025, 5, 1), end=date(2025, 5, 1))
        assert [d.date for d in days] == [date(2025, 5, 1)]

    def test_stops_at_date_max(self):
        days = build_calendar(Counter(), capacity=1, start=date(9999, 12, 1), end=date.max)
        assert len(days) == 31
        assert days[-1].date == date.max

    def test_full_day(self):
        counts = Counter({date(2025, 5, 2): 2})
        days = build_calendar(counts, capacity=2, start=date(2025, 5, 1), end=date(2025, 5, 3))
        assert days[1].booked == 2
        assert days[1].available == 0
        assert days[1].is_full is True

    def test_overbooked_day_never_reports_negative_availability(self):
        counts = Counter({date(2025, 5, 1): 5})
        days = build_calendar(counts, capacity=2, start=date(2025, 5, 1), end=date(2025, 5, 2))
        assert days[0].available == 0
        assert days[0].is_full is True


class TestAvailabilityService:
    @pytest.fixture
    def service(self, mock_db_session):
        return AvailabilityService(mock_db_session)

    async def test_unknown_campground_is_404(self, service):
        with patch.object(service.campgrounds, "get_by_id_or_none", return_value=None):
            with pytest.raises(NotFoundError, match="No campground with the id of nope"):
                await service.get_availability("nope")

    async def test_default_window(self, service, make_campground):
        campground = make_campground(daily_capacity=1)
        with (
            patch.object(service.campgrounds, "get_by_id_or_none", return_value=campground),
            patch.object(
                service.appointments,
                "dates_between",
                return_value=[datetime(2025, 3, 11, 10, 0)],
            ) as dates_between,
        ):
            result = await service.get_availability("camp-1", today=date(2025, 3, 10))

        dates_between.assert_awaited_once_with(
            "camp-1",
            datetime(2025, 3, 10),
            datetime.combine(date(2025, 4, 8), time.max),
        )
        assert result.start == date(2025, 3, 10)
        assert result.end == date(2025, 4, 8)
        assert len(result.availability) == 30
        assert result.availability[1].is_full is True
        assert result.campground == "Pine Ridge"

    async def test_month_window(self, service, make_campground):
        with (
            patch.object(service.campgrounds, "get_by_id_or_none", return_value=make_campground()),
            patch.object(service.appointments, "dates_between", return_value=[]),
        ):
            result = await service.get_availability(
                "camp-1", month=2, year=2024, today=date(2025, 3, 10)
            )

        assert result.start == date(2024, 2, 1)
        assert result.end == date(2024, 2, 29)
        assert len(result.availability) == 29
