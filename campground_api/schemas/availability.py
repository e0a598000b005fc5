"""
Availability Schemas.

Per-day booking counts for a campground over a date window.
"""

from datetime import date

from pydantic import BaseModel


class DayAvailability(BaseModel):
    """Booking state of a single calendar day."""

    date: date
    booked: int
    available: int
    is_full: bool


class AvailabilityResponse(BaseModel):
    """Availability calendar of one campground."""

    campground_id: str
    campground: str
    daily_capacity: int
    start: date
    end: date
    availability: list[DayAvailability]
