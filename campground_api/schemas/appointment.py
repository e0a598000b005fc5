"""
Appointment Schemas.

Shared by the /appointments and /bookings surfaces.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campground_api.core.utils import to_naive_utc
from campground_api.schemas.campground import CampgroundSummary


class AppointmentCreate(BaseModel):
    """Schema for booking a campground."""

    appt_date: datetime = Field(
        ...,
        description="Date and time of the stay",
        examples=["2025-12-01T10:00:00Z"],
    )

    @field_validator("appt_date")
    @classmethod
    def naive_utc(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class AppointmentUpdate(BaseModel):
    """Schema for moving an existing booking."""

    appt_date: datetime | None = Field(default=None, description="New date and time")

    @field_validator("appt_date")
    @classmethod
    def naive_utc(cls, value: datetime | None) -> datetime | None:
        return to_naive_utc(value) if value is not None else None


class AppointmentResponse(BaseModel):
    """Schema for a booking in API responses, with the campground populated."""

    id: str
    user_id: str
    campground_id: str
    appt_date: datetime
    created_at: datetime
    campground: CampgroundSummary | None = None

    model_config = ConfigDict(from_attributes=True)
