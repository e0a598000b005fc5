"""
Campground Schemas.

Pydantic schemas for campground API request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campground_api.models.campground import NAME_MAX_LENGTH, TELEPHONE_PATTERN


def _strip(value: str | None) -> str | None:
    return value.strip() if isinstance(value, str) else value


class CampgroundCreate(BaseModel):
    """Schema for creating a new campground."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        description="Campground name",
        examples=["Sunny Meadows"],
    )
    address: str = Field(
        ...,
        min_length=1,
        description="Postal address",
        examples=["123 Forest Lane, Springfield"],
    )
    telephone: str = Field(
        ...,
        pattern=TELEPHONE_PATTERN,
        description="Ten digit telephone number starting with 0",
        examples=["0123456789"],
    )
    daily_capacity: int = Field(
        default=1,
        ge=1,
        description="Number of bookings a single day can hold",
    )

    @field_validator("name", "address", mode="before")
    @classmethod
    def strip_text(cls, value: str | None) -> str | None:
        return _strip(value)


class CampgroundUpdate(BaseModel):
    """Schema for updating a campground. Only provided fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    address: str | None = Field(default=None, min_length=1)
    telephone: str | None = Field(default=None, pattern=TELEPHONE_PATTERN)
    daily_capacity: int | None = Field(default=None, ge=1)

    @field_validator("name", "address", mode="before")
    @classmethod
    def strip_text(cls, value: str | None) -> str | None:
        return _strip(value)


class CampgroundResponse(BaseModel):
    """Schema for campground in API responses."""

    id: str
    name: str
    address: str
    telephone: str
    daily_capacity: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CampgroundSummary(BaseModel):
    """Fields of a campground embedded in bookings and favorites."""

    id: str
    name: str
    address: str
    telephone: str

    model_config = ConfigDict(from_attributes=True)
