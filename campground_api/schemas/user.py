"""
User and Auth Schemas.

Pydantic schemas for registration, login and profile responses.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campground_api.models.user import UserRole

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserRegister(BaseModel):
    """Schema for registering a new account."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Jane Doe"])
    telephone: str | None = Field(default=None, max_length=20, examples=["0123456789"])
    email: str = Field(
        ...,
        max_length=255,
        pattern=EMAIL_PATTERN,
        examples=["jane@example.com"],
    )
    password: str = Field(..., min_length=6, max_length=128)
    role: UserRole = UserRole.USER

    @field_validator("email")
    @classmethod
    def normalise_email(cls, value: str) -> str:
        return value.strip().lower()


class UserLogin(BaseModel):
    """
    Schema for logging in.

    Both fields are optional at the schema level so a missing value is
    reported with the login-specific message rather than a generic one.
    """

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Schema for a user profile in API responses."""

    id: str
    name: str
    telephone: str | None
    email: str
    role: UserRole
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    """Schema returned by register and login."""

    id: str
    name: str
    telephone: str | None
    email: str
    token: str
