"""
Favorite Schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from campground_api.schemas.campground import CampgroundSummary


class FavoriteResponse(BaseModel):
    """Schema for a favorite in API responses."""

    id: str
    user_id: str
    campground_id: str
    created_at: datetime
    campground: CampgroundSummary | None = None

    model_config = ConfigDict(from_attributes=True)
