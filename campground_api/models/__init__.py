# Import every model so Base.metadata knows all tables
from campground_api.models.appointment import Appointment
from campground_api.models.base import Base
from campground_api.models.campground import Campground
from campground_api.models.favorite import Favorite
from campground_api.models.user import User, UserRole

__all__ = [
    "Appointment",
    "Base",
    "Campground",
    "Favorite",
    "User",
    "UserRole",
]
