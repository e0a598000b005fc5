from campground_api.repositories.appointment import AppointmentRepository
from campground_api.repositories.campground import CampgroundRepository
from campground_api.repositories.favorite import FavoriteRepository
from campground_api.repositories.user import UserRepository

__all__ = [
    "AppointmentRepository",
    "CampgroundRepository",
    "FavoriteRepository",
    "UserRepository",
]
