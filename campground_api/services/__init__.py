from campground_api.services.appointment import AppointmentService
from campground_api.services.auth import AuthService
from campground_api.services.availability import AvailabilityService
from campground_api.services.campground import CampgroundService
from campground_api.services.favorite import FavoriteService

__all__ = [
    "AppointmentService",
    "AuthService",
    "AvailabilityService",
    "CampgroundService",
    "FavoriteService",
]
