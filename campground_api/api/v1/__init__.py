"""
API Version 1 Router.

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from campground_api.api.v1.endpoints import auth, campgrounds, favorites, reservations

router = APIRouter()

appointments_router, campground_appointments_router = reservations.create_routers("appointment")
bookings_router, campground_bookings_router = reservations.create_routers("booking")

router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Nested campground routes are registered before /campgrounds/{campground_id}
router.include_router(
    campground_appointments_router,
    prefix="/campgrounds/{campground_id}/appointments",
    tags=["appointments"],
)
router.include_router(
    campground_bookings_router,
    prefix="/campgrounds/{campground_id}/bookings",
    tags=["bookings"],
)
router.include_router(
    favorites.campground_router,
    prefix="/campgrounds/{campground_id}/favorite",
    tags=["favorites"],
)
router.include_router(campgrounds.router, prefix="/campgrounds", tags=["campgrounds"])

router.include_router(appointments_router, prefix="/appointments", tags=["appointments"])
router.include_router(bookings_router, prefix="/bookings", tags=["bookings"])
router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
