"""
Reservation API Endpoints.

Appointments and bookings are the same records exposed under two
nouns. `create_routers(noun)` builds the pair of routers for one noun:

    top-level  /{noun}s                               list, get, update, delete
    nested     /campgrounds/{campground_id}/{noun}s   list, create
"""

from typing import Any

from fastapi import APIRouter, Depends

from campground_api.core.dependencies import BookingUser, CurrentUser, DbSession, RequestId
from campground_api.schemas.appointment import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
)
from campground_api.schemas.base import ApiResponse, ListResponse, ResponseMetadata
from campground_api.services.appointment import AppointmentService


def create_routers(noun: str) -> tuple[APIRouter, APIRouter]:
    """
    Build the routers for one reservation noun.

    Returns:
        (top-level router, router nested under a campground)
    """
    router = APIRouter()
    nested = APIRouter()

    def get_service(db: DbSession) -> AppointmentService:
        return AppointmentService(db, noun=noun)

    Service = Depends(get_service)

    @router.get(
        "",
        response_model=ListResponse[AppointmentResponse],
        summary=f"List {noun}s",
        description=f"Your own {noun}s; admins see every {noun}.",
    )
    async def list_all(
        user: CurrentUser,
        request_id: RequestId,
        service: AppointmentService = Service,
    ) -> ListResponse[AppointmentResponse]:
        items = await service.list_appointments(user)
        return ListResponse.of(
            [AppointmentResponse.model_validate(item) for item in items],
            request_id=request_id,
        )

    @nested.get(
        "",
        response_model=ListResponse[AppointmentResponse],
        summary=f"List {noun}s of a campground",
    )
    async def list_for_campground(
        campground_id: str,
        user: CurrentUser,
        request_id: RequestId,
        service: AppointmentService = Service,
    ) -> ListResponse[AppointmentResponse]:
        items = await service.list_appointments(user, campground_id=campground_id)
        return ListResponse.of(
            [AppointmentResponse.model_validate(item) for item in items],
            request_id=request_id,
        )

    @nested.post(
        "",
        response_model=ApiResponse[AppointmentResponse],
        summary=f"Create a {noun}",
        description="Users may hold a limited number at a time; admins are exempt.",
    )
    async def create(
        campground_id: str,
        data: AppointmentCreate,
        user: BookingUser,
        request_id: RequestId,
        service: AppointmentService = Service,
    ) -> ApiResponse[AppointmentResponse]:
        item = await service.create_appointment(campground_id, user, data)
        return ApiResponse(
            data=AppointmentResponse.model_validate(item),
            metadata=ResponseMetadata(request_id=request_id),
        )

    @router.get(
        "/{appointment_id}",
        response_model=ApiResponse[AppointmentResponse],
        summary=f"Get a {noun}",
    )
    async def get_one(
        appointment_id: str,
        user: CurrentUser,
        request_id: RequestId,
        service: AppointmentService = Service,
    ) -> ApiResponse[AppointmentResponse]:
        item = await service.get_appointment(appointment_id, user)
        return ApiResponse(
            data=AppointmentResponse.model_validate(item),
            metadata=ResponseMetadata(request_id=request_id),
        )

    @router.put(
        "/{appointment_id}",
        response_model=ApiResponse[AppointmentResponse],
        summary=f"Update a {noun}",
    )
    async def update(
        appointment_id: str,
        data: AppointmentUpdate,
        user: BookingUser,
        request_id: RequestId,
        service: AppointmentService = Service,
    ) -> ApiResponse[AppointmentResponse]:
        item = await service.update_appointment(appointment_id, user, data)
        return ApiResponse(
            data=AppointmentResponse.model_validate(item),
            metadata=ResponseMetadata(request_id=request_id),
        )

    @router.delete(
        "/{appointment_id}",
        response_model=ApiResponse[dict[str, Any]],
        summary=f"Delete a {noun}",
    )
    async def delete(
        appointment_id: str,
        user: BookingUser,
        request_id: RequestId,
        service: AppointmentService = Service,
    ) -> ApiResponse[dict[str, Any]]:
        await service.delete_appointment(appointment_id, user)
        return ApiResponse(data={}, metadata=ResponseMetadata(request_id=request_id))

    return router, nested
