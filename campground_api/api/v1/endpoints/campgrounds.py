"""
Campgrounds API Endpoints.

Public listing and lookup, admin-only writes, and the availability calendar.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from campground_api.core.dependencies import AdminUser, DbSession, RequestId
from campground_api.core.pagination import (
    PaginationParams,
    create_paginated_response,
    get_pagination_params,
)
from campground_api.core.query import parse_select
from campground_api.schemas.availability import AvailabilityResponse
from campground_api.schemas.base import ApiResponse, ResponseMetadata
from campground_api.schemas.campground import (
    CampgroundCreate,
    CampgroundResponse,
    CampgroundUpdate,
)
from campground_api.services.availability import AvailabilityService
from campground_api.services.campground import SELECT_FIELDS, CampgroundService

router = APIRouter()


@router.get(
    "",
    summary="List campgrounds",
    description=(
        "Filter with `field=value` or `field[op]=value` (op: gt, gte, lt, lte, in), "
        "order with `sort=name,-daily_capacity`, project with `select=name,address`."
    ),
)
async def list_campgrounds(
    request: Request,
    db: DbSession,
    request_id: RequestId,
    pagination: PaginationParams = Depends(get_pagination_params),
    sort: str | None = Query(default=None, description="Comma separated sort keys"),
    select: str | None = Query(default=None, description="Comma separated fields to return"),
) -> dict[str, Any]:
    selected = parse_select(select, SELECT_FIELDS)
    campgrounds, total = await CampgroundService(db).list_campgrounds(
        params=request.query_params.multi_items(),
        sort=sort,
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return create_paginated_response(
        items=campgrounds,
        item_schema=CampgroundResponse,
        total=total,
        params=pagination,
        select=selected,
        request_id=request_id,
    )


@router.get(
    "/{campground_id}",
    response_model=ApiResponse[CampgroundResponse],
    summary="Get a campground",
)
async def get_campground(
    campground_id: str,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[CampgroundResponse]:
    campground = await CampgroundService(db).get_campground(campground_id)
    return ApiResponse(
        data=CampgroundResponse.model_validate(campground),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "",
    response_model=ApiResponse[CampgroundResponse],
    status_code=201,
    summary="Create a campground",
)
async def create_campground(
    data: CampgroundCreate,
    admin: AdminUser,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[CampgroundResponse]:
    campground = await CampgroundService(db).create_campground(data)
    return ApiResponse(
        data=CampgroundResponse.model_validate(campground),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.put(
    "/{campground_id}",
    response_model=ApiResponse[CampgroundResponse],
    summary="Update a campground",
    description="Only provided fields are updated.",
)
async def update_campground(
    campground_id: str,
    data: CampgroundUpdate,
    admin: AdminUser,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[CampgroundResponse]:
    campground = await CampgroundService(db).update_campground(campground_id, data)
    return ApiResponse(
        data=CampgroundResponse.model_validate(campground),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{campground_id}",
    response_model=ApiResponse[dict[str, Any]],
    summary="Delete a campground",
    description="Also deletes the campground's bookings and favorites.",
)
async def delete_campground(
    campground_id: str,
    admin: AdminUser,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[dict[str, Any]]:
    await CampgroundService(db).delete_campground(campground_id)
    return ApiResponse(data={}, metadata=ResponseMetadata(request_id=request_id))


@router.get(
    "/{campground_id}/availability",
    response_model=ApiResponse[AvailabilityResponse],
    summary="Availability calendar",
    description=(
        "Booked and free places per day. Defaults to the next 30 days; "
        "pass `month` (and optionally `year`) for a whole calendar month."
    ),
)
async def get_availability(
    campground_id: str,
    db: DbSession,
    request_id: RequestId,
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1970, le=9999),
) -> ApiResponse[AvailabilityResponse]:
    availability = await AvailabilityService(db).get_availability(
        campground_id,
        month=month,
        year=year,
    )
    return ApiResponse(data=availability, metadata=ResponseMetadata(request_id=request_id))
