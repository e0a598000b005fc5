"""
Favorites API Endpoints.

    POST/DELETE /campgrounds/{campground_id}/favorite
    GET         /favorites
"""

from typing import Any

from fastapi import APIRouter

from campground_api.core.dependencies import CurrentUser, DbSession, RequestId
from campground_api.schemas.base import ApiResponse, ListResponse, ResponseMetadata
from campground_api.schemas.favorite import FavoriteResponse
from campground_api.services.favorite import FavoriteService

router = APIRouter()
campground_router = APIRouter()


@campground_router.post(
    "",
    response_model=ApiResponse[FavoriteResponse],
    status_code=201,
    summary="Add campground to favorites",
)
async def add_favorite(
    campground_id: str,
    user: CurrentUser,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[FavoriteResponse]:
    favorite = await FavoriteService(db).add_favorite(user, campground_id)
    return ApiResponse(
        data=FavoriteResponse.model_validate(favorite),
        metadata=ResponseMetadata(request_id=request_id),
    )


@campground_router.delete(
    "",
    response_model=ApiResponse[dict[str, Any]],
    summary="Remove campground from favorites",
)
async def remove_favorite(
    campground_id: str,
    user: CurrentUser,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[dict[str, Any]]:
    await FavoriteService(db).remove_favorite(user, campground_id)
    return ApiResponse(data={}, metadata=ResponseMetadata(request_id=request_id))


@router.get(
    "",
    response_model=ListResponse[FavoriteResponse],
    summary="List my favorite campgrounds",
)
async def list_my_favorites(
    user: CurrentUser,
    db: DbSession,
    request_id: RequestId,
) -> ListResponse[FavoriteResponse]:
    favorites = await FavoriteService(db).list_favorites(user)
    return ListResponse.of(
        [FavoriteResponse.model_validate(item) for item in favorites],
        request_id=request_id,
    )
