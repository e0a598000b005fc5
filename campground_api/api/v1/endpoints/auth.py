"""
Auth API Endpoints.

Registration, login, current user and logout.
"""

from typing import Any

from fastapi import APIRouter, Response

from campground_api.core.config import get_app_config
from campground_api.core.dependencies import CurrentUser, DbSession, RequestId
from campground_api.schemas.base import ApiResponse, ResponseMetadata
from campground_api.schemas.user import TokenResponse, UserLogin, UserRegister, UserResponse
from campground_api.services.auth import AuthService

router = APIRouter()


def _set_token_cookie(response: Response, token: str) -> None:
    config = get_app_config()
    cookie = config.security.cookie
    response.set_cookie(
        key=cookie.name,
        value=token,
        max_age=cookie.expire_days * 24 * 60 * 60,
        httponly=True,
        secure=cookie.secure_in_production and config.application.environment == "production",
    )


@router.post(
    "/register",
    response_model=ApiResponse[TokenResponse],
    summary="Register a new user",
    description="Create an account and return a signed token.",
)
async def register(
    data: UserRegister,
    response: Response,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[TokenResponse]:
    result = await AuthService(db).register(data)
    _set_token_cookie(response, result.token)
    return ApiResponse(data=result, metadata=ResponseMetadata(request_id=request_id))


@router.post(
    "/login",
    response_model=ApiResponse[TokenResponse],
    summary="Log in",
    description="Validate email and password and return a signed token.",
)
async def login(
    data: UserLogin,
    response: Response,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[TokenResponse]:
    result = await AuthService(db).login(data)
    _set_token_cookie(response, result.token)
    return ApiResponse(data=result, metadata=ResponseMetadata(request_id=request_id))


@router.get(
    "/me",
    response_model=ApiResponse[UserResponse],
    summary="Get current user",
)
async def get_me(user: CurrentUser, request_id: RequestId) -> ApiResponse[UserResponse]:
    return ApiResponse(
        data=UserResponse.model_validate(user),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/logout",
    response_model=ApiResponse[dict[str, Any]],
    summary="Log out",
    description="Clear the token cookie.",
)
async def logout(
    user: CurrentUser,
    response: Response,
    request_id: RequestId,
) -> ApiResponse[dict[str, Any]]:
    response.set_cookie(
        key=get_app_config().security.cookie.name,
        value="none",
        max_age=10,
        httponly=True,
    )
    return ApiResponse(data={}, metadata=ResponseMetadata(request_id=request_id))
