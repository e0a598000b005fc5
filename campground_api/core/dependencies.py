"""
FastAPI Dependencies.

Shared dependencies for request handling: database session,
request id, and the authenticated user.
"""

import uuid
from collections.abc import Callable, Coroutine
from typing import Annotated, Any

import structlog
from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from campground_api.core.config import get_app_config
from campground_api.core.database import get_db_session
from campground_api.core.exceptions import AuthenticationError, AuthorizationError
from campground_api.core.logging import get_logger
from campground_api.core.security import decode_token
from campground_api.models.user import User, UserRole
from campground_api.services.auth import AuthService

logger = get_logger(__name__)

DbSession = Annotated[AsyncSession, Depends(get_db_session)]

_bearer = HTTPBearer(auto_error=False)


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """Extract or generate request ID from headers."""
    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


def _extract_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    if credentials is not None and credentials.scheme.lower() == "bearer":
        return credentials.credentials

    config = get_app_config()
    if config.features.auth_accept_cookie_token:
        cookie = request.cookies.get(config.security.cookie.name)
        if cookie and cookie != "none":
            return cookie
    return None


async def get_current_user(
    request: Request,
    db: DbSession,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> User:
    """
    Resolve the user behind the request's token.

    Raises:
        AuthenticationError: No token, invalid token, or unknown user
    """
    token = _extract_token(request, credentials)
    if token is None:
        raise AuthenticationError("Not authorized to access this route")

    payload = decode_token(token)
    user = await AuthService(db).get_user(payload["sub"])

    structlog.contextvars.bind_contextvars(user_id=user.id)
    request.state.user_id = user.id
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def require_roles(*roles: UserRole) -> Callable[..., Coroutine[Any, Any, User]]:
    """
    Build a dependency that only admits users holding one of `roles`.

    Usage:
        @router.post("", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    """
    allowed = {role.value for role in roles}

    async def _check(user: CurrentUser) -> User:
        if user.role.value not in allowed:
            logger.warning(
                "Role check failed",
                extra={"user_id": user.id, "role": user.role.value, "allowed": sorted(allowed)},
            )
            raise AuthorizationError(
                f"User role {user.role.value} is not authorized to access this route"
            )
        return user

    return _check


AdminUser = Annotated[User, Depends(require_roles(UserRole.ADMIN))]
BookingUser = Annotated[User, Depends(require_roles(UserRole.ADMIN, UserRole.USER))]
