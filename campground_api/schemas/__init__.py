# Pydantic schemas package
from campground_api.schemas.base import (
    ApiResponse,
    ErrorDetail,
    ErrorResponse,
    ListResponse,
    PaginatedResponse,
    PaginationInfo,
    ResponseMetadata,
)

__all__ = [
    "ApiResponse",
    "ErrorDetail",
    "ErrorResponse",
    "ListResponse",
    "PaginatedResponse",
    "PaginationInfo",
    "ResponseMetadata",
]
