"""
Base Schemas.

Standard API response envelopes shared by every endpoint.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from campground_api.core.utils import utc_now

DataT = TypeVar("DataT")


class ResponseMetadata(BaseModel):
    """Metadata included in all API responses."""

    timestamp: datetime = Field(default_factory=utc_now)
    request_id: str | None = None


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class ApiResponse(BaseModel, Generic[DataT]):
    """
    Standard API response envelope.

    All API responses use this structure for consistency.
    """

    success: bool = True
    data: DataT | None = None
    error: ErrorDetail | None = None
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)

    model_config = ConfigDict(from_attributes=True)


class ListResponse(BaseModel, Generic[DataT]):
    """Envelope for unpaginated collections; `count` is the number of items."""

    success: bool = True
    count: int
    data: list[DataT]
    error: None = None
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)

    @classmethod
    def of(cls, items: list[Any], request_id: str | None = None) -> "ListResponse[DataT]":
        return cls(
            count=len(items),
            data=items,
            metadata=ResponseMetadata(request_id=request_id),
        )


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = False
    data: None = None
    error: ErrorDetail
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)


class PaginationInfo(BaseModel):
    """Page-based pagination metadata."""

    total: int
    page: int
    limit: int
    has_more: bool = False
    next_page: int | None = None
    prev_page: int | None = None


class PaginatedResponse(BaseModel):
    """Paginated response with page navigation."""

    success: bool = True
    count: int
    data: list[dict[str, Any]]
    error: None = None
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)
    pagination: PaginationInfo
