"""
Pagination Utilities.

Page-based pagination for list endpoints: `?page=2&limit=25`.
Defaults and the upper bound on `limit` come from application.yaml.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import Query
from pydantic import BaseModel

from campground_api.core.config import get_app_config
from campground_api.schemas.base import PaginatedResponse, PaginationInfo, ResponseMetadata


@dataclass
class PaginationParams:
    """Pagination parameters extracted from query string."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        """Number of rows before the first item of this page."""
        return (self.page - 1) * self.limit


def get_pagination_params(
    page: int = Query(
        default=1,
        ge=1,
        description="Page number, starting at 1",
    ),
    limit: int | None = Query(
        default=None,
        ge=1,
        description="Maximum number of items per page",
    ),
) -> PaginationParams:
    """
    FastAPI dependency for pagination parameters.

    A limit above the configured maximum is clamped to it.
    """
    config = get_app_config().application.pagination
    effective_limit = config.default_limit if limit is None else min(limit, config.max_limit)
    return PaginationParams(page=page, limit=effective_limit)


def build_pagination_info(total: int, params: PaginationParams) -> PaginationInfo:
    """Work out neighbour pages for a page of `params.limit` items out of `total`."""
    has_more = params.page * params.limit < total
    return PaginationInfo(
        total=total,
        page=params.page,
        limit=params.limit,
        has_more=has_more,
        next_page=params.page + 1 if has_more else None,
        prev_page=params.page - 1 if params.offset > 0 else None,
    )


def create_paginated_response(
    items: list[Any],
    item_schema: type[BaseModel],
    total: int,
    params: PaginationParams,
    select: list[str] | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """
    Create a standardized paginated response.

    Args:
        items: Model instances for this page
        item_schema: Pydantic schema to validate items
        total: Total number of matching items
        params: Page and limit used for the query
        select: Optional projection; only these keys are kept per item
        request_id: Request ID for metadata

    Returns:
        Dict matching PaginatedResponse structure
    """
    validated_items = []
    for item in items:
        dumped = item_schema.model_validate(item).model_dump(mode="json")
        if select is not None:
            dumped = {key: dumped[key] for key in select if key in dumped}
        validated_items.append(dumped)

    response = PaginatedResponse(
        count=len(validated_items),
        data=validated_items,
        pagination=build_pagination_info(total, params),
        metadata=ResponseMetadata(request_id=request_id),
    )
    return response.model_dump(mode="json")
