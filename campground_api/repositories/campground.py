"""
Campground Repository.

Data access for campgrounds, including the filtered/sorted listing
used by GET /campgrounds.
"""

from typing import Any

from sqlalchemy import Select, func, or_, select

from campground_api.core.query import FieldFilter, SortKey
from campground_api.models.campground import Campground
from campground_api.repositories.base import BaseRepository


def _condition(column: Any, field_filter: FieldFilter) -> Any:
    op, value = field_filter.op, field_filter.value
    if op == "gt":
        return column > value
    if op == "gte":
        return column >= value
    if op == "lt":
        return column < value
    if op == "lte":
        return column <= value
    if op == "in":
        return column.in_(value)
    return column == value


class CampgroundRepository(BaseRepository[Campground]):
    """Repository for Campground model."""

    model = Campground

    def _filtered(self, stmt: Select, filters: list[FieldFilter]) -> Select:
        for field_filter in filters:
            column = getattr(Campground, field_filter.field)
            stmt = stmt.where(_condition(column, field_filter))
        return stmt

    async def list_filtered(
        self,
        filters: list[FieldFilter],
        sort: list[SortKey],
        limit: int,
        offset: int,
    ) -> list[Campground]:
        """
        List campgrounds matching every filter.

        Args:
            filters: Conditions ANDed together
            sort: Ordering keys, applied in order
            limit: Page size
            offset: Rows to skip
        """
        stmt = self._filtered(select(Campground), filters)
        for key in sort:
            column = getattr(Campground, key.field)
            stmt = stmt.order_by(column.desc() if key.descending else column.asc())
        stmt = stmt.order_by(Campground.id).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_filtered(self, filters: list[FieldFilter]) -> int:
        stmt = self._filtered(select(func.count()).select_from(Campground), filters)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_duplicate(
        self,
        name: str | None,
        telephone: str | None,
        exclude_id: str | None = None,
    ) -> Campground | None:
        """Return another campground already using this name or telephone."""
        conditions = []
        if name is not None:
            conditions.append(Campground.name == name)
        if telephone is not None:
            conditions.append(Campground.telephone == telephone)
        if not conditions:
            return None

        stmt = select(Campground).where(or_(*conditions))
        if exclude_id is not None:
            stmt = stmt.where(Campground.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none()
