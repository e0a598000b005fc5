"""
Campground Service.

CRUD for campgrounds and the filtered listing behind GET /campgrounds.
"""

from collections.abc import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from campground_api.core.exceptions import ConflictError, NotFoundError
from campground_api.core.query import parse_filters, parse_sort
from campground_api.models.campground import Campground
from campground_api.repositories.appointment import AppointmentRepository
from campground_api.repositories.campground import CampgroundRepository
from campground_api.repositories.favorite import FavoriteRepository
from campground_api.schemas.campground import CampgroundCreate, CampgroundUpdate
from campground_api.services.base import BaseService

FILTER_FIELDS: dict[str, type] = {
    "name": str,
    "address": str,
    "telephone": str,
    "daily_capacity": int,
}

SORT_FIELDS = frozenset({*FILTER_FIELDS, "created_at", "updated_at"})

SELECT_FIELDS = frozenset({"id", *SORT_FIELDS})


class CampgroundService(BaseService):
    """Service for campground business logic."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = CampgroundRepository(session)
        self.appointments = AppointmentRepository(session)
        self.favorites = FavoriteRepository(session)

    async def list_campgrounds(
        self,
        params: Iterable[tuple[str, str]],
        sort: str | None,
        limit: int,
        offset: int,
    ) -> tuple[list[Campground], int]:
        """
        List campgrounds with filters from the raw query string.

        Returns:
            Tuple of (campgrounds on this page, total matching)

        Raises:
            ValidationError: Unknown filter/sort field or operator
        """
        filters = parse_filters(params, FILTER_FIELDS)
        sort_keys = parse_sort(sort, SORT_FIELDS)

        campgrounds = await self.repo.list_filtered(filters, sort_keys, limit, offset)
        total = await self.repo.count_filtered(filters)
        return campgrounds, total

    async def get_campground(self, campground_id: str) -> Campground:
        campground = await self.repo.get_by_id_or_none(campground_id)
        if campground is None:
            raise NotFoundError(f"No campground with the id of {campground_id}")
        return campground

    async def create_campground(self, data: CampgroundCreate) -> Campground:
        """
        Create a campground.

        Raises:
            ConflictError: Name or telephone already used
        """
        await self._ensure_unique(data.name, data.telephone)
        self._log_operation("Creating campground", name=data.name)

        campground = await self._execute_db_operation(
            "create_campground",
            self.repo.create(**data.model_dump()),
            conflict_message="Campground name or telephone already exists",
        )
        self._log_debug("Campground created", campground_id=campground.id)
        return campground

    async def update_campground(self, campground_id: str, data: CampgroundUpdate) -> Campground:
        """
        Update a campground. Only provided fields are changed.

        Raises:
            NotFoundError: Unknown campground
            ConflictError: New name or telephone already used elsewhere
        """
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        campground = await self.get_campground(campground_id)

        if not update_data:
            return campground

        await self._ensure_unique(
            update_data.get("name"),
            update_data.get("telephone"),
            exclude_id=campground_id,
        )
        self._log_operation(
            "Updating campground",
            campground_id=campground_id,
            fields=list(update_data.keys()),
        )
        return await self._execute_db_operation(
            "update_campground",
            self.repo.update(campground_id, **update_data),
            conflict_message="Campground name or telephone already exists",
        )

    async def delete_campground(self, campground_id: str) -> None:
        """
        Delete a campground together with its reservations and favorites.

        Raises:
            NotFoundError: Unknown campground
        """
        await self.get_campground(campground_id)

        removed_appointments = await self.appointments.delete_for_campground(campground_id)
        removed_favorites = await self.favorites.delete_for_campground(campground_id)
        await self._execute_db_operation(
            "delete_campground",
            self.repo.delete(campground_id),
        )
        self._log_operation(
            "Deleted campground",
            campground_id=campground_id,
            appointments_removed=removed_appointments,
            favorites_removed=removed_favorites,
        )

    async def _ensure_unique(
        self,
        name: str | None,
        telephone: str | None,
        exclude_id: str | None = None,
    ) -> None:
        duplicate = await self.repo.find_duplicate(name, telephone, exclude_id=exclude_id)
        if duplicate is None:
            return
        field = "name" if name is not None and duplicate.name == name else "telephone"
        raise ConflictError(f"A campground with this {field} already exists")
