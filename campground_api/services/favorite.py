"""
Favorite Service.

Bookmarking campgrounds.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from campground_api.core.exceptions import ConflictError, NotFoundError
from campground_api.models.favorite import Favorite
from campground_api.models.user import User
from campground_api.repositories.campground import CampgroundRepository
from campground_api.repositories.favorite import FavoriteRepository
from campground_api.services.base import BaseService


class FavoriteService(BaseService):
    """Service for a user's favorite campgrounds."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = FavoriteRepository(session)
        self.campgrounds = CampgroundRepository(session)

    async def add_favorite(self, user: User, campground_id: str) -> Favorite:
        """
        Bookmark a campground.

        Raises:
            NotFoundError: Unknown campground
            ConflictError: Already bookmarked
        """
        campground = await self.campgrounds.get_by_id_or_none(campground_id)
        if campground is None:
            raise NotFoundError(f"No campground with the id of {campground_id}")

        if await self.repo.get_pair(user.id, campground_id) is not None:
            raise ConflictError("Already favorited")

        self._log_operation("Adding favorite", user_id=user.id, campground_id=campground_id)
        return await self._execute_db_operation(
            "add_favorite",
            self.repo.create(user_id=user.id, campground=campground),
            conflict_message="Already favorited",
        )

    async def remove_favorite(self, user: User, campground_id: str) -> None:
        """Remove a bookmark. Removing one that does not exist is not an error."""
        removed = await self.repo.delete_pair(user.id, campground_id)
        self._log_operation(
            "Removed favorite",
            user_id=user.id,
            campground_id=campground_id,
            removed=removed,
        )

    async def list_favorites(self, user: User) -> list[Favorite]:
        return await self.repo.list_for_user(user.id)
