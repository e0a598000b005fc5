"""
Favorite Repository.
"""

from sqlalchemy import delete, select

from campground_api.models.favorite import Favorite
from campground_api.repositories.base import BaseRepository


class FavoriteRepository(BaseRepository[Favorite]):
    """Repository for Favorite model."""

    model = Favorite

    async def get_pair(self, user_id: str, campground_id: str) -> Favorite | None:
        result = await self.session.execute(
            select(Favorite)
            .where(Favorite.user_id == user_id)
            .where(Favorite.campground_id == campground_id)
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: str) -> list[Favorite]:
        """A user's favorites, most recent first."""
        result = await self.session.execute(
            select(Favorite)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc())
        )
        return list(result.scalars().all())

    async def delete_pair(self, user_id: str, campground_id: str) -> int:
        """Remove a favorite if present. Returns rows removed."""
        result = await self.session.execute(
            delete(Favorite)
            .where(Favorite.user_id == user_id)
            .where(Favorite.campground_id == campground_id)
        )
        return result.rowcount or 0

    async def delete_for_campground(self, campground_id: str) -> int:
        result = await self.session.execute(
            delete(Favorite).where(Favorite.campground_id == campground_id)
        )
        return result.rowcount or 0
