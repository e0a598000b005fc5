"""
Favorite Model.

A user's bookmarked campground. A user can favorite a campground once.
"""

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from campground_api.models.base import Base, TimestampMixin, UUIDMixin
from campground_api.models.campground import Campground


class Favorite(UUIDMixin, TimestampMixin, Base):
    """Favorite database model."""

    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "campground_id", name="uq_favorites_user_campground"),
    )

    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    campground_id: Mapped[str] = mapped_column(
        ForeignKey("campgrounds.id", ondelete="CASCADE"),
        nullable=False,
    )

    campground: Mapped[Campground] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return f"<Favorite(user_id={self.user_id}, campground_id={self.campground_id})>"
