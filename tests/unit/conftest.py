"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from collections.abc import Callable
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from campground_api.models import Campground, User, UserRole


# =============================================================================
# Database Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Provides a fully mocked AsyncSession with common methods.

    Usage:
        def test_service(mock_db_session: AsyncMock):
            service = CampgroundService(mock_db_session)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    session.delete = AsyncMock()
    session.get = AsyncMock()
    return session


@pytest.fixture
def mock_db_result() -> MagicMock:
    """
    Mock database query result.

    Usage:
        def test_query(mock_db_session, mock_db_result):
            mock_db_result.scalar_one_or_none.return_value = campground
            mock_db_session.execute.return_value = mock_db_result
    """
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=None)
    result.scalars = MagicMock()
    result.scalars.return_value.all = MagicMock(return_value=[])
    result.scalars.return_value.first = MagicMock(return_value=None)
    return result


# =============================================================================
# Model Factories
# =============================================================================


@pytest.fixture
def make_user() -> Callable[..., User]:
    """
    Build detached User instances.

    Usage:
        admin = make_user(role=UserRole.ADMIN)
    """

    def _make(
        id: str = "user-1",
        role: UserRole = UserRole.USER,
        email: str = "camper@example.com",
    ) -> User:
        return User(
            id=id,
            name="Camper",
            email=email,
            hashed_password="not-a-real-hash",
            role=role,
        )

    return _make


@pytest.fixture
def make_campground() -> Callable[..., Campground]:
    """Build detached Campground instances."""

    def _make(
        id: str = "camp-1",
        name: str = "Pine Ridge",
        telephone: str = "0123456789",
        daily_capacity: int = 2,
    ) -> Campground:
        now = datetime(2025, 1, 1, 12, 0, 0)
        return Campground(
            id=id,
            name=name,
            address="1 Forest Road",
            telephone=telephone,
            daily_capacity=daily_capacity,
            created_at=now,
            updated_at=now,
        )

    return _make
