"""
Integration Test Fixtures.

Fixtures for integration tests - uses real database and services.
These fixtures build on the root conftest.py database fixtures.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from campground_api.core.database import get_db_session


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def client(
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with database session override.

    Every request in a test shares the test's session, so data written
    by one request is visible to the next and rolled back afterwards.

    Usage:
        async def test_list(client: AsyncClient):
            response = await client.get("/api/v1/campgrounds")
            assert response.status_code == 200
    """

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    from campground_api.main import create_app

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_success(response: Any, expected_status: int = 200) -> dict[str, Any]:
        """
        Assert API response is successful.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is True, f"Response not successful: {data}"
        return data

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is False, f"Response should be error: {data}"
        assert data.get("error") is not None, f"Missing error details: {data}"

        if expected_code:
            actual_code = data["error"].get("code")
            assert actual_code == expected_code, (
                f"Expected error code {expected_code}, got {actual_code}"
            )

        return data

    @staticmethod
    def assert_validation_error(
        response: Any,
        field: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is a request validation error (400).

        Args:
            response: httpx Response object
            field: Expected field with validation error (optional)
        """
        data = ApiAssertions.assert_error(response, 400, "VAL_REQUEST_INVALID")

        if field:
            errors = data["error"].get("details", {}).get("validation_errors", [])
            fields = [e.get("field", "") for e in errors]
            assert any(field in f for f in fields), (
                f"Expected validation error for field '{field}', "
                f"got errors for: {fields}"
            )

        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()


# =============================================================================
# Authentication Fixtures
# =============================================================================


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """
    Register an account through the API and return the response data.

    Usage:
        user = await register("jane@example.com")
        headers = {"Authorization": f"Bearer {user['token']}"}
    """

    async def _register(
        email: str,
        role: str = "user",
        password: str = "secret1",
        name: str = "Camper",
    ) -> dict[str, Any]:
        response = await client.post(
            "/api/v1/auth/register",
            json={
                "name": name,
                "telephone": "0812345678",
                "email": email,
                "password": password,
                "role": role,
            },
        )
        assert response.status_code == 200, response.text
        # Requests authenticate explicitly with headers, not the login cookie
        client.cookies.clear()
        return response.json()["data"]

    return _register


@pytest.fixture
def login_as(register) -> Callable[..., Awaitable[dict[str, str]]]:
    """
    Register an account and return its authorization headers.

    Usage:
        headers = await login_as("other@example.com")
    """

    async def _login_as(email: str, role: str = "user") -> dict[str, str]:
        user = await register(email, role=role)
        return _bearer(user["token"])

    return _login_as


@pytest.fixture
async def user_headers(login_as) -> dict[str, str]:
    """Authorization headers of a regular user."""
    return await login_as("camper@example.com")


@pytest.fixture
async def admin_headers(login_as) -> dict[str, str]:
    """Authorization headers of an admin."""
    return await login_as("ranger@example.com", role="admin")


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def create_campground(
    client: AsyncClient,
    admin_headers: dict[str, str],
) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Create a campground as admin and return its data."""

    async def _create(
        name: str = "Pine Ridge",
        telephone: str = "0123456789",
        daily_capacity: int = 2,
        address: str = "1 Forest Road",
    ) -> dict[str, Any]:
        response = await client.post(
            "/api/v1/campgrounds",
            json={
                "name": name,
                "address": address,
                "telephone": telephone,
                "daily_capacity": daily_capacity,
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
async def campground(create_campground) -> dict[str, Any]:
    """A campground with a daily capacity of 2."""
    return await create_campground()
