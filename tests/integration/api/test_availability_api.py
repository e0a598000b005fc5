"""
Integration Tests for the Availability Calendar API.
"""

from datetime import timedelta

from httpx import AsyncClient

from campground_api.core.utils import utc_today


class TestAvailability:
    async def test_default_window_counts_bookings(
        self, client: AsyncClient, api, login_as, user_headers, campground
    ):
        tomorrow = utc_today() + timedelta(days=1)
        other = await login_as("other@example.com")
        for headers in (user_headers, other):
            api.assert_success(
                await client.post(
                    f"/api/v1/campgrounds/{campground['id']}/bookings",
                    json={"appt_date": f"{tomorrow.isoformat()}T10:00:00Z"},
                    headers=headers,
                )
            )

        response = await client.get(f"/api/v1/campgrounds/{campground['id']}/availability")

        data = api.assert_success(response)["data"]
        days = data["availability"]
        assert data["campground"] == campground["name"]
        assert data["daily_capacity"] == 2
        assert len(days) == 30
        assert data["start"] == utc_today().isoformat()
        assert data["end"] == (utc_today() + timedelta(days=29)).isoformat()
        assert days[0] == {
            "date": utc_today().isoformat(),
            "booked": 0,
            "available": 2,
            "is_full": False,
        }
        assert days[1] == {
            "date": tomorrow.isoformat(),
            "booked": 2,
            "available": 0,
            "is_full": True,
        }

    async def test_whole_month(self, client: AsyncClient, api, campground):
        response = await client.get(
            f"/api/v1/campgrounds/{campground['id']}/availability",
            params={"month": 2, "year": 2024},
        )

        data = api.assert_success(response)["data"]
        assert data["start"] == "2024-02-01"
        assert data["end"] == "2024-02-29"
        assert len(data["availability"]) == 29

    async def test_december_of_last_supported_year(self, client: AsyncClient, api, campground):
        response = await client.get(
            f"/api/v1/campgrounds/{campground['id']}/availability",
            params={"month": 12, "year": 9999},
        )

        data = api.assert_success(response)["data"]
        assert data["start"] == "9999-12-01"
        assert data["end"] == "9999-12-31"
        assert len(data["availability"]) == 31

    async def test_year_without_month(self, client: AsyncClient, api, campground):
        response = await client.get(
            f"/api/v1/campgrounds/{campground['id']}/availability", params={"year": 2024}
        )

        api.assert_error(response, 400, "VAL_VALIDATION_ERROR")

    async def test_month_out_of_range(self, client: AsyncClient, api, campground):
        response = await client.get(
            f"/api/v1/campgrounds/{campground['id']}/availability", params={"month": 13}
        )

        api.assert_validation_error(response, field="month")

    async def test_unknown_campground(self, client: AsyncClient, api):
        api.assert_error(await client.get("/api/v1/campgrounds/nope/availability"), 404)
