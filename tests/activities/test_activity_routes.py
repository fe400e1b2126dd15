"""Tests for editing itinerary activities."""

from typing import Any

import pytest
from httpx import AsyncClient


@pytest.fixture
async def trip(
    client: AsyncClient,
    auth: dict[str, Any],
    trip_payload: dict[str, Any],
) -> dict[str, Any]:
    response = await client.post("/api/trips", json=trip_payload, headers=auth["headers"])
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def other_headers(register_user: Any) -> dict[str, str]:
    other = await register_user(email="other@b.com")
    return {"Authorization": f"Bearer {other['token']}"}


def _activity_payload(day_id: int, **overrides: Any) -> dict[str, Any]:
    return {
        "dayId": day_id,
        "title": "Sunset walk",
        "timeSlot": "evening",
        "startTime": "21:00",
        "endTime": "22:30",
        "location": "Old town",
        "cost": 0,
        **overrides,
    }


class TestListDayActivities:
    @pytest.mark.asyncio
    async def test_lists_generated_activities_by_start_time(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip: dict[str, Any],
    ) -> None:
        day = trip["itinerary"][0]

        response = await client.get(f"/api/activities/day/{day['id']}", headers=auth["headers"])

        assert response.status_code == 200
        activities = response.json()["activities"]
        assert len(activities) == 3
        starts = [activity["start_time"] for activity in activities]
        assert starts == sorted(starts)
        assert all(activity["day_id"] == day["id"] for activity in activities)

    @pytest.mark.asyncio
    async def test_other_users_day_is_not_found(
        self,
        client: AsyncClient,
        trip: dict[str, Any],
        other_headers: dict[str, str],
    ) -> None:
        day_id = trip["itinerary"][0]["id"]

        response = await client.get(f"/api/activities/day/{day_id}", headers=other_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Itinerary day not found"

    @pytest.mark.asyncio
    async def test_requires_token(self, client: AsyncClient, trip: dict[str, Any]) -> None:
        response = await client.get(f"/api/activities/day/{trip['itinerary'][0]['id']}")

        assert response.status_code == 401


class TestCreateActivity:
    @pytest.mark.asyncio
    async def test_adds_activity_to_day(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip: dict[str, Any],
    ) -> None:
        day_id = trip["itinerary"][1]["id"]

        response = await client.post(
            "/api/activities",
            json=_activity_payload(day_id, reservationRequired=True),
            headers=auth["headers"],
        )

        assert response.status_code == 201
        activity = response.json()
        assert activity["day_id"] == day_id
        assert activity["title"] == "Sunset walk"
        assert activity["reservation_required"] is True

        fetched = await client.get(f"/api/trips/{trip['id']}", headers=auth["headers"])
        day = fetched.json()["itinerary"][1]
        assert len(day["activities"]) == 4
        assert day["activities"][-1]["id"] == activity["id"]

    @pytest.mark.asyncio
    async def test_cannot_add_to_other_users_day(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip: dict[str, Any],
        other_headers: dict[str, str],
    ) -> None:
        day_id = trip["itinerary"][0]["id"]

        response = await client.post(
            "/api/activities",
            json=_activity_payload(day_id),
            headers=other_headers,
        )

        assert response.status_code == 404
        listed = await client.get(f"/api/activities/day/{day_id}", headers=auth["headers"])
        assert len(listed.json()["activities"]) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"startTime": "25:00"}, "startTime"),
            ({"endTime": "20:00"}, "endTime"),
            ({"timeSlot": "night"}, "timeSlot"),
            ({"cost": -1}, "cost"),
            ({"title": " "}, "title"),
            ({"rating": 5}, "rating"),
        ],
    )
    async def test_rejects_invalid_payload(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip: dict[str, Any],
        overrides: dict[str, Any],
        field: str,
    ) -> None:
        payload = _activity_payload(trip["itinerary"][0]["id"], **overrides)

        response = await client.post("/api/activities", json=payload, headers=auth["headers"])

        assert response.status_code == 400
        assert field in [error["field"] for error in response.json()["errors"]]


class TestUpdateActivity:
    @pytest.mark.asyncio
    async def test_partial_update(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip: dict[str, Any],
    ) -> None:
        activity = trip["itinerary"][0]["activities"][0]

        response = await client.put(
            f"/api/activities/{activity['id']}",
            json={"title": "Late arrival", "notes": "Flight lands at noon"},
            headers=auth["headers"],
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["title"] == "Late arrival"
        assert updated["notes"] == "Flight lands at noon"
        assert updated["start_time"] == activity["start_time"]

    @pytest.mark.asyncio
    async def test_end_before_stored_start(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip: dict[str, Any],
    ) -> None:
        activity = trip["itinerary"][0]["activities"][0]

        response = await client.put(
            f"/api/activities/{activity['id']}",
            json={"endTime": "00:00"},
            headers=auth["headers"],
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "endTime"

    @pytest.mark.asyncio
    async def test_required_field_cannot_be_cleared(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip: dict[str, Any],
    ) -> None:
        activity = trip["itinerary"][0]["activities"][0]

        response = await client.put(
            f"/api/activities/{activity['id']}",
            json={"title": None},
            headers=auth["headers"],
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"

    @pytest.mark.asyncio
    async def test_other_users_activity_is_not_found(
        self,
        client: AsyncClient,
        trip: dict[str, Any],
        other_headers: dict[str, str],
    ) -> None:
        activity_id = trip["itinerary"][0]["activities"][0]["id"]

        response = await client.put(
            f"/api/activities/{activity_id}",
            json={"title": "Mine now"},
            headers=other_headers,
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Activity not found"


class TestDeleteActivity:
    @pytest.mark.asyncio
    async def test_delete(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip: dict[str, Any],
    ) -> None:
        day = trip["itinerary"][0]
        activity_id = day["activities"][0]["id"]

        response = await client.delete(f"/api/activities/{activity_id}", headers=auth["headers"])

        assert response.status_code == 200
        assert response.json() == {"message": "Activity deleted successfully"}
        listed = await client.get(f"/api/activities/day/{day['id']}", headers=auth["headers"])
        assert activity_id not in [activity["id"] for activity in listed.json()["activities"]]

    @pytest.mark.asyncio
    async def test_delete_other_users_activity(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip: dict[str, Any],
        other_headers: dict[str, str],
    ) -> None:
        activity_id = trip["itinerary"][0]["activities"][0]["id"]

        response = await client.delete(f"/api/activities/{activity_id}", headers=other_headers)

        assert response.status_code == 404
        again = await client.delete(f"/api/activities/{activity_id}", headers=auth["headers"])
        assert again.status_code == 200

    @pytest.mark.asyncio
    async def test_missing_activity(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        response = await client.delete("/api/activities/9999", headers=auth["headers"])

        assert response.status_code == 404
