"""Tests for the AI planning endpoints."""

from datetime import date, timedelta
from typing import Any

import pytest
from httpx import AsyncClient

from app.services.trip_plan import FALLBACK_MODEL_LABEL


@pytest.fixture
def plan_payload() -> dict[str, Any]:
    return {
        "travelerProfile": {"name": "Foodie / Culinary Explorer", "interests": ["wine"]},
        "tripParameters": {
            "destination": "Lisbon",
            "startDate": "2025-06-01",
            "duration": 3,
            "budget": "$1,200",
            "travelers": 2,
        },
    }


class TestTripPlan:
    @pytest.mark.asyncio
    async def test_plans_without_auth(self, client: AsyncClient, plan_payload: dict[str, Any]) -> None:
        response = await client.post("/api/ai/trip-plan", json=plan_payload)

        assert response.status_code == 200
        plan = response.json()
        assert plan["success"] is True
        assert plan["destination"] == "Lisbon"
        assert plan["duration"] == 3
        assert plan["startDate"] == "2025-06-01"
        assert plan["endDate"] == "2025-06-03"
        assert plan["totalBudget"] == 1200
        assert plan["persona"] == "Foodie / Culinary Explorer"
        assert plan["aiModel"] == FALLBACK_MODEL_LABEL

        days = plan["dailyItineraries"]
        assert [day["dayNumber"] for day in days] == [1, 2, 3]
        assert days[0]["day"] == "Day 1"
        first = days[0]["activities"][0]
        assert first["name"] == "Welcome to Lisbon"
        assert first["startTime"] == "09:00"
        assert first["duration"] == "2h 30m"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["travelerProfile", "tripParameters"])
    async def test_missing_part(
        self,
        client: AsyncClient,
        plan_payload: dict[str, Any],
        missing: str,
    ) -> None:
        del plan_payload[missing]

        response = await client.post("/api/ai/trip-plan", json=plan_payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Missing travelerProfile or tripParameters in request"

    @pytest.mark.asyncio
    async def test_end_date_instead_of_duration(
        self,
        client: AsyncClient,
        plan_payload: dict[str, Any],
    ) -> None:
        params = plan_payload["tripParameters"]
        del params["duration"]
        params["endDate"] = "2025-06-04"

        response = await client.post("/api/ai/trip-plan", json=plan_payload)

        assert response.status_code == 200
        assert len(response.json()["dailyItineraries"]) == 4

    @pytest.mark.asyncio
    async def test_needs_end_date_or_duration(
        self,
        client: AsyncClient,
        plan_payload: dict[str, Any],
    ) -> None:
        del plan_payload["tripParameters"]["duration"]

        response = await client.post("/api/ai/trip-plan", json=plan_payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Validation failed"

    @pytest.mark.asyncio
    async def test_default_budget(self, client: AsyncClient, plan_payload: dict[str, Any]) -> None:
        del plan_payload["tripParameters"]["budget"]

        response = await client.post("/api/ai/trip-plan", json=plan_payload)

        assert response.json()["totalBudget"] == 1000


class TestPreview:
    @pytest.mark.asyncio
    async def test_preview_stores_nothing(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        start = date.today() + timedelta(days=10)
        response = await client.post(
            "/api/ai/preview",
            json={
                "destination": "Rome",
                "startDate": start.isoformat(),
                "endDate": (start + timedelta(days=1)).isoformat(),
            },
            headers=auth["headers"],
        )

        assert response.status_code == 200
        itinerary = response.json()["itinerary"]
        assert itinerary["destination"] == "Rome"
        assert len(itinerary["days"]) == 2

        trips = await client.get("/api/trips", headers=auth["headers"])
        assert trips.json()["trips"] == []

    @pytest.mark.asyncio
    async def test_unknown_persona(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        response = await client.post(
            "/api/ai/preview",
            json={
                "destination": "Rome",
                "startDate": "2025-06-01",
                "endDate": "2025-06-02",
                "personaId": 77,
            },
            headers=auth["headers"],
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_requires_token(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/ai/preview",
            json={"destination": "Rome", "startDate": "2025-06-01", "endDate": "2025-06-02"},
        )

        assert response.status_code == 401


class TestGenerateTrip:
    @pytest.mark.asyncio
    async def test_saves_persona_trip(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        persona = await client.post(
            "/api/personas",
            json={"baseProfileId": 3, "personalPreferences": {"interests": ["tapas"]}},
            headers=auth["headers"],
        )
        persona_id = persona.json()["persona"]["id"]

        response = await client.post(
            "/api/ai/generate-trip",
            json={
                "title": "Madrid food week",
                "destination": "Madrid",
                "startDate": "2025-10-01",
                "endDate": "2025-10-03",
                "personaId": persona_id,
                "travelers": 2,
            },
            headers=auth["headers"],
        )

        assert response.status_code == 201
        body = response.json()
        assert body["saved"] is True
        assert body["message"] == "AI-powered trip created successfully"
        trip = body["trip"]
        assert trip["title"] == "Madrid food week"
        assert trip["persona_id"] == persona_id
        assert trip["traveler_profile_id"] is None
        assert trip["number_of_travelers"] == 2
        assert [day["day_number"] for day in trip["itinerary"]] == [1, 2, 3]

        listed = await client.get("/api/trips", headers=auth["headers"])
        assert [row["id"] for row in listed.json()["trips"]] == [trip["id"]]

    @pytest.mark.asyncio
    async def test_unknown_persona_saves_nothing(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
    ) -> None:
        response = await client.post(
            "/api/ai/generate-trip",
            json={
                "title": "Nowhere",
                "destination": "Rome",
                "startDate": "2025-06-01",
                "endDate": "2025-06-02",
                "personaId": 77,
            },
            headers=auth["headers"],
        )

        assert response.status_code == 404
        trips = await client.get("/api/trips", headers=auth["headers"])
        assert trips.json()["trips"] == []

    @pytest.mark.asyncio
    async def test_requires_title(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        response = await client.post(
            "/api/ai/generate-trip",
            json={"destination": "Rome", "startDate": "2025-06-01", "endDate": "2025-06-02"},
            headers=auth["headers"],
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"


class TestRegenerate:
    @pytest.mark.asyncio
    async def test_replaces_itinerary(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/trips", json=trip_payload, headers=auth["headers"])).json()
        old_day_ids = {day["id"] for day in created["itinerary"]}

        response = await client.post(
            f"/api/ai/regenerate/{created['id']}",
            headers=auth["headers"],
        )

        assert response.status_code == 200
        days = response.json()["itinerary"]
        assert [day["day_number"] for day in days] == [1, 2, 3, 4, 5]
        assert old_day_ids.isdisjoint(day["id"] for day in days)

    @pytest.mark.asyncio
    async def test_with_persona(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        trip_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/trips", json=trip_payload, headers=auth["headers"])).json()
        persona = await client.post(
            "/api/personas",
            json={"baseProfileId": 4, "personalPreferences": {"interests": ["hiking"]}},
            headers=auth["headers"],
        )
        persona_id = persona.json()["persona"]["id"]

        response = await client.post(
            f"/api/ai/regenerate/{created['id']}",
            json={"personaId": persona_id},
            headers=auth["headers"],
        )

        assert response.status_code == 200
        assert response.json()["persona_id"] == persona_id

    @pytest.mark.asyncio
    async def test_other_users_trip(
        self,
        client: AsyncClient,
        auth: dict[str, Any],
        register_user: Any,
        trip_payload: dict[str, Any],
    ) -> None:
        created = (await client.post("/api/trips", json=trip_payload, headers=auth["headers"])).json()
        other = await register_user(email="other@b.com")

        response = await client.post(
            f"/api/ai/regenerate/{created['id']}",
            headers={"Authorization": f"Bearer {other['token']}"},
        )

        assert response.status_code == 404


class TestSuggestions:
    @pytest.mark.asyncio
    async def test_without_persona(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        response = await client.get("/api/ai/suggestions/Kyoto", headers=auth["headers"])

        assert response.status_code == 200
        body = response.json()
        assert body["destination"] == "Kyoto"
        assert body["personaType"] == "cultural"
        assert set(body["recommendedActivities"]) == {"morning", "afternoon", "evening"}
        assert body["estimatedBudgetPerDay"] > 0
        assert body["tips"]

    @pytest.mark.asyncio
    async def test_follows_persona(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        await client.post(
            "/api/personas",
            json={
                "baseProfileId": 3,
                "personalPreferences": {"interests": ["tapas"]},
                "budgetDetails": {"daily": 150},
            },
            headers=auth["headers"],
        )

        response = await client.get("/api/ai/suggestions/Madrid", headers=auth["headers"])

        body = response.json()
        assert body["personaType"] == "foodie"
        assert body["estimatedBudgetPerDay"] == 150
        assert "Cooking Class" in body["recommendedActivities"]["afternoon"]
