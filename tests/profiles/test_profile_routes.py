"""Tests for the traveler profile endpoints."""

import pytest
from httpx import AsyncClient


class TestProfiles:
    @pytest.mark.asyncio
    async def test_list_is_sorted_by_name(self, client: AsyncClient) -> None:
        response = await client.get("/api/profiles")

        assert response.status_code == 200
        names = [profile["name"] for profile in response.json()["profiles"]]
        assert names == [
            "Adventure / Active Traveler",
            "Cultural Enthusiast / History Buff",
            "Family with Young Children",
            "Foodie / Culinary Explorer",
            "Mobility-Conscious Traveler",
        ]

    @pytest.mark.asyncio
    async def test_get_profile(self, client: AsyncClient) -> None:
        response = await client.get("/api/profiles/1")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Mobility-Conscious Traveler"
        assert body["preferences"]

    @pytest.mark.asyncio
    async def test_unknown_profile(self, client: AsyncClient) -> None:
        response = await client.get("/api/profiles/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Profile not found"
