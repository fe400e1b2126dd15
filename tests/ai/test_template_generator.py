"""Tests for the template itinerary generator and persona type resolution."""

from datetime import date
from random import Random

import pytest

from app.schemas.itinerary import ItineraryRequest
from app.schemas.persona import AccessibilityNeeds
from app.services.itinerary import TemplateItineraryGenerator, resolve_persona_type


def _request(**overrides: object) -> ItineraryRequest:
    fields: dict[str, object] = {
        "destination": "Paris",
        "start_date": date(2025, 12, 1),
        "end_date": date(2025, 12, 5),
        "travelers": 2,
        "budget": 1500,
        "profile_name": "Cultural Enthusiast / History Buff",
    }
    fields.update(overrides)
    return ItineraryRequest.model_validate(fields)


class TestResolvePersonaType:
    @pytest.mark.parametrize(
        ("profile_name", "expected"),
        [
            ("Mobility-Conscious Traveler", "mobility"),
            ("Family with Young Children", "family"),
            ("Foodie / Culinary Explorer", "foodie"),
            ("Adventure / Active Traveler", "adventure"),
            ("Cultural Enthusiast / History Buff", "cultural"),
            ("Something Else Entirely", "cultural"),
            (None, "cultural"),
        ],
    )
    def test_profile_names(self, profile_name: str | None, expected: str) -> None:
        assert resolve_persona_type(profile_name) == expected

    def test_interests_are_used_without_profile(self) -> None:
        assert resolve_persona_type(None, ("street food", "markets")) == "foodie"

    def test_step_free_access_wins(self) -> None:
        assert resolve_persona_type("Foodie / Culinary Explorer", (), True) == "mobility"


class TestTemplateItineraryGenerator:
    @pytest.mark.asyncio
    async def test_one_day_per_calendar_day(self) -> None:
        itinerary = await TemplateItineraryGenerator(Random(1)).generate(_request())

        assert [day.day_number for day in itinerary.days] == [1, 2, 3, 4, 5]
        assert [day.date for day in itinerary.days] == [date(2025, 12, d) for d in range(1, 6)]
        assert all(
            [a.time_slot for a in day.activities] == ["morning", "afternoon", "evening"]
            for day in itinerary.days
        )
        assert itinerary.persona == "Cultural Enthusiast / History Buff"
        assert itinerary.persona_type == "cultural"
        assert itinerary.ai_generated is False

    @pytest.mark.asyncio
    async def test_arrival_and_departure(self) -> None:
        itinerary = await TemplateItineraryGenerator(Random(1)).generate(_request())

        first, last = itinerary.days[0], itinerary.days[-1]
        assert first.activities[0].title == "Welcome to Paris"
        assert first.theme == "Arrival & Orientation"
        assert last.activities[-1].title == "Farewell Paris"
        assert last.theme == "Farewell & Departure"

    @pytest.mark.asyncio
    async def test_costs_are_capped_by_daily_budget(self) -> None:
        itinerary = await TemplateItineraryGenerator(Random(3)).generate(
            _request(budget=100, travelers=6, profile_name="Foodie / Culinary Explorer"),
        )

        cap = 100 / 5 * 0.4
        costs = [a.cost for day in itinerary.days for a in day.activities]
        assert all(0 <= cost <= cap for cost in costs)
        assert itinerary.total_budget == 100

    @pytest.mark.asyncio
    async def test_default_budget(self) -> None:
        itinerary = await TemplateItineraryGenerator(Random(3)).generate(_request(budget=None))

        assert itinerary.total_budget == 1000

    @pytest.mark.asyncio
    async def test_seeded_generators_agree(self) -> None:
        first = await TemplateItineraryGenerator(Random(42)).generate(_request())
        second = await TemplateItineraryGenerator(Random(42)).generate(_request())

        assert [d.model_dump() for d in first.days] == [d.model_dump() for d in second.days]

    @pytest.mark.asyncio
    async def test_single_day_trip(self) -> None:
        itinerary = await TemplateItineraryGenerator(Random(0)).generate(
            _request(end_date=date(2025, 12, 1)),
        )

        assert len(itinerary.days) == 1
        activities = itinerary.days[0].activities
        assert activities[0].title == "Welcome to Paris"
        assert activities[-1].title == "Farewell Paris"

    @pytest.mark.asyncio
    async def test_accessibility_selects_mobility_templates(self) -> None:
        itinerary = await TemplateItineraryGenerator(Random(0)).generate(
            _request(
                profile_name=None,
                accessibility=AccessibilityNeeds(wheelchair=True),
            ),
        )

        assert itinerary.persona_type == "mobility"
        assert itinerary.persona == "Mobility"
        middle = itinerary.days[2].activities
        assert all(activity.accessibility for activity in middle)
