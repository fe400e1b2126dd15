"""Tests for the Gemini generator and its fallback behaviour."""

from datetime import date
from random import Random
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.clients.ai_client import AiClient
from app.errors import AiNetworkError, ItineraryGenerationError
from app.schemas.ai.generation import AiActivity, AiDay, AiItinerary
from app.schemas.itinerary import GeneratedItinerary, ItineraryRequest
from app.services.itinerary import (
    GeminiItineraryGenerator,
    TemplateItineraryGenerator,
    run_generator,
)


@pytest.fixture
def request_3_days() -> ItineraryRequest:
    return ItineraryRequest(
        destination="Lisbon",
        start_date=date(2025, 6, 1),
        end_date=date(2025, 6, 3),
        travelers=2,
        budget=1200,
        profile_name="Foodie / Culinary Explorer",
    )


def _ai_itinerary(days: int) -> AiItinerary:
    return AiItinerary(
        days=[
            AiDay(
                day_number=number,
                theme=f"Theme {number}",
                activities=[
                    AiActivity(
                        title="Dinner",
                        description="Seafood",
                        time_slot="evening",
                        start_time="19:00",
                        end_time="21:00",
                        location="Alfama",
                        category="dining",
                        estimated_cost=80,
                    ),
                    AiActivity(
                        title="Market",
                        description="Breakfast at the market",
                        time_slot="Morning",
                        start_time="09:00",
                        end_time="10:30",
                        location="Mercado da Ribeira",
                        category="culinary",
                        estimated_cost=25.555,
                    ),
                ],
            )
            for number in range(days, 0, -1)
        ],
    )


@pytest.fixture
def ai_client() -> MagicMock:
    client = MagicMock(spec=AiClient)
    client.model = "gemini-test"
    client.do_service = AsyncMock()
    return client


class TestGeminiItineraryGenerator:
    @pytest.mark.asyncio
    async def test_uses_model_output(
        self,
        ai_client: MagicMock,
        request_3_days: ItineraryRequest,
    ) -> None:
        ai_client.do_service.return_value = _ai_itinerary(3)

        itinerary = await GeminiItineraryGenerator(ai_client).generate(request_3_days)

        assert itinerary.ai_generated is True
        assert itinerary.model == "gemini-test"
        assert [day.day_number for day in itinerary.days] == [1, 2, 3]
        assert itinerary.days[0].theme == "Theme 1"
        assert itinerary.days[2].date == date(2025, 6, 3)
        morning, evening = itinerary.days[0].activities
        assert morning.title == "Market"
        assert morning.time_slot == "morning"
        assert morning.duration_minutes == 90
        assert morning.cost == 25.56
        assert evening.time_slot == "evening"

        kwargs = ai_client.do_service.call_args.kwargs
        assert kwargs["resp_type"] is AiItinerary
        assert "Lisbon" in kwargs["contents"]

    @pytest.mark.asyncio
    async def test_falls_back_on_ai_error(
        self,
        ai_client: MagicMock,
        request_3_days: ItineraryRequest,
    ) -> None:
        ai_client.do_service.side_effect = AiNetworkError()

        generator = GeminiItineraryGenerator(
            ai_client,
            fallback=TemplateItineraryGenerator(Random(0)),
        )
        itinerary = await generator.generate(request_3_days)

        assert itinerary.ai_generated is False
        assert len(itinerary.days) == 3

    @pytest.mark.asyncio
    async def test_falls_back_on_wrong_day_count(
        self,
        ai_client: MagicMock,
        request_3_days: ItineraryRequest,
    ) -> None:
        ai_client.do_service.return_value = _ai_itinerary(2)

        itinerary = await GeminiItineraryGenerator(ai_client).generate(request_3_days)

        assert itinerary.ai_generated is False
        assert len(itinerary.days) == 3

    @pytest.mark.asyncio
    async def test_falls_back_on_bad_clock_time(
        self,
        ai_client: MagicMock,
        request_3_days: ItineraryRequest,
    ) -> None:
        result = _ai_itinerary(3)
        result.days[0].activities[0].start_time = "7pm"
        ai_client.do_service.return_value = result

        itinerary = await GeminiItineraryGenerator(ai_client).generate(request_3_days)

        assert itinerary.ai_generated is False


class ShortGenerator:
    async def generate(self, request: ItineraryRequest) -> GeneratedItinerary:
        itinerary = await TemplateItineraryGenerator(Random(0)).generate(request)
        return itinerary.model_copy(update={"days": itinerary.days[:-1]})


class BrokenGenerator:
    async def generate(self, request: ItineraryRequest) -> GeneratedItinerary:
        raise KeyError("days")


class TestRunGenerator:
    @pytest.mark.asyncio
    async def test_wrong_day_count(self, request_3_days: ItineraryRequest) -> None:
        with pytest.raises(ItineraryGenerationError) as exc_info:
            await run_generator(ShortGenerator(), request_3_days)

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "Failed to generate itinerary"

    @pytest.mark.asyncio
    async def test_unexpected_error_is_wrapped(self, request_3_days: ItineraryRequest) -> None:
        with pytest.raises(ItineraryGenerationError) as exc_info:
            await run_generator(BrokenGenerator(), request_3_days)

        assert isinstance(exc_info.value.__cause__, KeyError)
