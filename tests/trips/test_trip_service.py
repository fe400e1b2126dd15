"""Tests for TripService against a real session."""

from datetime import date
from typing import Any, cast

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import Database
from app.models import TripDB, UserDB
from app.repositories import PersonaRepository, ProfileRepository, TripRepository
from app.schemas.itinerary import GeneratedItinerary, ItineraryRequest
from app.schemas.trip import TripCreate
from app.services import TemplateItineraryGenerator, TripService


class TripCountingGenerator:
    """Template generator that records how many trips the session sees while it runs."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.trips_seen: int | None = None

    async def generate(self, request: ItineraryRequest) -> GeneratedItinerary:
        self.trips_seen = await self.session.scalar(select(func.count()).select_from(TripDB))
        return await TemplateItineraryGenerator().generate(request)


async def _trip_total(session: AsyncSession) -> int:
    return cast(int, await session.scalar(select(func.count()).select_from(TripDB)))


class TestTripService:
    @pytest.mark.asyncio
    async def test_itinerary_is_generated_before_trip_is_written(
        self,
        database: Database,
        trip_payload: dict[str, Any],
    ) -> None:
        async with database.session_maker() as session:
            user = UserDB(email="order@b.com", password_hash="x")
            session.add(user)
            await session.commit()

            generator = TripCountingGenerator(session)
            service = TripService(
                TripRepository(session),
                ProfileRepository(session),
                PersonaRepository(session),
                generator,
            )

            trip = await service.create_trip(
                cast(int, user.id),
                TripCreate.model_validate(trip_payload),
            )

            assert generator.trips_seen == 0
            assert await _trip_total(session) == 1
            assert len(trip.itinerary) == 5

    @pytest.mark.asyncio
    async def test_upcoming_is_relative_to_given_day(
        self,
        database: Database,
        trip_payload: dict[str, Any],
    ) -> None:
        async with database.session_maker() as session:
            user = UserDB(email="soon@b.com", password_hash="x")
            session.add(user)
            await session.commit()
            user_id = cast(int, user.id)
            service = TripService(
                TripRepository(session),
                ProfileRepository(session),
                PersonaRepository(session),
                TemplateItineraryGenerator(),
            )
            await service.create_trip(user_id, TripCreate.model_validate(trip_payload))

            before = await service.upcoming_trips(user_id, today=date(2025, 11, 1))
            on_start = await service.upcoming_trips(user_id, today=date(2025, 12, 1))

            assert [trip.title for trip in before.trips] == ["T"]
            assert on_start.trips == []
