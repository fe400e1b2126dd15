"""Trip service: creation with a generated itinerary, reads and maintenance."""

from datetime import date
from logging import getLogger
from typing import Any, cast

from sqlalchemy.ext.asyncio import AsyncSession

from app.configs import file_logger
from app.errors import RecordNotFoundError, ValidationError
from app.models import ActivityDB, ItineraryDayDB, TravelerProfileDB, TripDB, UserPersonaDB
from app.repositories import PersonaRepository, ProfileRepository, TripRepository
from app.schemas.ai.trip_plan import GenerateTripRequest, PreviewRequest
from app.schemas.itinerary import GeneratedItinerary, ItineraryRequest
from app.schemas.persona import AccessibilityNeeds, BudgetDetails, PersonalPreferences
from app.schemas.trip import (
    ActivityResponse,
    ItineraryDayResponse,
    MessageResponse,
    TripCreate,
    TripDetail,
    TripListResponse,
    TripSummary,
    TripUpdate,
    check_date_range,
)
from app.services.itinerary import ItineraryGenerator, run_generator

logger = file_logger(getLogger(__name__))

TRIP_NOT_FOUND = "Trip not found"


def build_itinerary_request(
    *,
    destination: str,
    start_date: date,
    end_date: date,
    travelers: int,
    budget: float | None,
    profile: TravelerProfileDB | None,
    persona: UserPersonaDB | None,
) -> ItineraryRequest:
    """
    Combine trip parameters with the profile and persona into a generator request.

    Persona blocks win over the base profile; an explicit trip budget wins
    over the persona's total budget.
    """
    interests: tuple[str, ...] = ()
    pace = None
    accessibility = None
    if persona is not None:
        preferences = PersonalPreferences.model_validate(persona.personal_preferences)
        interests = tuple(preferences.interests)
        pace = preferences.pace
        if persona.accessibility_needs:
            accessibility = AccessibilityNeeds.model_validate(persona.accessibility_needs)
        if budget is None and persona.budget_details:
            budget = BudgetDetails.model_validate(persona.budget_details).total

    return ItineraryRequest.model_validate(
        {
            "destination": destination,
            "start_date": start_date,
            "end_date": end_date,
            "travelers": travelers,
            "budget": budget,
            "profile_name": profile.name if profile else None,
            "interests": interests,
            "pace": pace,
            "accessibility": accessibility,
        },
    )


def _day_response(day: ItineraryDayDB, activities: list[ActivityDB]) -> ItineraryDayResponse:
    return ItineraryDayResponse(
        id=cast(int, day.id),
        trip_id=day.trip_id,
        day_number=day.day_number,
        date=day.date,
        theme=day.theme,
        activities=[ActivityResponse.model_validate(activity) for activity in activities],
    )


class TripService:
    """
    Service for trips and their itineraries.

    Mutations commit the session themselves once every row is written; an
    exception anywhere before that leaves the request's transaction to be
    rolled back, so no trip is stored without its itinerary.
    """

    def __init__(
        self,
        trip_repo: TripRepository,
        profile_repo: ProfileRepository,
        persona_repo: PersonaRepository,
        generator: ItineraryGenerator,
    ) -> None:
        self.trip_repo = trip_repo
        self.profile_repo = profile_repo
        self.persona_repo = persona_repo
        self.generator = generator

    @property
    def session(self) -> AsyncSession:
        return self.trip_repo.session

    async def _resolve_profile(self, profile_id: int) -> TravelerProfileDB:
        profile = await self.profile_repo.get_by_id(profile_id)
        if profile is None:
            raise ValidationError.for_field(
                "travelerProfileId",
                f"Traveler profile {profile_id} does not exist",
            )
        return profile

    async def _resolve_persona(self, persona_id: int | None, user_id: int) -> UserPersonaDB | None:
        if persona_id is None:
            return None
        persona = await self.persona_repo.get_owned(persona_id, user_id)
        if persona is None:
            raise ValidationError.for_field("personaId", f"Persona {persona_id} does not exist")
        return persona

    async def _get_owned(self, trip_id: int, user_id: int) -> TripDB:
        trip = await self.trip_repo.get_owned(trip_id, user_id)
        if trip is None:
            raise RecordNotFoundError(detail=TRIP_NOT_FOUND)
        return trip

    async def _detail(self, trip: TripDB) -> TripDetail:
        profile_name = None
        if trip.traveler_profile_id is not None:
            profile = await self.profile_repo.get_by_id(trip.traveler_profile_id)
            profile_name = profile.name if profile else None

        itinerary = await self.trip_repo.get_itinerary(cast(int, trip.id))
        summary = TripSummary.model_validate(trip).model_copy(update={"profile_name": profile_name})
        return TripDetail(
            **summary.model_dump(),
            itinerary=[_day_response(day, activities) for day, activities in itinerary],
        )

    async def _store(self, user_id: int, itinerary: GeneratedItinerary, **fields: Any) -> TripDB:
        """Insert a trip and its generated days, then commit them together."""
        trip = await self.trip_repo.create(user_id, **fields)
        await self.trip_repo.add_itinerary(cast(int, trip.id), itinerary.days)
        await self.session.commit()
        logger.info(f"Created trip {trip.id} with {len(itinerary.days)} days for user {user_id}")
        return trip

    async def create_trip(self, user_id: int, payload: TripCreate) -> TripDetail:
        """
        Create a trip for ``user_id`` and generate its itinerary.

        Nothing is written until the itinerary has been generated.

        Args:
            user_id: Authenticated owner
            payload: Validated trip payload

        Returns:
            TripDetail: The stored trip with its itinerary

        Raises:
            ValidationError: If the profile or persona cannot be resolved
            ItineraryGenerationError: If the generator fails
        """
        profile = await self._resolve_profile(payload.traveler_profile_id)
        persona = await self._resolve_persona(payload.persona_id, user_id)

        itinerary = await run_generator(
            self.generator,
            build_itinerary_request(
                destination=payload.destination,
                start_date=payload.start_date,
                end_date=payload.end_date,
                travelers=payload.number_of_travelers,
                budget=payload.budget,
                profile=profile,
                persona=persona,
            ),
        )
        trip = await self._store(
            user_id,
            itinerary,
            title=payload.title,
            destination=payload.destination,
            start_date=payload.start_date,
            end_date=payload.end_date,
            traveler_profile_id=profile.id,
            persona_id=persona.id if persona else None,
            number_of_travelers=payload.number_of_travelers,
            budget=payload.budget,
        )
        return await self._detail(trip)

    async def generate_trip(self, user_id: int, payload: GenerateTripRequest) -> TripDetail:
        """
        Create a trip planned for a persona rather than a traveler profile.

        Raises:
            RecordNotFoundError: If ``personaId`` is not one of the caller's personas
            ItineraryGenerationError: If the generator fails
        """
        itinerary = await self.preview(user_id, payload)
        trip = await self._store(
            user_id,
            itinerary,
            title=payload.title,
            destination=payload.destination,
            start_date=payload.start_date,
            end_date=payload.end_date,
            traveler_profile_id=None,
            persona_id=payload.persona_id,
            number_of_travelers=payload.travelers,
            budget=payload.budget,
        )
        return await self._detail(trip)

    async def list_trips(self, user_id: int) -> TripListResponse:
        return self._summaries(await self.trip_repo.list_for_user(user_id))

    async def search_trips(self, user_id: int, destination: str) -> TripListResponse:
        """The caller's trips whose destination contains ``destination``, ignoring case."""
        return self._summaries(await self.trip_repo.list_for_user(user_id, destination=destination))

    async def upcoming_trips(self, user_id: int, today: date | None = None) -> TripListResponse:
        """The caller's trips starting after ``today``, soonest first."""
        rows = await self.trip_repo.list_for_user(
            user_id,
            starts_after=today or date.today(),  # noqa: DTZ011
        )
        return self._summaries(rows)

    @staticmethod
    def _summaries(rows: list[tuple[TripDB, str | None]]) -> TripListResponse:
        return TripListResponse(
            trips=[
                TripSummary.model_validate(trip).model_copy(update={"profile_name": name})
                for trip, name in rows
            ],
        )

    async def get_trip(self, trip_id: int, user_id: int) -> TripDetail:
        return await self._detail(await self._get_owned(trip_id, user_id))

    async def update_trip(self, trip_id: int, user_id: int, payload: TripUpdate) -> TripDetail:
        """
        Apply a partial update; the stored itinerary is left as it is.

        Raises:
            RecordNotFoundError: If the trip is missing or not the caller's
            ValidationError: If the merged dates or the new profile are invalid
        """
        trip = await self._get_owned(trip_id, user_id)
        changes = payload.model_dump(exclude_unset=True)

        # Fields sent as null keep their stored value, except the optional budget
        changes = {k: v for k, v in changes.items() if v is not None or k == "budget"}

        try:
            check_date_range(
                changes.get("start_date", trip.start_date),
                changes.get("end_date", trip.end_date),
            )
        except ValueError as e:
            raise ValidationError.for_field("endDate", str(e)) from e

        if "traveler_profile_id" in changes:
            await self._resolve_profile(changes["traveler_profile_id"])

        trip = await self.trip_repo.apply_changes(trip, changes)
        await self.session.commit()
        return await self._detail(trip)

    async def delete_trip(self, trip_id: int, user_id: int) -> MessageResponse:
        trip = await self._get_owned(trip_id, user_id)
        await self.trip_repo.delete(trip)
        await self.session.commit()
        logger.info(f"Deleted trip {trip_id} for user {user_id}")
        return MessageResponse(message="Trip deleted successfully")

    async def regenerate(
        self,
        trip_id: int,
        user_id: int,
        persona_id: int | None = None,
    ) -> TripDetail:
        """
        Replace a trip's itinerary with a freshly generated one.

        Args:
            trip_id: Trip to regenerate
            user_id: Authenticated owner
            persona_id: Persona to plan for; defaults to the trip's own persona

        Returns:
            TripDetail: The trip with its new itinerary
        """
        trip = await self._get_owned(trip_id, user_id)
        persona = await self._resolve_persona(persona_id or trip.persona_id, user_id)
        profile = None
        if trip.traveler_profile_id is not None:
            profile = await self.profile_repo.get_by_id(trip.traveler_profile_id)

        itinerary = await run_generator(
            self.generator,
            build_itinerary_request(
                destination=trip.destination,
                start_date=trip.start_date,
                end_date=trip.end_date,
                travelers=trip.number_of_travelers,
                budget=trip.budget,
                profile=profile,
                persona=persona,
            ),
        )
        await self.trip_repo.replace_itinerary(cast(int, trip.id), itinerary.days)
        if persona is not None and persona.id != trip.persona_id:
            trip = await self.trip_repo.apply_changes(trip, {"persona_id": persona.id})
        await self.session.commit()
        return await self._detail(trip)

    async def preview(self, user_id: int, payload: PreviewRequest) -> GeneratedItinerary:
        """
        Generate an itinerary without storing anything.

        Raises:
            RecordNotFoundError: If ``personaId`` is not one of the caller's personas
        """
        persona = None
        profile = None
        if payload.persona_id is not None:
            persona = await self.persona_repo.get_owned(payload.persona_id, user_id)
            if persona is None:
                raise RecordNotFoundError(detail="Persona not found")
            profile = await self.profile_repo.get_by_id(persona.base_profile_id)

        return await run_generator(
            self.generator,
            build_itinerary_request(
                destination=payload.destination,
                start_date=payload.start_date,
                end_date=payload.end_date,
                travelers=payload.travelers,
                budget=payload.budget,
                profile=profile,
                persona=persona,
            ),
        )
