# app/services/trip_plan.py

"""Unauthenticated trip planning and destination suggestions."""

from logging import getLogger
from statistics import fmean

from fastapi import Request

from app.configs import file_logger
from app.configs.settings import DEFAULT_TRIP_BUDGET, TRIP_PLAN_MISSING_PARTS
from app.data.activity_templates import PERSONA_TIPS, TEMPLATES
from app.errors import TripPlanRequestError
from app.repositories import PersonaRepository, ProfileRepository
from app.schemas.ai.trip_plan import (
    SuggestionsResponse,
    TripPlanActivity,
    TripPlanDay,
    TripPlanRequest,
    TripPlanResponse,
)
from app.schemas.itinerary import GeneratedItinerary, ItineraryRequest, PersonaType
from app.schemas.persona import AccessibilityNeeds, BudgetDetails, PersonalPreferences
from app.services.itinerary import ItineraryGenerator, resolve_persona_type, run_generator
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))

FALLBACK_MODEL_LABEL = "Fallback Service (Google AI unavailable)"


def format_duration(minutes: int) -> str:
    """
    Render a duration in minutes as ``"2h 30m"``.

    Args:
        minutes: Length of the activity.

    Returns:
        str: Hours and minutes, leaving out zero parts.
    """
    hours, rest = divmod(minutes, 60)
    if hours and rest:
        return f"{hours}h {rest}m"
    return f"{hours}h" if hours else f"{rest}m"


def to_trip_plan(itinerary: GeneratedItinerary) -> TripPlanResponse:
    """Convert a generated itinerary to the trip-plan response shape."""
    return TripPlanResponse(
        destination=itinerary.destination,
        duration=len(itinerary.days),
        start_date=itinerary.start_date,
        end_date=itinerary.end_date,
        total_budget=itinerary.total_budget,
        travelers=itinerary.travelers,
        persona=itinerary.persona,
        daily_itineraries=[
            TripPlanDay(
                day=f"Day {day.day_number}",
                day_number=day.day_number,
                date=day.date,
                theme=day.theme,
                activities=[
                    TripPlanActivity(
                        name=activity.title,
                        description=activity.description,
                        type=activity.category,
                        location=activity.location,
                        start_time=activity.start_time,
                        end_time=activity.end_time,
                        estimated_cost=activity.cost,
                        duration=format_duration(activity.duration_minutes),
                    )
                    for activity in day.activities
                ],
            )
            for day in itinerary.days
        ],
        generated_at=itinerary.generated_at,
        ai_model=itinerary.model if itinerary.ai_generated else FALLBACK_MODEL_LABEL,
    )


async def plan_trip(
    request: Request,
    payload: TripPlanRequest,
    generator: ItineraryGenerator,
) -> TripPlanResponse:
    """
    Generate a trip plan from a traveler description and trip parameters.

    Args:
        request: The request object.
        payload: Traveler profile and trip parameters.
        generator: The itinerary generator to use.

    Returns:
        TripPlanResponse: The planned days.

    Raises:
        TripPlanRequestError: If either part of the payload is missing.
    """
    profile, params = payload.traveler_profile, payload.trip_parameters
    if profile is None or params is None:
        raise TripPlanRequestError(TRIP_PLAN_MISSING_PARTS)

    logger.info(
        f"Planning {params.duration}-day trip to {params.destination} for ip {host(request)}",
    )

    itinerary_request = ItineraryRequest.model_validate(
        {
            "destination": params.destination,
            "start_date": params.start_date,
            "end_date": params.end_date,
            "travelers": params.travelers,
            "budget": params.budget if params.budget is not None else DEFAULT_TRIP_BUDGET,
            "profile_name": profile.name,
            # Trip interests first, then whatever the profile adds
            "interests": tuple(dict.fromkeys([*params.interests, *profile.interests])),
            "pace": profile.pace,
        },
    )
    return to_trip_plan(await run_generator(generator, itinerary_request))


def build_suggestions(
    destination: str,
    persona_type: PersonaType,
    daily_budget: float | None = None,
) -> SuggestionsResponse:
    """
    Suggest activities for a destination from the persona's templates.

    Args:
        destination: Where the traveler is going.
        persona_type: The traveler's persona type.
        daily_budget: A known daily budget; estimated from template costs otherwise.

    Returns:
        SuggestionsResponse: Activities per time slot, a daily estimate and tips.
    """
    slots = TEMPLATES[persona_type]
    if daily_budget is None:
        daily_budget = round(
            sum(fmean(t.base_cost for t in templates) for templates in slots.values()),
            2,
        )
    return SuggestionsResponse(
        destination=destination,
        persona_type=persona_type,
        recommended_activities={
            slot: [template.title.format(destination=destination) for template in templates]
            for slot, templates in slots.items()
        },
        estimated_budget_per_day=daily_budget,
        tips=list(PERSONA_TIPS[persona_type]),
    )


async def suggestions_for_user(
    destination: str,
    user_id: int,
    persona_repo: PersonaRepository,
    profile_repo: ProfileRepository,
) -> SuggestionsResponse:
    """Build suggestions tailored to the user's persona, if they have one."""
    persona = await persona_repo.get_by_user(user_id)
    if persona is None:
        return build_suggestions(destination, "cultural")

    profile = await profile_repo.get_by_id(persona.base_profile_id)
    preferences = PersonalPreferences.model_validate(persona.personal_preferences)
    accessibility = (
        AccessibilityNeeds.model_validate(persona.accessibility_needs)
        if persona.accessibility_needs
        else None
    )
    budget = (
        BudgetDetails.model_validate(persona.budget_details) if persona.budget_details else None
    )

    persona_type = resolve_persona_type(
        profile.name if profile else None,
        tuple(preferences.interests),
        bool(accessibility and accessibility.needs_step_free_access),
    )
    return build_suggestions(destination, persona_type, budget.daily if budget else None)
