# app/services/itinerary.py

"""
Itinerary generation.

Two generators share the ``ItineraryGenerator`` protocol: a template
generator that works offline and a Gemini generator that asks the model for
structured days and falls back to templates when the AI call fails.
"""

from datetime import datetime, timedelta
from logging import getLogger
from random import Random
from typing import Protocol, get_args

from app.clients.ai_client import AiClient
from app.configs import file_logger, settings
from app.configs.settings import (
    COST_VARIATION_RANGE,
    DEFAULT_TRIP_BUDGET,
    MAX_ACTIVITY_BUDGET_SHARE,
)
from app.data.activity_templates import (
    ARRIVAL,
    ARRIVAL_THEME,
    DAY_THEMES,
    DEPARTURE,
    DEPARTURE_THEME,
    SLOT_TIMINGS,
    TEMPLATES,
    ActivityTemplate,
)
from app.errors import AiError, AiGenerationError, ItineraryGenerationError
from app.schemas.ai.generation import AiActivity, AiItinerary
from app.schemas.itinerary import (
    GeneratedItinerary,
    ItineraryRequest,
    PersonaType,
    PlannedActivity,
    PlannedDay,
    TimeSlot,
)
from app.utils.helpers import add_minutes, utc_now

logger = file_logger(getLogger(__name__))

TIME_SLOTS: tuple[TimeSlot, ...] = get_args(TimeSlot)

SYSTEM_INSTRUCTION = "You are an expert travel planner who writes practical, bookable itineraries."

# Keyword -> persona type, checked in order against profile name and interests
_PERSONA_KEYWORDS: tuple[tuple[PersonaType, tuple[str, ...]], ...] = (
    ("mobility", ("mobility", "accessible", "wheelchair")),
    ("family", ("family", "children", "kids")),
    ("foodie", ("foodie", "culinary", "food", "cuisine")),
    ("adventure", ("adventure", "active", "hiking", "outdoor")),
    ("cultural", ("cultural", "history", "museum", "art")),
)


class ItineraryGenerator(Protocol):
    """Anything that turns an ``ItineraryRequest`` into a day-by-day plan."""

    async def generate(self, request: ItineraryRequest) -> GeneratedItinerary: ...


def resolve_persona_type(
    profile_name: str | None,
    interests: tuple[str, ...] = (),
    needs_step_free_access: bool = False,
) -> PersonaType:
    """
    Map a profile name and interests onto one of the template persona types.

    Args:
        profile_name: Name of the traveler profile, e.g. "Foodie / Culinary Explorer".
        interests: Free-form interests from the persona or the request.
        needs_step_free_access: Whether the travelers need wheelchair-friendly plans.

    Returns:
        PersonaType: The matching type, ``"cultural"`` when nothing matches.
    """
    if needs_step_free_access:
        return "mobility"

    haystacks = [profile_name.lower()] if profile_name else []
    haystacks.extend(interest.lower() for interest in interests)
    for haystack in haystacks:
        for persona_type, keywords in _PERSONA_KEYWORDS:
            if any(keyword in haystack for keyword in keywords):
                return persona_type
    return "cultural"


def _persona_type(request: ItineraryRequest) -> PersonaType:
    step_free = bool(request.accessibility and request.accessibility.needs_step_free_access)
    return resolve_persona_type(request.profile_name, request.interests, step_free)


def _day_theme(persona_type: PersonaType, index: int, duration: int) -> str:
    if index == 0:
        return ARRIVAL_THEME
    if index == duration - 1:
        return DEPARTURE_THEME
    themes = DAY_THEMES[persona_type]
    return themes[(index - 1) % len(themes)]


class TemplateItineraryGenerator:
    """
    Build itineraries from the persona-typed activity templates.

    Every day gets a morning, afternoon and evening activity. The first
    activity of the trip is the arrival, the last one the departure. Costs
    are the template cost times the number of travelers with a random
    variation, capped at a share of the daily budget.

    Attributes:
        rng: Random source; pass a seeded ``Random`` for reproducible plans.
    """

    def __init__(self, rng: Random | None = None) -> None:
        self.rng = rng or Random()  # noqa: S311

    async def generate(self, request: ItineraryRequest) -> GeneratedItinerary:
        persona_type = _persona_type(request)
        duration = request.duration
        total_budget = request.budget if request.budget is not None else DEFAULT_TRIP_BUDGET
        daily_cap = total_budget / duration * MAX_ACTIVITY_BUDGET_SHARE

        days = [
            PlannedDay(
                day_number=index + 1,
                date=request.start_date + timedelta(days=index),
                theme=_day_theme(persona_type, index, duration),
                activities=[
                    self._plan_activity(
                        self._pick(persona_type, slot, index, duration),
                        slot,
                        request,
                        daily_cap,
                    )
                    for slot in TIME_SLOTS
                ],
            )
            for index in range(duration)
        ]

        return GeneratedItinerary(
            destination=request.destination,
            start_date=request.start_date,
            end_date=request.end_date,
            travelers=request.travelers,
            total_budget=total_budget,
            persona=request.profile_name or persona_type.title(),
            persona_type=persona_type,
            days=days,
            generated_at=utc_now(),
        )

    def _pick(
        self,
        persona_type: PersonaType,
        slot: TimeSlot,
        index: int,
        duration: int,
    ) -> ActivityTemplate:
        if index == 0 and slot == "morning":
            return ARRIVAL
        if index == duration - 1 and slot == "evening":
            return DEPARTURE
        return self.rng.choice(TEMPLATES[persona_type][slot])

    def _plan_activity(
        self,
        template: ActivityTemplate,
        slot: TimeSlot,
        request: ItineraryRequest,
        daily_cap: float,
    ) -> PlannedActivity:
        timing = SLOT_TIMINGS[slot]
        low, high = COST_VARIATION_RANGE
        cost = template.base_cost * request.travelers * self.rng.uniform(low, high)
        destination = request.destination

        return PlannedActivity(
            title=template.title.format(destination=destination),
            description=template.description.format(destination=destination),
            time_slot=slot,
            start_time=timing.start_time,
            end_time=add_minutes(timing.start_time, timing.duration_minutes),
            duration_minutes=timing.duration_minutes,
            location=template.location.format(destination=destination),
            category=template.category,
            cost=round(min(cost, daily_cap), 2),
            reservation_required=template.reservation_required,
            difficulty=template.difficulty,
            accessibility=template.accessibility,
            tips=template.tips,
        )


def prompt(request: ItineraryRequest, persona_type: PersonaType) -> str:
    """
    Create a detailed prompt for itinerary generation.

    Args:
        request: The itinerary request.
        persona_type: The resolved persona type.

    Returns:
        A formatted prompt string for the AI model.
    """
    interests = ", ".join(request.interests) or "general sightseeing"
    budget = request.budget if request.budget is not None else DEFAULT_TRIP_BUDGET
    accessibility = "none"
    if request.accessibility and request.accessibility.needs_step_free_access:
        accessibility = "step-free access required for every activity"

    return f"""
    Plan a {request.duration} day(s) trip to {request.destination}.

    <traveler_profile>
    Persona: {request.profile_name or persona_type}
    Interests: {interests}
    Pace: {request.pace or "moderate"}
    Travelers: {request.travelers}
    Total budget (USD): {budget}
    Accessibility: {accessibility}
    </traveler_profile>

    <dates>
    Start: {request.start_date.isoformat()}
    End: {request.end_date.isoformat()}
    </dates>

    <rules>
    - Return exactly {request.duration} days numbered 1 to {request.duration}
    - Give every day a short theme and one morning, one afternoon and one evening activity
    - Times use the 24h HH:MM format and never overlap within a day
    - estimated_cost is the cost for the whole group and keeps the trip within budget
    - Day 1 starts with arrival, the last day ends with departure
    </rules>
    """


def _time_slot(activity: AiActivity) -> TimeSlot:
    slot = activity.time_slot.strip().lower()
    if slot in TIME_SLOTS:
        return slot  # type: ignore[return-value]
    hour = int(activity.start_time.split(":", 1)[0])
    if hour < 12:  # noqa: PLR2004
        return "morning"
    if hour < 17:  # noqa: PLR2004
        return "afternoon"
    return "evening"


def _minutes_between(start: str, end: str) -> int:
    delta = datetime.strptime(end, "%H:%M") - datetime.strptime(start, "%H:%M")
    return delta.seconds // 60


class GeminiItineraryGenerator:
    """
    Ask Gemini for a structured itinerary.

    Any ``AiError``, including a response with the wrong number of days,
    is logged and answered by the fallback generator instead.
    """

    def __init__(self, ai_client: AiClient, fallback: ItineraryGenerator | None = None) -> None:
        self.ai_client = ai_client
        self.fallback = fallback or TemplateItineraryGenerator()

    async def generate(self, request: ItineraryRequest) -> GeneratedItinerary:
        persona_type = _persona_type(request)
        try:
            result = await self.ai_client.do_service(
                contents=prompt(request, persona_type),
                system_instruction=SYSTEM_INSTRUCTION,
                resp_type=AiItinerary,
                temperature=settings.AI_TEMPERATURE,
            )
            days = self._to_days(result, request)
        except AiError as e:
            logger.warning(f"AI itinerary failed for {request.destination}, using templates: {e}")
            return await self.fallback.generate(request)

        return GeneratedItinerary(
            destination=request.destination,
            start_date=request.start_date,
            end_date=request.end_date,
            travelers=request.travelers,
            total_budget=request.budget if request.budget is not None else DEFAULT_TRIP_BUDGET,
            persona=request.profile_name or persona_type.title(),
            persona_type=persona_type,
            days=days,
            generated_at=utc_now(),
            ai_generated=True,
            model=self.ai_client.model,
        )

    def _to_days(self, result: AiItinerary, request: ItineraryRequest) -> list[PlannedDay]:
        if len(result.days) != request.duration:
            msg = f"Expected {request.duration} days, model returned {len(result.days)}"
            raise AiGenerationError(detail=msg)

        ordered = sorted(result.days, key=lambda day: day.day_number)
        try:
            return [
                PlannedDay(
                    day_number=index + 1,
                    date=request.start_date + timedelta(days=index),
                    theme=day.theme,
                    activities=[
                        PlannedActivity(
                            title=activity.title,
                            description=activity.description,
                            time_slot=_time_slot(activity),
                            start_time=activity.start_time,
                            end_time=activity.end_time,
                            duration_minutes=_minutes_between(
                                activity.start_time,
                                activity.end_time,
                            ),
                            location=activity.location,
                            category=activity.category,
                            cost=round(max(activity.estimated_cost, 0.0), 2),
                            reservation_required=activity.reservation_required,
                            tips=activity.tips,
                        )
                        for activity in sorted(day.activities, key=lambda a: a.start_time)
                    ],
                )
                for index, day in enumerate(ordered)
            ]
        except ValueError as e:
            # Covers pydantic validation errors and unparsable clock times
            raise AiGenerationError(detail=f"Malformed itinerary from model: {e}") from e


async def run_generator(
    generator: ItineraryGenerator,
    request: ItineraryRequest,
) -> GeneratedItinerary:
    """
    Run a generator and normalise its failures.

    Raises:
        ItineraryGenerationError: When the generator fails for any reason
            or returns the wrong number of days.
    """
    try:
        itinerary = await generator.generate(request)
    except ItineraryGenerationError:
        raise
    except Exception as e:
        logger.exception(f"Itinerary generation failed for {request.destination}")
        raise ItineraryGenerationError from e

    if len(itinerary.days) != request.duration:
        logger.error(
            f"Generator returned {len(itinerary.days)} days for a {request.duration}-day trip",
        )
        raise ItineraryGenerationError
    return itinerary
