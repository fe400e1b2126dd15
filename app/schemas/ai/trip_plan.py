# app/schemas/ai/trip_plan.py

"""
Schemas for the AI planning endpoints.

``/api/ai/trip-plan`` speaks a loose dialect inherited from the web client
(budgets like ``"$1,500"``, either an end date or a duration), so the
request models normalise their input before the generator sees it.
"""

from datetime import date, datetime, timedelta
from re import sub
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeFloat,
    PositiveInt,
    ValidationInfo,
    field_validator,
    model_validator,
)

from app.configs.settings import (
    DEFAULT_TRIP_BUDGET,
    MAX_DESTINATION_LENGTH,
    MAX_INTERESTS_COUNT,
    MAX_TRIP_DURATION,
)
from app.schemas.itinerary import GeneratedItinerary, PersonaType
from app.schemas.trip import Budget, Destination, Title, Travelers, TripDetail, check_date_range


def extract_budget_amount(budget: Any) -> float | None:
    """
    Extract a numeric budget from a number or a formatted string.

    Args:
        budget: Budget as a number or a string like "US$ 1000" or "$1,500".

    Returns:
        The numeric budget value, or None when no budget was given.

    Raises:
        ValueError: If a string holds no numeric value.
    """
    if budget is None or isinstance(budget, bool):
        return None
    if isinstance(budget, int | float):
        return float(budget)

    cleaned = sub(r"[^\d.]", "", str(budget))
    if not cleaned:
        msg = "Could not extract budget amount from the provided value"
        raise ValueError(msg)
    return float(cleaned)


class TravelerProfileInput(BaseModel):
    """The free-form traveler description sent with a trip-plan request."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str | None = None
    interests: list[str] = Field(default_factory=list, max_length=MAX_INTERESTS_COUNT)
    travel_style: str | None = Field(default=None, alias="travelStyle")
    pace: str | None = None


class TripParameters(BaseModel):
    """Where, when and how much; dates and duration complete each other."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    destination: str = Field(..., min_length=1, max_length=MAX_DESTINATION_LENGTH)
    start_date: date | None = Field(default=None, alias="startDate")
    end_date: date | None = Field(default=None, alias="endDate")
    duration: PositiveInt | None = Field(default=None, le=MAX_TRIP_DURATION)
    budget: NonNegativeFloat | None = None
    travelers: PositiveInt = 1
    interests: list[str] = Field(default_factory=list, max_length=MAX_INTERESTS_COUNT)

    @field_validator("destination")
    @classmethod
    def strip_destination(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "destination must not be empty"
            raise ValueError(msg)
        return value

    @field_validator("budget", mode="before")
    @classmethod
    def parse_budget(cls, value: Any) -> float | None:
        return extract_budget_amount(value)

    @model_validator(mode="after")
    def resolve_dates(self) -> Self:
        start = self.start_date or date.today()  # noqa: DTZ011
        if self.end_date is None:
            if self.duration is None:
                msg = "Provide either endDate or duration"
                raise ValueError(msg)
            end = start + timedelta(days=self.duration - 1)
        else:
            end = self.end_date

        if end < start:
            msg = "endDate must be on or after startDate"
            raise ValueError(msg)
        days = (end - start).days + 1
        if days > MAX_TRIP_DURATION:
            msg = f"Trip cannot be longer than {MAX_TRIP_DURATION} days"
            raise ValueError(msg)

        self.start_date, self.end_date, self.duration = start, end, days
        return self


class TripPlanRequest(BaseModel):
    """Body of ``POST /api/ai/trip-plan``; both parts are required by the route."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "travelerProfile": {"name": "Foodie / Culinary Explorer"},
                "tripParameters": {
                    "destination": "Lisbon",
                    "startDate": "2025-06-01",
                    "duration": 3,
                    "budget": 1200,
                    "interests": ["food", "history"],
                },
            },
        },
    )

    traveler_profile: TravelerProfileInput | None = Field(default=None, alias="travelerProfile")
    trip_parameters: TripParameters | None = Field(default=None, alias="tripParameters")


class TripPlanActivity(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    type: str
    location: str
    start_time: str = Field(..., alias="startTime")
    end_time: str = Field(..., alias="endTime")
    estimated_cost: float = Field(..., alias="estimatedCost")
    duration: str


class TripPlanDay(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day: str
    day_number: int = Field(..., alias="dayNumber")
    date: date
    theme: str
    activities: list[TripPlanActivity]


class TripPlanResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    destination: str
    duration: int
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    total_budget: float = Field(..., alias="totalBudget")
    travelers: int
    persona: str
    daily_itineraries: list[TripPlanDay] = Field(..., alias="dailyItineraries")
    generated_at: datetime = Field(..., alias="generatedAt")
    ai_model: str = Field(..., alias="aiModel")


class PreviewRequest(BaseModel):
    """Body of ``POST /api/ai/preview``."""

    model_config = ConfigDict(populate_by_name=True)

    destination: Destination
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    persona_id: int | None = Field(default=None, alias="personaId")
    budget: Budget = DEFAULT_TRIP_BUDGET
    travelers: Travelers = 1

    @field_validator("end_date")
    @classmethod
    def end_not_before_start(cls, value: date, info: ValidationInfo) -> date:
        check_date_range(info.data.get("start_date"), value)
        return value


class GenerateTripRequest(PreviewRequest):
    """Body of ``POST /api/ai/generate-trip``: a preview that is also saved as a trip."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Kyoto food week",
                "destination": "Kyoto",
                "startDate": "2025-10-01",
                "endDate": "2025-10-04",
                "personaId": 1,
                "budget": 2000,
                "travelers": 2,
            },
        },
    )

    title: Title


class GenerateTripResponse(BaseModel):
    message: str = "AI-powered trip created successfully"
    trip: TripDetail
    saved: bool = True


class PreviewResponse(BaseModel):
    itinerary: GeneratedItinerary


class RegenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    persona_id: int | None = Field(default=None, alias="personaId")


class SuggestionsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    destination: str
    persona_type: PersonaType = Field(..., alias="personaType")
    recommended_activities: dict[str, list[str]] = Field(..., alias="recommendedActivities")
    estimated_budget_per_day: float | None = Field(default=None, alias="estimatedBudgetPerDay")
    tips: list[str]
