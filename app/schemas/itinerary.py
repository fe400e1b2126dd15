"""Input and output records of the itinerary generators."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, computed_field

from app.schemas.persona import AccessibilityNeeds

TimeSlot = Literal["morning", "afternoon", "evening"]
PersonaType = Literal["adventure", "cultural", "foodie", "family", "mobility"]


class ItineraryRequest(BaseModel):
    """Everything a generator needs to plan a trip."""

    model_config = ConfigDict(frozen=True)

    destination: str
    start_date: date
    end_date: date
    travelers: PositiveInt = 1
    budget: float | None = None
    profile_name: str | None = None
    interests: tuple[str, ...] = ()
    pace: str | None = None
    accessibility: AccessibilityNeeds | None = None

    @computed_field
    @property
    def duration(self) -> int:
        return (self.end_date - self.start_date).days + 1


class PlannedActivity(BaseModel):
    title: str
    description: str
    time_slot: TimeSlot
    start_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    end_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    duration_minutes: int
    location: str
    category: str
    cost: float = Field(..., ge=0)
    reservation_required: bool = False
    difficulty: str = "easy"
    accessibility: str | None = None
    tips: str | None = None


class PlannedDay(BaseModel):
    day_number: int
    date: date
    theme: str
    activities: list[PlannedActivity]

    @computed_field
    @property
    def total_cost(self) -> float:
        return round(sum(activity.cost for activity in self.activities), 2)

    @computed_field
    @property
    def day_of_week(self) -> str:
        return self.date.strftime("%A")


class GeneratedItinerary(BaseModel):
    """A complete day-by-day plan, not yet persisted."""

    destination: str
    start_date: date
    end_date: date
    travelers: int
    total_budget: float
    persona: str
    persona_type: PersonaType
    days: list[PlannedDay]
    generated_at: datetime
    ai_generated: bool = False
    model: str = "template"
