"""Trip request and response schemas."""

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    NonNegativeFloat,
    PositiveInt,
    StringConstraints,
    ValidationInfo,
    field_validator,
)

from app.configs.settings import (
    MAX_DESTINATION_LENGTH,
    MAX_TITLE_LENGTH,
    MAX_TRIP_DURATION,
)
from app.utils.helpers import trip_length


def _not_bool(value: Any) -> Any:
    # JSON true/false would otherwise coerce to 1/0
    if isinstance(value, bool):
        msg = "must be a number, not a boolean"
        raise ValueError(msg)
    return value


Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_TITLE_LENGTH),
]
Destination = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_DESTINATION_LENGTH),
]
Budget = Annotated[NonNegativeFloat, BeforeValidator(_not_bool)]
Travelers = Annotated[PositiveInt, BeforeValidator(_not_bool)]


def check_date_range(start: date | None, end: date | None) -> None:
    if start is None or end is None:
        return
    if start > end:
        msg = "endDate must be on or after startDate"
        raise ValueError(msg)
    if trip_length(start, end) > MAX_TRIP_DURATION:
        msg = f"Trip cannot be longer than {MAX_TRIP_DURATION} days"
        raise ValueError(msg)


class TripCreate(BaseModel):
    """Payload for creating a trip."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Paris in December",
                "destination": "Paris",
                "startDate": "2025-12-01",
                "endDate": "2025-12-05",
                "travelerProfileId": 1,
                "numberOfTravelers": 2,
                "budget": 1500,
            },
        },
    )

    title: Title
    destination: Destination
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    traveler_profile_id: int = Field(..., alias="travelerProfileId")
    number_of_travelers: Travelers = Field(default=1, alias="numberOfTravelers")
    budget: Budget | None = None
    persona_id: int | None = Field(default=None, alias="personaId")

    @field_validator("end_date")
    @classmethod
    def end_not_before_start(cls, value: date | None, info: ValidationInfo) -> date | None:
        check_date_range(info.data.get("start_date"), value)
        return value


class TripUpdate(BaseModel):
    """Partial trip update; omitted fields keep their stored value."""

    model_config = ConfigDict(populate_by_name=True)

    title: Title | None = None
    destination: Destination | None = None
    start_date: date | None = Field(default=None, alias="startDate")
    end_date: date | None = Field(default=None, alias="endDate")
    traveler_profile_id: int | None = Field(default=None, alias="travelerProfileId")
    number_of_travelers: Travelers | None = Field(default=None, alias="numberOfTravelers")
    budget: Budget | None = None

    @field_validator("end_date")
    @classmethod
    def end_not_before_start(cls, value: date | None, info: ValidationInfo) -> date | None:
        check_date_range(info.data.get("start_date"), value)
        return value


class ActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    day_id: int
    title: str
    description: str | None = None
    time_slot: str
    start_time: str
    end_time: str
    location: str | None = None
    category: str | None = None
    cost: float
    reservation_required: bool
    accessibility: str | None = None
    notes: str | None = None


class ItineraryDayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trip_id: int
    day_number: int
    date: date
    theme: str | None = None
    activities: list[ActivityResponse] = []


class TripSummary(BaseModel):
    """A trip row as stored, plus the name of its traveler profile."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    destination: str
    start_date: date
    end_date: date
    traveler_profile_id: int | None = None
    persona_id: int | None = None
    profile_name: str | None = None
    number_of_travelers: int
    budget: float | None = None
    created_at: datetime
    updated_at: datetime


class TripDetail(TripSummary):
    """A trip with its itinerary, days ordered by day number."""

    itinerary: list[ItineraryDayResponse] = []


class TripListResponse(BaseModel):
    trips: list[TripSummary]


class MessageResponse(BaseModel):
    message: str
