"""Schemas for editing the activities of a stored itinerary."""

from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
)

from app.configs.settings import MAX_TITLE_LENGTH
from app.schemas.itinerary import TimeSlot
from app.schemas.trip import ActivityResponse, Budget

ClockTime = Annotated[str, StringConstraints(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]
ActivityTitle = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_TITLE_LENGTH),
]


def check_time_range(start: str | None, end: str | None) -> None:
    # Zero-padded HH:MM strings order the same way as the times they encode
    if start is not None and end is not None and end < start:
        msg = "endTime must not be before startTime"
        raise ValueError(msg)


class ActivityCreate(BaseModel):
    """Body of ``POST /api/activities``."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "dayId": 1,
                "title": "Sunset walk",
                "timeSlot": "evening",
                "startTime": "18:30",
                "endTime": "20:00",
                "location": "Alfama",
                "cost": 0,
            },
        },
    )

    day_id: int = Field(..., alias="dayId")
    title: ActivityTitle
    description: str | None = None
    time_slot: TimeSlot = Field(..., alias="timeSlot")
    start_time: ClockTime = Field(..., alias="startTime")
    end_time: ClockTime = Field(..., alias="endTime")
    location: str | None = Field(default=None, max_length=200)
    category: str | None = Field(default=None, max_length=50)
    cost: Budget = 0.0
    reservation_required: bool = Field(default=False, alias="reservationRequired")
    accessibility: str | None = Field(default=None, max_length=200)
    notes: str | None = None

    @field_validator("end_time")
    @classmethod
    def end_not_before_start(cls, value: str, info: ValidationInfo) -> str:
        check_time_range(info.data.get("start_time"), value)
        return value


class ActivityUpdate(BaseModel):
    """Partial activity update; an activity cannot be moved to another day."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: ActivityTitle | None = None
    description: str | None = None
    time_slot: TimeSlot | None = Field(default=None, alias="timeSlot")
    start_time: ClockTime | None = Field(default=None, alias="startTime")
    end_time: ClockTime | None = Field(default=None, alias="endTime")
    location: str | None = Field(default=None, max_length=200)
    category: str | None = Field(default=None, max_length=50)
    cost: Budget | None = None
    reservation_required: bool | None = Field(default=None, alias="reservationRequired")
    accessibility: str | None = Field(default=None, max_length=200)
    notes: str | None = None


class ActivityListResponse(BaseModel):
    activities: list[ActivityResponse]
