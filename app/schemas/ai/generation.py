"""Structured output requested from Gemini when it plans an itinerary."""

from pydantic import BaseModel, Field


class AiActivity(BaseModel):
    title: str = Field(..., description="Short activity name")
    description: str
    time_slot: str = Field(..., description="One of: morning, afternoon, evening")
    start_time: str = Field(..., description="24h clock time, HH:MM")
    end_time: str = Field(..., description="24h clock time, HH:MM")
    location: str
    category: str = Field(..., description="e.g. cultural, dining, adventure, family")
    estimated_cost: float = Field(..., description="Total cost for the whole group in USD")
    reservation_required: bool = False
    tips: str | None = None


class AiDay(BaseModel):
    day_number: int = Field(..., description="1-based day index")
    theme: str
    activities: list[AiActivity]


class AiItinerary(BaseModel):
    days: list[AiDay]
