from app.schemas.ai.generation import AiActivity, AiDay, AiItinerary
from app.schemas.ai.trip_plan import (
    GenerateTripRequest,
    GenerateTripResponse,
    PreviewRequest,
    PreviewResponse,
    RegenerateRequest,
    SuggestionsResponse,
    TravelerProfileInput,
    TripParameters,
    TripPlanActivity,
    TripPlanDay,
    TripPlanRequest,
    TripPlanResponse,
    extract_budget_amount,
)

__all__ = [
    "AiActivity",
    "AiDay",
    "AiItinerary",
    "GenerateTripRequest",
    "GenerateTripResponse",
    "PreviewRequest",
    "PreviewResponse",
    "RegenerateRequest",
    "SuggestionsResponse",
    "TravelerProfileInput",
    "TripParameters",
    "TripPlanActivity",
    "TripPlanDay",
    "TripPlanRequest",
    "TripPlanResponse",
    "extract_budget_amount",
]
