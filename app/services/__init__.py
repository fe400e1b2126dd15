from app.services.activity import ActivityService
from app.services.auth import AuthService
from app.services.itinerary import (
    GeminiItineraryGenerator,
    ItineraryGenerator,
    TemplateItineraryGenerator,
    resolve_persona_type,
    run_generator,
)
from app.services.persona import PersonaService
from app.services.seed import SeedService
from app.services.trip import TripService, build_itinerary_request
from app.services.trip_plan import build_suggestions, plan_trip, suggestions_for_user

__all__ = [
    "ActivityService",
    "AuthService",
    "GeminiItineraryGenerator",
    "ItineraryGenerator",
    "PersonaService",
    "SeedService",
    "TemplateItineraryGenerator",
    "TripService",
    "build_itinerary_request",
    "build_suggestions",
    "plan_trip",
    "resolve_persona_type",
    "run_generator",
    "suggestions_for_user",
]
