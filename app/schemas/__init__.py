from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, TokenData
from app.schemas.itinerary import (
    GeneratedItinerary,
    ItineraryRequest,
    PlannedActivity,
    PlannedDay,
)
from app.schemas.persona import (
    AccessibilityNeeds,
    BudgetDetails,
    GroupDynamics,
    PersonalPreferences,
    PersonaListResponse,
    PersonaMutationResponse,
    PersonaResponse,
    PersonaUpdate,
    PersonaUpsert,
    TravelConstraints,
)
from app.schemas.profile import ProfileListResponse, ProfileResponse
from app.schemas.system import HealthCheckResponse
from app.schemas.trip import (
    ActivityResponse,
    ItineraryDayResponse,
    MessageResponse,
    TripCreate,
    TripDetail,
    TripListResponse,
    TripSummary,
    TripUpdate,
)
from app.schemas.user import UserResponse

__all__ = [
    "AccessibilityNeeds",
    "ActivityResponse",
    "AuthResponse",
    "BudgetDetails",
    "GeneratedItinerary",
    "GroupDynamics",
    "HealthCheckResponse",
    "ItineraryDayResponse",
    "ItineraryRequest",
    "LoginRequest",
    "MessageResponse",
    "PersonaListResponse",
    "PersonaMutationResponse",
    "PersonaResponse",
    "PersonaUpdate",
    "PersonaUpsert",
    "PersonalPreferences",
    "PlannedActivity",
    "PlannedDay",
    "ProfileListResponse",
    "ProfileResponse",
    "RegisterRequest",
    "TokenData",
    "TravelConstraints",
    "TripCreate",
    "TripDetail",
    "TripListResponse",
    "TripSummary",
    "TripUpdate",
    "UserResponse",
]
