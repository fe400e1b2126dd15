from app.models.persona import UserPersonaDB
from app.models.profile import TravelerProfileDB
from app.models.trip import ActivityDB, ItineraryDayDB, TripDB
from app.models.user import UserDB

__all__ = [
    "ActivityDB",
    "ItineraryDayDB",
    "TravelerProfileDB",
    "TripDB",
    "UserDB",
    "UserPersonaDB",
]
