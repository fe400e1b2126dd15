from app.routes.activities import router as activities_router
from app.routes.ai import router as ai_router
from app.routes.auth import router as auth_router
from app.routes.personas import router as personas_router
from app.routes.profiles import router as profiles_router
from app.routes.testing import router as testing_router
from app.routes.trips import router as trips_router

__all__ = [
    "activities_router",
    "ai_router",
    "auth_router",
    "personas_router",
    "profiles_router",
    "testing_router",
    "trips_router",
]
