# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    ActivityServiceDep,
    AiDep,
    AuthServiceDep,
    GeneratorDep,
    PersonaRepoDep,
    PersonaServiceDep,
    ProfileRepoDep,
    SeedServiceDep,
    SessionDep,
    TripRepoDep,
    TripServiceDep,
    UserDBDep,
    UserRepoDep,
    extract_bearer_token,
    get_current_user,
    get_itinerary_generator,
    require_test_endpoints,
)

__all__ = [
    "ActivityServiceDep",
    "AiDep",
    "AuthServiceDep",
    "GeneratorDep",
    "PersonaRepoDep",
    "PersonaServiceDep",
    "ProfileRepoDep",
    "SeedServiceDep",
    "SessionDep",
    "TripRepoDep",
    "TripServiceDep",
    "UserDBDep",
    "UserRepoDep",
    "extract_bearer_token",
    "get_current_user",
    "get_itinerary_generator",
    "require_test_endpoints",
]
