# app/dependencies/dependencies.py

"""Application dependencies: bearer authentication, repositories and services."""

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.clients.ai_client import AiClient
from app.configs import settings
from app.db import get_session
from app.errors import InvalidTokenError, MissingTokenError, RecordNotFoundError
from app.managers.token_manager import decode_access_token
from app.models import UserDB
from app.repositories import (
    ActivityRepository,
    PersonaRepository,
    ProfileRepository,
    TripRepository,
    UserRepository,
)
from app.services import (
    ActivityService,
    AuthService,
    GeminiItineraryGenerator,
    ItineraryGenerator,
    PersonaService,
    SeedService,
    TemplateItineraryGenerator,
    TripService,
)

BEARER_PREFIX = "Bearer "

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def extract_bearer_token(
    authorization: Annotated[str | None, Header(include_in_schema=False)] = None,
) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    Parameters
    ----------
    authorization : str | None
        Raw header value.

    Returns
    -------
    str
        The token.

    Raises
    ------
    MissingTokenError
        If the header is absent, lacks the ``Bearer`` prefix or carries no token.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise MissingTokenError
    token = authorization[len(BEARER_PREFIX) :].strip()
    if not token:
        raise MissingTokenError
    return token


async def get_current_user(
    request: Request,
    token: Annotated[str, Depends(extract_bearer_token)],
    session: SessionDep,
) -> UserDB:
    """
    Get current authenticated user using user_id from token claims.

    Parameters
    ----------
    request : Request
        Current request; the user id is stored on ``request.state.user_id``.
    token : str
        Bearer token.
    session : AsyncSession
        Database session.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    InvalidTokenError
        If the token fails validation or its user no longer exists.
    """
    token_data = decode_access_token(token)
    if not token_data:
        raise InvalidTokenError

    user = await UserRepository(session).get_by_id(token_data.user_id)
    if not user:
        raise InvalidTokenError

    request.state.user_id = user.id
    return user


UserDBDep = Annotated[UserDB, Depends(get_current_user)]


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


def get_profile_repository(session: SessionDep) -> ProfileRepository:
    return ProfileRepository(session)


def get_persona_repository(session: SessionDep) -> PersonaRepository:
    return PersonaRepository(session)


def get_trip_repository(session: SessionDep) -> TripRepository:
    return TripRepository(session)


def get_activity_repository(session: SessionDep) -> ActivityRepository:
    return ActivityRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
ProfileRepoDep = Annotated[ProfileRepository, Depends(get_profile_repository)]
PersonaRepoDep = Annotated[PersonaRepository, Depends(get_persona_repository)]
TripRepoDep = Annotated[TripRepository, Depends(get_trip_repository)]
ActivityRepoDep = Annotated[ActivityRepository, Depends(get_activity_repository)]


def get_ai_client_state(request: Request) -> AiClient | None:
    """Return the Gemini client created at startup, or None when AI is not configured."""
    return getattr(request.app.state, "ai_client", None)


AiDep = Annotated[AiClient | None, Depends(get_ai_client_state)]


def get_itinerary_generator(ai_client: AiDep) -> ItineraryGenerator:
    """
    Resolve the itinerary generator for a request.

    Parameters
    ----------
    ai_client : AiClient | None
        The Gemini client, when one is configured.

    Returns
    -------
    ItineraryGenerator
        Gemini with a template fallback, or templates alone.
    """
    fallback = TemplateItineraryGenerator()
    if ai_client is None:
        return fallback
    return GeminiItineraryGenerator(ai_client, fallback=fallback)


GeneratorDep = Annotated[ItineraryGenerator, Depends(get_itinerary_generator)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


def get_trip_service(
    trip_repo: TripRepoDep,
    profile_repo: ProfileRepoDep,
    persona_repo: PersonaRepoDep,
    generator: GeneratorDep,
) -> TripService:
    return TripService(trip_repo, profile_repo, persona_repo, generator)


def get_persona_service(
    persona_repo: PersonaRepoDep,
    profile_repo: ProfileRepoDep,
) -> PersonaService:
    return PersonaService(persona_repo, profile_repo)


def get_activity_service(activity_repo: ActivityRepoDep) -> ActivityService:
    return ActivityService(activity_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
TripServiceDep = Annotated[TripService, Depends(get_trip_service)]
PersonaServiceDep = Annotated[PersonaService, Depends(get_persona_service)]
ActivityServiceDep = Annotated[ActivityService, Depends(get_activity_service)]


def require_test_endpoints() -> None:
    """Hide the test-support routes unless ``ENABLE_TEST_ENDPOINTS`` is set."""
    if not settings.ENABLE_TEST_ENDPOINTS:
        raise RecordNotFoundError(detail="Not Found")


def get_seed_service(session: SessionDep) -> SeedService:
    return SeedService(session)


SeedServiceDep = Annotated[SeedService, Depends(get_seed_service)]
