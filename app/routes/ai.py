from logging import getLogger
from typing import cast

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.configs import file_logger
from app.dependencies import (
    GeneratorDep,
    PersonaRepoDep,
    ProfileRepoDep,
    TripServiceDep,
    UserDBDep,
)
from app.managers import limiter
from app.schemas.ai.trip_plan import (
    GenerateTripRequest,
    GenerateTripResponse,
    PreviewRequest,
    PreviewResponse,
    RegenerateRequest,
    SuggestionsResponse,
    TripPlanRequest,
    TripPlanResponse,
)
from app.schemas.trip import TripDetail
from app.services.trip_plan import plan_trip, suggestions_for_user

logger = file_logger(getLogger(__name__))

router = APIRouter(prefix="/api/ai", tags=["🤖 AI"])


@router.post(
    "/trip-plan",
    response_class=ORJSONResponse,
    response_model=TripPlanResponse,
    summary="Plan a trip",
    description="Generate a day-by-day plan from a traveler profile and trip parameters.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "destination": "Lisbon",
                        "duration": 3,
                        "startDate": "2025-06-01",
                        "endDate": "2025-06-03",
                        "totalBudget": 1200.0,
                        "travelers": 1,
                        "persona": "Foodie / Culinary Explorer",
                        "dailyItineraries": [
                            {
                                "day": "Day 1",
                                "dayNumber": 1,
                                "date": "2025-06-01",
                                "theme": "Arrival & Orientation",
                                "activities": [
                                    {
                                        "name": "Welcome to Lisbon",
                                        "description": "Settle in and get oriented",
                                        "type": "orientation",
                                        "location": "Lisbon - Hotel/City Center",
                                        "startTime": "09:00",
                                        "endTime": "11:30",
                                        "estimatedCost": 9.6,
                                        "duration": "2h 30m",
                                    },
                                ],
                            },
                        ],
                        "generatedAt": "2025-05-01T10:00:00Z",
                        "aiModel": "Fallback Service (Google AI unavailable)",
                    },
                },
            },
        },
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Missing travelerProfile or tripParameters in request",
                        "success": False,
                        "message": "Missing travelerProfile or tripParameters in request",
                    },
                },
            },
        },
        500: {
            "description": "Internal Server Error",
            "content": {
                "application/json": {"example": {"detail": "Failed to generate itinerary"}},
            },
        },
    },
    operation_id="ai_trip_plan",
)
@limiter.limit("20/minute")
async def trip_plan(
    request: Request,
    payload: TripPlanRequest,
    generator: GeneratorDep,
) -> TripPlanResponse:
    """
    Plan a trip without storing it.

    Parameters
    ----------
    request : Request
        Current request context.
    payload : TripPlanRequest
        ``travelerProfile`` and ``tripParameters``; both are required.
    generator : ItineraryGenerator
        Gemini when configured, templates otherwise.

    Returns
    -------
    TripPlanResponse
        The plan with ``dailyItineraries``.

    Raises
    ------
    TripPlanRequestError
        If either part of the body is missing.
    """
    return await plan_trip(request, payload, generator)


@router.post(
    "/preview",
    response_class=ORJSONResponse,
    response_model=PreviewResponse,
    summary="Preview an itinerary",
    description="Generate an itinerary for the caller, optionally for one of their personas.",
    responses={
        404: {
            "description": "Not Found",
            "content": {"application/json": {"example": {"detail": "Persona not found"}}},
        },
    },
    operation_id="ai_preview",
)
async def preview(
    user: UserDBDep,
    payload: PreviewRequest,
    trip_service: TripServiceDep,
) -> PreviewResponse:
    itinerary = await trip_service.preview(cast(int, user.id), payload)
    return PreviewResponse(itinerary=itinerary)


@router.post(
    "/generate-trip",
    response_class=ORJSONResponse,
    response_model=GenerateTripResponse,
    status_code=HTTP_201_CREATED,
    summary="Generate and save a trip",
    description="Plan a trip for one of the caller's personas and store it with its itinerary.",
    responses={
        404: {
            "description": "Not Found",
            "content": {"application/json": {"example": {"detail": "Persona not found"}}},
        },
        500: {
            "description": "Internal Server Error",
            "content": {
                "application/json": {"example": {"detail": "Failed to generate itinerary"}},
            },
        },
    },
    operation_id="ai_generate_trip",
)
async def generate_trip(
    user: UserDBDep,
    payload: GenerateTripRequest,
    trip_service: TripServiceDep,
) -> GenerateTripResponse:
    """
    Generate an itinerary and save it as a new trip.

    Unlike ``POST /api/trips`` no traveler profile is needed: the trip is
    planned from the persona alone, or from defaults when none is given.

    Parameters
    ----------
    user : UserDB
        Authenticated user.
    payload : GenerateTripRequest
        Title, destination, dates and an optional ``personaId``.
    trip_service : TripService
        Trip service dependency.

    Returns
    -------
    GenerateTripResponse
        The stored trip with its itinerary.

    Raises
    ------
    RecordNotFoundError
        If ``personaId`` is not one of the caller's personas.
    """
    trip = await trip_service.generate_trip(cast(int, user.id), payload)
    return GenerateTripResponse(trip=trip)


@router.post(
    "/regenerate/{trip_id}",
    response_class=ORJSONResponse,
    response_model=TripDetail,
    summary="Regenerate a trip itinerary",
    description="Replace a trip's itinerary, optionally planning for another persona.",
    responses={
        404: {
            "description": "Not Found",
            "content": {"application/json": {"example": {"detail": "Trip not found"}}},
        },
    },
    operation_id="ai_regenerate",
)
async def regenerate(
    trip_id: int,
    user: UserDBDep,
    trip_service: TripServiceDep,
    payload: RegenerateRequest | None = None,
) -> TripDetail:
    """
    Regenerate the itinerary of one of the caller's trips.

    Parameters
    ----------
    trip_id : int
        Trip to regenerate.
    user : UserDB
        Authenticated user.
    trip_service : TripService
        Trip service dependency.
    payload : RegenerateRequest | None
        Optional ``personaId``.

    Returns
    -------
    TripDetail
        The trip with its new itinerary.
    """
    persona_id = payload.persona_id if payload else None
    return await trip_service.regenerate(trip_id, cast(int, user.id), persona_id)


@router.get(
    "/suggestions/{destination}",
    response_class=ORJSONResponse,
    response_model=SuggestionsResponse,
    summary="Activity suggestions",
    description="Activities, a daily budget estimate and tips matched to the caller's persona.",
    operation_id="ai_suggestions",
)
async def suggestions(
    destination: str,
    user: UserDBDep,
    persona_repo: PersonaRepoDep,
    profile_repo: ProfileRepoDep,
) -> SuggestionsResponse:
    return await suggestions_for_user(destination, cast(int, user.id), persona_repo, profile_repo)
