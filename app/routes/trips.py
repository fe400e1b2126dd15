"""Trip routes; every endpoint requires a bearer token."""

from typing import Annotated, cast

from fastapi import APIRouter, Query
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.configs.settings import MAX_DESTINATION_LENGTH
from app.dependencies import TripServiceDep, UserDBDep
from app.schemas.trip import MessageResponse, TripCreate, TripDetail, TripListResponse, TripUpdate

router = APIRouter(prefix="/api/trips", tags=["🧳 Trips"])

_AUTH_ERRORS: dict[int | str, dict] = {
    401: {
        "description": "Unauthorized",
        "content": {"application/json": {"example": {"detail": "Access token required"}}},
    },
    403: {
        "description": "Forbidden",
        "content": {"application/json": {"example": {"detail": "Invalid or expired token"}}},
    },
}
_NOT_FOUND: dict[int | str, dict] = {
    404: {
        "description": "Not Found",
        "content": {"application/json": {"example": {"detail": "Trip not found"}}},
    },
}
_VALIDATION: dict[int | str, dict] = {
    400: {
        "description": "Bad Request",
        "content": {
            "application/json": {
                "example": {
                    "detail": "Validation failed",
                    "errors": [
                        {
                            "field": "numberOfTravelers",
                            "message": "Input should be greater than 0",
                            "type": "greater_than",
                        },
                    ],
                },
            },
        },
    },
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=TripListResponse,
    summary="List my trips",
    responses=_AUTH_ERRORS,
    operation_id="trips_list",
)
async def list_trips(user: UserDBDep, trip_service: TripServiceDep) -> TripListResponse:
    """
    List the caller's trips, newest first.

    Parameters
    ----------
    user : UserDB
        Authenticated user.
    trip_service : TripService
        Trip service dependency.

    Returns
    -------
    TripListResponse
        Trips with their traveler profile names.
    """
    return await trip_service.list_trips(cast(int, user.id))


@router.get(
    "/search",
    response_class=ORJSONResponse,
    response_model=TripListResponse,
    summary="Search my trips by destination",
    responses={**_VALIDATION, **_AUTH_ERRORS},
    operation_id="trips_search",
)
async def search_trips(
    destination: Annotated[str, Query(min_length=1, max_length=MAX_DESTINATION_LENGTH)],
    user: UserDBDep,
    trip_service: TripServiceDep,
) -> TripListResponse:
    """
    Find the caller's trips whose destination contains a text, ignoring case.

    Parameters
    ----------
    destination : str
        Text to look for, e.g. ``par`` matches "Paris".
    user : UserDB
        Authenticated user.
    trip_service : TripService
        Trip service dependency.

    Returns
    -------
    TripListResponse
        Matching trips, newest first.
    """
    return await trip_service.search_trips(cast(int, user.id), destination)


@router.get(
    "/upcoming",
    response_class=ORJSONResponse,
    response_model=TripListResponse,
    summary="List my upcoming trips",
    responses=_AUTH_ERRORS,
    operation_id="trips_upcoming",
)
async def upcoming_trips(user: UserDBDep, trip_service: TripServiceDep) -> TripListResponse:
    """Trips starting after today, soonest first."""
    return await trip_service.upcoming_trips(cast(int, user.id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=TripDetail,
    status_code=HTTP_201_CREATED,
    summary="Create a trip",
    description="Create a trip and generate its day-by-day itinerary in one transaction.",
    responses={
        **_VALIDATION,
        **_AUTH_ERRORS,
        500: {
            "description": "Internal Server Error",
            "content": {
                "application/json": {"example": {"detail": "Failed to generate itinerary"}},
            },
        },
    },
    operation_id="trips_create",
)
async def create_trip(
    user: UserDBDep,
    payload: TripCreate,
    trip_service: TripServiceDep,
) -> TripDetail:
    """
    Create a trip with a generated itinerary.

    Parameters
    ----------
    user : UserDB
        Authenticated user; resolved before the body is validated.
    payload : TripCreate
        Trip fields.
    trip_service : TripService
        Trip service dependency.

    Returns
    -------
    TripDetail
        The stored trip with its itinerary.

    Raises
    ------
    ValidationError
        If the profile or persona does not resolve.
    ItineraryGenerationError
        If no itinerary could be generated; nothing is stored.

    Examples
    --------
    Request
        POST /api/trips
        {"title": "T", "destination": "Paris", "startDate": "2025-12-01",
         "endDate": "2025-12-05", "travelerProfileId": 1, "numberOfTravelers": 2,
         "budget": 1500}
    Response
        201 Created
        {"id": 1, "user_id": 1, "title": "T", ..., "itinerary": [ ... ]}
    """
    return await trip_service.create_trip(cast(int, user.id), payload)


@router.get(
    "/{trip_id}",
    response_class=ORJSONResponse,
    response_model=TripDetail,
    summary="Get a trip",
    responses={**_AUTH_ERRORS, **_NOT_FOUND},
    operation_id="trips_get",
)
async def get_trip(trip_id: int, user: UserDBDep, trip_service: TripServiceDep) -> TripDetail:
    """Return one of the caller's trips with its itinerary."""
    return await trip_service.get_trip(trip_id, cast(int, user.id))


@router.put(
    "/{trip_id}",
    response_class=ORJSONResponse,
    response_model=TripDetail,
    summary="Update a trip",
    description="Partial update; the existing itinerary is kept.",
    responses={**_VALIDATION, **_AUTH_ERRORS, **_NOT_FOUND},
    operation_id="trips_update",
)
async def update_trip(
    trip_id: int,
    user: UserDBDep,
    payload: TripUpdate,
    trip_service: TripServiceDep,
) -> TripDetail:
    """
    Update one of the caller's trips.

    Parameters
    ----------
    trip_id : int
        Trip to update.
    user : UserDB
        Authenticated user.
    payload : TripUpdate
        Fields to change.
    trip_service : TripService
        Trip service dependency.

    Returns
    -------
    TripDetail
        The updated trip.
    """
    return await trip_service.update_trip(trip_id, cast(int, user.id), payload)


@router.delete(
    "/{trip_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete a trip",
    responses={
        200: {
            "content": {
                "application/json": {"example": {"message": "Trip deleted successfully"}},
            },
        },
        **_AUTH_ERRORS,
        **_NOT_FOUND,
    },
    operation_id="trips_delete",
)
async def delete_trip(
    trip_id: int,
    user: UserDBDep,
    trip_service: TripServiceDep,
) -> MessageResponse:
    """Delete one of the caller's trips with its days and activities."""
    return await trip_service.delete_trip(trip_id, cast(int, user.id))
