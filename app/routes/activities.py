"""Activity routes for editing a stored itinerary; every endpoint requires a bearer token."""

from typing import cast

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.dependencies import ActivityServiceDep, UserDBDep
from app.schemas.activity import ActivityCreate, ActivityListResponse, ActivityUpdate
from app.schemas.trip import ActivityResponse, MessageResponse

router = APIRouter(prefix="/api/activities", tags=["📍 Activities"])

_ACTIVITY_NOT_FOUND: dict[int | str, dict] = {
    404: {
        "description": "Not Found",
        "content": {"application/json": {"example": {"detail": "Activity not found"}}},
    },
}
_DAY_NOT_FOUND: dict[int | str, dict] = {
    404: {
        "description": "Not Found",
        "content": {"application/json": {"example": {"detail": "Itinerary day not found"}}},
    },
}


@router.get(
    "/day/{day_id}",
    response_class=ORJSONResponse,
    response_model=ActivityListResponse,
    summary="List a day's activities",
    responses=_DAY_NOT_FOUND,
    operation_id="activities_by_day",
)
async def list_day_activities(
    day_id: int,
    user: UserDBDep,
    activity_service: ActivityServiceDep,
) -> ActivityListResponse:
    """Return the activities of one of the caller's itinerary days, by start time."""
    return await activity_service.list_for_day(day_id, cast(int, user.id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=ActivityResponse,
    status_code=HTTP_201_CREATED,
    summary="Add an activity",
    responses=_DAY_NOT_FOUND,
    operation_id="activities_create",
)
async def create_activity(
    user: UserDBDep,
    payload: ActivityCreate,
    activity_service: ActivityServiceDep,
) -> ActivityResponse:
    """
    Add an activity to an itinerary day.

    Parameters
    ----------
    user : UserDB
        Authenticated user; must own the trip the day belongs to.
    payload : ActivityCreate
        Activity fields including ``dayId``.
    activity_service : ActivityService
        Activity service dependency.

    Returns
    -------
    ActivityResponse
        The stored activity.

    Raises
    ------
    RecordNotFoundError
        If the day is missing or belongs to another user's trip.
    """
    return await activity_service.create(cast(int, user.id), payload)


@router.put(
    "/{activity_id}",
    response_class=ORJSONResponse,
    response_model=ActivityResponse,
    summary="Update an activity",
    responses=_ACTIVITY_NOT_FOUND,
    operation_id="activities_update",
)
async def update_activity(
    activity_id: int,
    user: UserDBDep,
    payload: ActivityUpdate,
    activity_service: ActivityServiceDep,
) -> ActivityResponse:
    """
    Change some fields of an activity.

    Parameters
    ----------
    activity_id : int
        Activity to update.
    user : UserDB
        Authenticated user.
    payload : ActivityUpdate
        Fields to change; omitted fields keep their value.
    activity_service : ActivityService
        Activity service dependency.

    Returns
    -------
    ActivityResponse
        The updated activity.
    """
    return await activity_service.update(activity_id, cast(int, user.id), payload)


@router.delete(
    "/{activity_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete an activity",
    responses={
        200: {
            "content": {
                "application/json": {"example": {"message": "Activity deleted successfully"}},
            },
        },
        **_ACTIVITY_NOT_FOUND,
    },
    operation_id="activities_delete",
)
async def delete_activity(
    activity_id: int,
    user: UserDBDep,
    activity_service: ActivityServiceDep,
) -> MessageResponse:
    return await activity_service.delete(activity_id, cast(int, user.id))
