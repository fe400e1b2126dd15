"""Activity service: hand edits to a stored itinerary."""

from logging import getLogger

from app.configs import file_logger
from app.errors import RecordNotFoundError, ValidationError
from app.models import ActivityDB
from app.repositories import ActivityRepository
from app.schemas.activity import ActivityCreate, ActivityListResponse, ActivityUpdate, check_time_range
from app.schemas.trip import ActivityResponse, MessageResponse

logger = file_logger(getLogger(__name__))

ACTIVITY_NOT_FOUND = "Activity not found"
DAY_NOT_FOUND = "Itinerary day not found"

# Columns that cannot be cleared once set
_REQUIRED = frozenset({"title", "time_slot", "start_time", "end_time", "cost", "reservation_required"})


class ActivityService:
    """
    Service for itinerary activities.

    Every operation checks that the caller owns the trip behind the activity's
    day; anything else is reported as not found.
    """

    def __init__(self, activity_repo: ActivityRepository) -> None:
        self.activity_repo = activity_repo

    async def _get_owned(self, activity_id: int, user_id: int) -> ActivityDB:
        activity = await self.activity_repo.get_owned(activity_id, user_id)
        if activity is None:
            raise RecordNotFoundError(detail=ACTIVITY_NOT_FOUND)
        return activity

    async def list_for_day(self, day_id: int, user_id: int) -> ActivityListResponse:
        if await self.activity_repo.get_owned_day(day_id, user_id) is None:
            raise RecordNotFoundError(detail=DAY_NOT_FOUND)
        activities = await self.activity_repo.list_for_day(day_id)
        return ActivityListResponse(
            activities=[ActivityResponse.model_validate(activity) for activity in activities],
        )

    async def create(self, user_id: int, payload: ActivityCreate) -> ActivityResponse:
        """
        Add an activity to one of the caller's itinerary days.

        Raises:
            RecordNotFoundError: If the day is missing or belongs to another user
        """
        if await self.activity_repo.get_owned_day(payload.day_id, user_id) is None:
            raise RecordNotFoundError(detail=DAY_NOT_FOUND)

        activity = await self.activity_repo.create(**payload.model_dump())
        await self.activity_repo.session.commit()
        logger.info(f"Activity {activity.id} added to day {payload.day_id} by user {user_id}")
        return ActivityResponse.model_validate(activity)

    async def update(
        self,
        activity_id: int,
        user_id: int,
        payload: ActivityUpdate,
    ) -> ActivityResponse:
        """
        Apply a partial update to one of the caller's activities.

        Raises:
            RecordNotFoundError: If the activity is missing or not the caller's
            ValidationError: If a required field is cleared or the times end up reversed
        """
        activity = await self._get_owned(activity_id, user_id)
        changes = payload.model_dump(exclude_unset=True)

        if cleared := sorted(name for name in _REQUIRED if name in changes and changes[name] is None):
            field = ActivityUpdate.model_fields[cleared[0]].alias or cleared[0]
            raise ValidationError.for_field(field, f"{field} cannot be null")

        try:
            check_time_range(
                changes.get("start_time", activity.start_time),
                changes.get("end_time", activity.end_time),
            )
        except ValueError as e:
            raise ValidationError.for_field("endTime", str(e)) from e

        activity = await self.activity_repo.apply_changes(activity, changes)
        await self.activity_repo.session.commit()
        return ActivityResponse.model_validate(activity)

    async def delete(self, activity_id: int, user_id: int) -> MessageResponse:
        activity = await self._get_owned(activity_id, user_id)
        await self.activity_repo.delete(activity)
        await self.activity_repo.session.commit()
        logger.info(f"Activity {activity_id} deleted by user {user_id}")
        return MessageResponse(message="Activity deleted successfully")
