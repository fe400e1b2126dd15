"""Activity repository; ownership is resolved through the activity's day and trip."""

from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from app.models.trip import ActivityDB, ItineraryDayDB, TripDB
from app.repositories.base import BaseRepository

_DAY_IN_TRIP = cast(ColumnElement[bool], TripDB.id == ItineraryDayDB.trip_id)


class ActivityRepository(BaseRepository[ActivityDB]):
    """
    Repository for itinerary activities.

    Activities carry no user column; a user owns an activity when they own
    the trip its day belongs to.
    """

    model = ActivityDB

    async def get_owned_day(self, day_id: int, user_id: int) -> ItineraryDayDB | None:
        """Get an itinerary day only when its trip belongs to ``user_id``."""
        result = await self.session.execute(
            select(ItineraryDayDB)
            .join(TripDB, _DAY_IN_TRIP)
            .where(
                cast(ColumnElement[bool], ItineraryDayDB.id == day_id),
                cast(ColumnElement[bool], TripDB.user_id == user_id),
            ),
        )
        return result.scalar_one_or_none()

    async def get_owned(self, record_id: int, user_id: int) -> ActivityDB | None:
        result = await self.session.execute(
            select(ActivityDB)
            .join(ItineraryDayDB, cast(ColumnElement[bool], ItineraryDayDB.id == ActivityDB.day_id))
            .join(TripDB, _DAY_IN_TRIP)
            .where(
                cast(ColumnElement[bool], ActivityDB.id == record_id),
                cast(ColumnElement[bool], TripDB.user_id == user_id),
            ),
        )
        return result.scalar_one_or_none()

    async def list_for_day(self, day_id: int) -> list[ActivityDB]:
        """Return a day's activities ordered by start time."""
        result = await self.session.execute(
            select(ActivityDB)
            .where(cast(ColumnElement[bool], ActivityDB.day_id == day_id))
            .order_by(ActivityDB.start_time, ActivityDB.id),  # type: ignore[arg-type]
        )
        return list(result.scalars().all())

    async def create(self, day_id: int, **fields: Any) -> ActivityDB:
        return await self._add_and_refresh(ActivityDB(day_id=day_id, **fields))
