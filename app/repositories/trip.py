"""Trip repository: trips together with their itinerary days and activities."""

from datetime import date
from typing import Any, cast

from sqlalchemy import delete, func, select
from sqlalchemy.sql.expression import ColumnElement

from app.models.profile import TravelerProfileDB
from app.models.trip import ActivityDB, ItineraryDayDB, TripDB
from app.repositories.base import BaseRepository
from app.schemas.itinerary import PlannedDay


class TripRepository(BaseRepository[TripDB]):
    """
    Repository for trips.

    Nothing here commits: the service decides when a unit of work is done,
    so a trip and its itinerary are written or discarded together.
    """

    model = TripDB
    owner_field = "user_id"

    async def create(self, user_id: int, **fields: Any) -> TripDB:
        """
        Insert a trip row owned by ``user_id``.

        Args:
            user_id: Owner of the trip
            **fields: Column values for the trip

        Returns:
            TripDB: The flushed trip with its id assigned
        """
        return await self._add_and_refresh(TripDB(user_id=user_id, **fields))

    async def list_for_user(
        self,
        user_id: int,
        *,
        destination: str | None = None,
        starts_after: date | None = None,
    ) -> list[tuple[TripDB, str | None]]:
        """
        List a user's trips, each paired with its profile name.

        Trips come newest first; with ``starts_after`` they come soonest first.

        Args:
            user_id: Owner of the trips
            destination: Keep trips whose destination contains this text, ignoring case
            starts_after: Keep trips starting strictly after this date

        Returns:
            list[tuple[TripDB, str | None]]: Trips and their profile names
        """
        statement = (
            select(TripDB, TravelerProfileDB.name)
            .outerjoin(
                TravelerProfileDB,
                cast(ColumnElement[bool], TravelerProfileDB.id == TripDB.traveler_profile_id),
            )
            .where(cast(ColumnElement[bool], TripDB.user_id == user_id))
        )
        if destination:
            statement = statement.where(
                func.lower(TripDB.destination).contains(destination.lower(), autoescape=True),
            )
        if starts_after is not None:
            statement = statement.where(
                cast(ColumnElement[bool], TripDB.start_date > starts_after),
            ).order_by(TripDB.start_date, TripDB.id)  # type: ignore[arg-type]
        else:
            statement = statement.order_by(
                TripDB.created_at.desc(),  # type: ignore[union-attr]
                TripDB.id.desc(),  # type: ignore[union-attr]
            )
        result = await self.session.execute(statement)
        return [(trip, name) for trip, name in result.all()]

    async def add_itinerary(self, trip_id: int, days: list[PlannedDay]) -> None:
        """
        Insert generated days and their activities for a trip.

        Args:
            trip_id: Trip the days belong to
            days: Planned days, numbered from 1
        """
        for day in days:
            day_row = ItineraryDayDB(
                trip_id=trip_id,
                day_number=day.day_number,
                date=day.date,
                theme=day.theme,
            )
            await self._add_and_refresh(day_row)
            self.session.add_all(
                [
                    ActivityDB(
                        day_id=cast(int, day_row.id),
                        title=activity.title,
                        description=activity.description,
                        time_slot=activity.time_slot,
                        start_time=activity.start_time,
                        end_time=activity.end_time,
                        location=activity.location,
                        category=activity.category,
                        cost=activity.cost,
                        reservation_required=activity.reservation_required,
                        accessibility=activity.accessibility,
                        notes=activity.tips,
                    )
                    for activity in day.activities
                ],
            )
        await self.session.flush()

    async def get_itinerary(
        self,
        trip_id: int,
    ) -> list[tuple[ItineraryDayDB, list[ActivityDB]]]:
        """
        Load a trip's days ordered by day number, activities ordered by start time.

        Args:
            trip_id: Trip to load

        Returns:
            list[tuple[ItineraryDayDB, list[ActivityDB]]]: Days with their activities
        """
        days_result = await self.session.execute(
            select(ItineraryDayDB)
            .where(cast(ColumnElement[bool], ItineraryDayDB.trip_id == trip_id))
            .order_by(ItineraryDayDB.day_number),  # type: ignore[arg-type]
        )
        days = list(days_result.scalars().all())
        if not days:
            return []

        activities_result = await self.session.execute(
            select(ActivityDB)
            .where(ActivityDB.day_id.in_([day.id for day in days]))  # type: ignore[attr-defined]
            .order_by(ActivityDB.start_time, ActivityDB.id),  # type: ignore[arg-type]
        )
        by_day: dict[int, list[ActivityDB]] = {cast(int, day.id): [] for day in days}
        for activity in activities_result.scalars().all():
            by_day[activity.day_id].append(activity)

        return [(day, by_day[cast(int, day.id)]) for day in days]

    async def replace_itinerary(self, trip_id: int, days: list[PlannedDay]) -> None:
        """Drop a trip's days (activities cascade) and insert new ones."""
        day_ids = select(ItineraryDayDB.id).where(  # type: ignore[call-overload]
            cast(ColumnElement[bool], ItineraryDayDB.trip_id == trip_id),
        )
        await self.session.execute(
            delete(ActivityDB).where(ActivityDB.day_id.in_(day_ids)),  # type: ignore[attr-defined]
        )
        await self.session.execute(
            delete(ItineraryDayDB).where(
                cast(ColumnElement[bool], ItineraryDayDB.trip_id == trip_id),
            ),
        )
        await self.session.flush()
        await self.add_itinerary(trip_id, days)

    async def delete(self, trip: TripDB) -> None:
        """Delete a trip together with its days and activities."""
        await self.replace_itinerary(cast(int, trip.id), [])
        await super().delete(trip)
