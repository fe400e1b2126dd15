"""Trip, itinerary day and activity database models."""

from datetime import date, datetime
from typing import cast

from sqlalchemy import Boolean, DateTime, Float, Integer, Text, UniqueConstraint
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from app.utils.helpers import utc_now


class TripDB(SQLModel, table=True):
    """A planned trip owned by exactly one user."""

    __tablename__ = cast("declared_attr[str]", "trips")

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )
    title: str = Field(sa_column=Column(String(200), nullable=False))
    destination: str = Field(sa_column=Column(String(100), nullable=False))
    start_date: date
    end_date: date
    traveler_profile_id: int | None = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("traveler_profiles.id"), nullable=True),
    )
    persona_id: int | None = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("user_personas.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    number_of_travelers: int = Field(default=1, sa_column=Column(Integer, nullable=False))
    budget: float | None = Field(default=None, sa_column=Column(Float, nullable=True))

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


class ItineraryDayDB(SQLModel, table=True):
    """One calendar day of a trip; ``day_number`` runs 1..N per trip."""

    __tablename__ = cast("declared_attr[str]", "itinerary_days")
    __table_args__ = (UniqueConstraint("trip_id", "day_number", name="uq_trip_day_number"),)

    id: int | None = Field(default=None, primary_key=True)
    trip_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("trips.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )
    day_number: int = Field(sa_column=Column(Integer, nullable=False))
    date: date
    theme: str | None = Field(default=None, sa_column=Column(String(100)))
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


class ActivityDB(SQLModel, table=True):
    """A scheduled activity inside an itinerary day."""

    __tablename__ = cast("declared_attr[str]", "activities")

    id: int | None = Field(default=None, primary_key=True)
    day_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("itinerary_days.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )
    title: str = Field(sa_column=Column(String(200), nullable=False))
    description: str | None = Field(default=None, sa_column=Column(Text))
    time_slot: str = Field(sa_column=Column(String(20), nullable=False))
    start_time: str = Field(sa_column=Column(String(5), nullable=False))
    end_time: str = Field(sa_column=Column(String(5), nullable=False))
    location: str | None = Field(default=None, sa_column=Column(String(200)))
    category: str | None = Field(default=None, sa_column=Column(String(50)))
    cost: float = Field(default=0.0, sa_column=Column(Float, nullable=False))
    reservation_required: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False),
    )
    accessibility: str | None = Field(default=None, sa_column=Column(String(200)))
    notes: str | None = Field(default=None, sa_column=Column(Text))
