"""Traveler profile database model (seed data)."""

from datetime import datetime
from typing import Any, cast

from sqlalchemy import JSON, DateTime, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from app.utils.helpers import utc_now


class TravelerProfileDB(SQLModel, table=True):
    """A system-defined traveler archetype such as "Foodie / Culinary Explorer"."""

    __tablename__ = cast("declared_attr[str]", "traveler_profiles")

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String(100), unique=True, nullable=False))
    description: str | None = Field(default=None, sa_column=Column(Text))
    preferences: dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
    )
    constraints: dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
