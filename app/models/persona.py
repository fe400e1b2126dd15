"""User persona database model."""

from datetime import datetime
from typing import Any, cast

from sqlalchemy import JSON, DateTime, Integer
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel

from app.utils.helpers import utc_now


class UserPersonaDB(SQLModel, table=True):
    """
    A user's personalised take on a base traveler profile.

    Each block column holds the JSON dump of its pydantic record in
    ``app.schemas.persona``; the repository never writes unvalidated dicts.
    """

    __tablename__ = cast("declared_attr[str]", "user_personas")

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            unique=True,
            nullable=False,
            index=True,
        ),
    )
    base_profile_id: int = Field(
        sa_column=Column(Integer, ForeignKey("traveler_profiles.id"), nullable=False),
    )
    personal_preferences: dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
    )
    constraints: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))
    budget_details: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))
    accessibility_needs: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))
    group_dynamics: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
