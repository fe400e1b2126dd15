"""User database model using SQLModel."""

from datetime import datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from app.utils.helpers import utc_now


class UserDB(SQLModel, table=True):
    """
    User database model.

    Owns trips and at most one persona; deleting a user removes both.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: int | None = Field(default=None, primary_key=True, description="User ID")

    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique, lower case)",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Argon2 password hash",
    )
    first_name: str | None = Field(
        default=None,
        sa_column=Column(String(100)),
        description="User first name",
    )
    last_name: str | None = Field(
        default=None,
        sa_column=Column(String(100)),
        description="User last name",
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Account creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "email": "ada@example.com",
                "first_name": "Ada",
                "last_name": "Lovelace",
                "created_at": "2025-01-01T00:00:00Z",
            },
        },
    )
