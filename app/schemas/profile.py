from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class ProfileResponse(BaseModel):
    """A seeded traveler profile."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    preferences: dict[str, Any] = {}
    constraints: dict[str, Any] = {}
    created_at: datetime | None = None


class ProfileListResponse(BaseModel):
    profiles: list[ProfileResponse]
