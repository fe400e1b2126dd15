"""Repository layer for database operations."""

from app.repositories.activity import ActivityRepository
from app.repositories.base import BaseRepository
from app.repositories.persona import PersonaRepository
from app.repositories.profile import ProfileRepository
from app.repositories.trip import TripRepository
from app.repositories.user import UserRepository

__all__ = [
    "ActivityRepository",
    "BaseRepository",
    "PersonaRepository",
    "ProfileRepository",
    "TripRepository",
    "UserRepository",
]
