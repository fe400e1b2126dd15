"""Traveler profile repository; profiles are seeded and read-only at runtime."""

from sqlalchemy import select

from app.models.profile import TravelerProfileDB
from app.repositories.base import BaseRepository


class ProfileRepository(BaseRepository[TravelerProfileDB]):
    model = TravelerProfileDB

    async def list_all(self) -> list[TravelerProfileDB]:
        """Return every traveler profile ordered by name."""
        result = await self.session.execute(
            select(TravelerProfileDB).order_by(TravelerProfileDB.name),  # type: ignore[arg-type]
        )
        return list(result.scalars().all())
