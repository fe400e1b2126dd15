"""Persona repository."""

from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from app.models.persona import UserPersonaDB
from app.models.profile import TravelerProfileDB
from app.repositories.base import BaseRepository


class PersonaRepository(BaseRepository[UserPersonaDB]):
    """Repository for user personas; each user has at most one."""

    model = UserPersonaDB
    owner_field = "user_id"

    async def get_by_user(self, user_id: int) -> UserPersonaDB | None:
        return await self.get_by_field("user_id", user_id)

    async def list_for_user(self, user_id: int) -> list[tuple[UserPersonaDB, str | None]]:
        """List a user's personas paired with the name of their base profile."""
        statement = (
            select(UserPersonaDB, TravelerProfileDB.name)
            .outerjoin(
                TravelerProfileDB,
                cast(
                    ColumnElement[bool],
                    TravelerProfileDB.id == UserPersonaDB.base_profile_id,
                ),
            )
            .where(cast(ColumnElement[bool], UserPersonaDB.user_id == user_id))
            .order_by(UserPersonaDB.id)  # type: ignore[arg-type]
        )
        result = await self.session.execute(statement)
        return [(persona, name) for persona, name in result.all()]

    async def upsert(self, user_id: int, columns: dict[str, Any]) -> tuple[UserPersonaDB, bool]:
        """
        Create the user's persona or replace its stored blocks.

        Args:
            user_id: Owner of the persona
            columns: Full set of column values (blocks already dumped to JSON)

        Returns:
            tuple[UserPersonaDB, bool]: The persona and whether it was created
        """
        persona = await self.get_by_user(user_id)
        if persona is None:
            persona = UserPersonaDB(user_id=user_id, **columns)
            return await self._add_and_refresh(persona), True
        return await self.apply_changes(persona, columns), False
