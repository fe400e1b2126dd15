"""Persona service."""

from logging import getLogger
from typing import Any

from app.configs import file_logger
from app.errors import RecordNotFoundError, ValidationError
from app.models import UserPersonaDB
from app.repositories import PersonaRepository, ProfileRepository
from app.schemas.persona import (
    PersonaListResponse,
    PersonaMutationResponse,
    PersonaResponse,
    PersonaUpdate,
    PersonaUpsert,
)

logger = file_logger(getLogger(__name__))

PERSONA_NOT_FOUND = "Persona not found"
_BLOCKS = (
    "personal_preferences",
    "constraints",
    "budget_details",
    "accessibility_needs",
    "group_dynamics",
)


def _columns(payload: PersonaUpsert | PersonaUpdate, *, only_set: bool) -> dict[str, Any]:
    """Dump a payload to column values, blocks as snake_case JSON objects."""
    columns: dict[str, Any] = {}
    fields = payload.model_fields_set if only_set else {"base_profile_id", *_BLOCKS}
    for name in fields:
        value = getattr(payload, name)
        if name in _BLOCKS and value is not None:
            value = value.model_dump(mode="json")
        columns[name] = value
    return columns


class PersonaService:
    """One persona per user, layered over a base traveler profile."""

    def __init__(self, persona_repo: PersonaRepository, profile_repo: ProfileRepository) -> None:
        self.persona_repo = persona_repo
        self.profile_repo = profile_repo

    async def _profile_name(self, profile_id: int) -> str:
        profile = await self.profile_repo.get_by_id(profile_id)
        if profile is None:
            raise ValidationError.for_field(
                "baseProfileId",
                f"Traveler profile {profile_id} does not exist",
            )
        return profile.name

    async def _get_owned(self, persona_id: int, user_id: int) -> UserPersonaDB:
        persona = await self.persona_repo.get_owned(persona_id, user_id)
        if persona is None:
            raise RecordNotFoundError(detail=PERSONA_NOT_FOUND)
        return persona

    @staticmethod
    def _response(persona: UserPersonaDB, profile_name: str | None) -> PersonaResponse:
        return PersonaResponse.model_validate(persona).model_copy(
            update={"base_profile_name": profile_name},
        )

    async def upsert(
        self,
        user_id: int,
        payload: PersonaUpsert,
    ) -> tuple[PersonaMutationResponse, bool]:
        """
        Create the caller's persona, or replace every block of the existing one.

        Args:
            user_id: Authenticated owner
            payload: Validated persona blocks

        Returns:
            tuple[PersonaMutationResponse, bool]: The response and whether it was created

        Raises:
            ValidationError: If ``baseProfileId`` does not resolve
        """
        profile_name = await self._profile_name(payload.base_profile_id)
        persona, created = await self.persona_repo.upsert(
            user_id,
            _columns(payload, only_set=False),
        )
        await self.persona_repo.session.commit()

        action = "created" if created else "updated"
        logger.info(f"Persona {persona.id} {action} for user {user_id}")
        return (
            PersonaMutationResponse(
                message=f"Persona {action} successfully",
                persona=self._response(persona, profile_name),
            ),
            created,
        )

    async def list_personas(self, user_id: int) -> PersonaListResponse:
        rows = await self.persona_repo.list_for_user(user_id)
        return PersonaListResponse(
            personas=[self._response(persona, name) for persona, name in rows],
        )

    async def get_persona(self, persona_id: int, user_id: int) -> PersonaResponse:
        persona = await self._get_owned(persona_id, user_id)
        profile = await self.profile_repo.get_by_id(persona.base_profile_id)
        return self._response(persona, profile.name if profile else None)

    async def update_persona(
        self,
        persona_id: int,
        user_id: int,
        payload: PersonaUpdate,
    ) -> PersonaMutationResponse:
        """
        Replace only the blocks present in ``payload``.

        Raises:
            RecordNotFoundError: If the persona is missing or not the caller's
            ValidationError: If a new ``baseProfileId`` does not resolve
        """
        persona = await self._get_owned(persona_id, user_id)
        changes = _columns(payload, only_set=True)
        if changes.get("personal_preferences", ...) is None:
            raise ValidationError.for_field(
                "personalPreferences",
                "personalPreferences cannot be null",
            )
        if changes.get("base_profile_id", ...) is None:
            raise ValidationError.for_field("baseProfileId", "baseProfileId cannot be null")

        profile_name = await self._profile_name(
            changes.get("base_profile_id", persona.base_profile_id),
        )
        persona = await self.persona_repo.apply_changes(persona, changes)
        await self.persona_repo.session.commit()
        return PersonaMutationResponse(
            message="Persona updated successfully",
            persona=self._response(persona, profile_name),
        )
