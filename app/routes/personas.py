"""Persona routes; a user owns at most one persona."""

from typing import cast

from fastapi import APIRouter, Response
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_200_OK, HTTP_201_CREATED

from app.dependencies import PersonaServiceDep, UserDBDep
from app.schemas.persona import (
    PersonaListResponse,
    PersonaMutationResponse,
    PersonaResponse,
    PersonaUpdate,
    PersonaUpsert,
)

router = APIRouter(prefix="/api/personas", tags=["🧑 Personas"])

_NOT_FOUND: dict[int | str, dict] = {
    404: {
        "description": "Not Found",
        "content": {"application/json": {"example": {"detail": "Persona not found"}}},
    },
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=PersonaListResponse,
    summary="List my personas",
    operation_id="personas_list",
)
async def list_personas(user: UserDBDep, persona_service: PersonaServiceDep) -> PersonaListResponse:
    return await persona_service.list_personas(cast(int, user.id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=PersonaMutationResponse,
    status_code=HTTP_201_CREATED,
    summary="Create or replace my persona",
    description=(
        "Creates the caller's persona (201) or replaces all of its blocks "
        "when one already exists (200)."
    ),
    responses={
        200: {"description": "Existing persona updated"},
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Validation failed",
                        "errors": [
                            {
                                "field": "baseProfileId",
                                "message": "Traveler profile 99 does not exist",
                                "type": "value_error",
                            },
                        ],
                    },
                },
            },
        },
    },
    operation_id="personas_upsert",
)
async def upsert_persona(
    user: UserDBDep,
    payload: PersonaUpsert,
    response: Response,
    persona_service: PersonaServiceDep,
) -> PersonaMutationResponse:
    """
    Create or replace the caller's persona.

    Parameters
    ----------
    user : UserDB
        Authenticated user.
    payload : PersonaUpsert
        Base profile id and persona blocks.
    response : Response
        Used to switch the status to 200 on update.
    persona_service : PersonaService
        Persona service dependency.

    Returns
    -------
    PersonaMutationResponse
        Message and the stored persona.
    """
    result, created = await persona_service.upsert(cast(int, user.id), payload)
    if not created:
        response.status_code = HTTP_200_OK
    return result


@router.get(
    "/{persona_id}",
    response_class=ORJSONResponse,
    response_model=PersonaResponse,
    summary="Get a persona",
    responses=_NOT_FOUND,
    operation_id="personas_get",
)
async def get_persona(
    persona_id: int,
    user: UserDBDep,
    persona_service: PersonaServiceDep,
) -> PersonaResponse:
    return await persona_service.get_persona(persona_id, cast(int, user.id))


@router.put(
    "/{persona_id}",
    response_class=ORJSONResponse,
    response_model=PersonaMutationResponse,
    summary="Update a persona",
    description="Only the blocks present in the body are replaced.",
    responses=_NOT_FOUND,
    operation_id="personas_update",
)
async def update_persona(
    persona_id: int,
    user: UserDBDep,
    payload: PersonaUpdate,
    persona_service: PersonaServiceDep,
) -> PersonaMutationResponse:
    """
    Update one of the caller's personas.

    Parameters
    ----------
    persona_id : int
        Persona to update.
    user : UserDB
        Authenticated user.
    payload : PersonaUpdate
        Blocks to replace.
    persona_service : PersonaService
        Persona service dependency.

    Returns
    -------
    PersonaMutationResponse
        Message and the updated persona.
    """
    return await persona_service.update_persona(persona_id, cast(int, user.id), payload)
