"""Traveler profile routes."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from app.dependencies import ProfileRepoDep
from app.errors import RecordNotFoundError
from app.schemas.profile import ProfileListResponse, ProfileResponse

router = APIRouter(prefix="/api/profiles", tags=["🧭 Profiles"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=ProfileListResponse,
    summary="List traveler profiles",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "profiles": [
                            {
                                "id": 3,
                                "name": "Foodie / Culinary Explorer",
                                "description": "For travelers who want to experience local cuisine",
                                "preferences": {"meal_priority": "high"},
                                "constraints": {"min_food_activities": 3},
                            },
                        ],
                    },
                },
            },
        },
    },
    operation_id="profiles_list",
)
async def list_profiles(profile_repo: ProfileRepoDep) -> ProfileListResponse:
    """
    List the seeded traveler profiles ordered by name.

    Parameters
    ----------
    profile_repo : ProfileRepository
        Profile repository dependency.

    Returns
    -------
    ProfileListResponse
        All traveler profiles.
    """
    profiles = await profile_repo.list_all()
    return ProfileListResponse(
        profiles=[ProfileResponse.model_validate(profile) for profile in profiles],
    )


@router.get(
    "/{profile_id}",
    response_class=ORJSONResponse,
    response_model=ProfileResponse,
    summary="Get a traveler profile",
    responses={
        404: {
            "description": "Not Found",
            "content": {"application/json": {"example": {"detail": "Profile not found"}}},
        },
    },
    operation_id="profiles_get",
)
async def get_profile(profile_id: int, profile_repo: ProfileRepoDep) -> ProfileResponse:
    profile = await profile_repo.get_by_id(profile_id)
    if profile is None:
        raise RecordNotFoundError(detail="Profile not found")
    return ProfileResponse.model_validate(profile)
