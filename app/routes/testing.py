"""Routes used by end-to-end test suites to reset and seed the database."""

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from app.dependencies import SeedServiceDep, require_test_endpoints
from app.schemas.testing import CleanDatabaseResponse, SeedDataResponse

router = APIRouter(
    prefix="/api/test",
    tags=["🧪 Test support"],
    dependencies=[Depends(require_test_endpoints)],
)


@router.delete(
    "/clean-database",
    response_class=ORJSONResponse,
    response_model=CleanDatabaseResponse,
    summary="Delete all user data",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "message": "Database cleaned successfully",
                        "deleted": {
                            "activities": 12,
                            "itinerary_days": 4,
                            "trips": 1,
                            "user_personas": 1,
                            "users": 2,
                        },
                        "profiles_seeded": 0,
                    },
                },
            },
        },
        404: {"description": "Test endpoints are disabled"},
    },
    operation_id="test_clean_database",
)
async def clean_database(seed_service: SeedServiceDep) -> CleanDatabaseResponse:
    """Delete users, personas, trips, days and activities; keep the traveler profiles."""
    return await seed_service.clean()


@router.post(
    "/seed-data",
    response_class=ORJSONResponse,
    response_model=SeedDataResponse,
    summary="Seed profiles and the demo user",
    responses={404: {"description": "Test endpoints are disabled"}},
    operation_id="test_seed_data",
)
async def seed_data(seed_service: SeedServiceDep) -> SeedDataResponse:
    """
    Seed the traveler profiles and the demo user.

    Parameters
    ----------
    seed_service : SeedService
        Seed service dependency.

    Returns
    -------
    SeedDataResponse
        The profiles and the demo user ``test@example.com``.
    """
    return await seed_service.seed()
