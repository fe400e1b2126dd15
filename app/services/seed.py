"""Reset and seed operations behind the test-support endpoints."""

from logging import getLogger

from sqlalchemy.ext.asyncio import AsyncSession

from app.configs import file_logger
from app.db.seed import (
    DEMO_USER_EMAIL,
    DEMO_USER_FIRST_NAME,
    DEMO_USER_LAST_NAME,
    DEMO_USER_PASSWORD,
    clean_database,
    seed_profiles,
)
from app.managers.password_manager import hash_password
from app.repositories import ProfileRepository, UserRepository
from app.schemas.profile import ProfileResponse
from app.schemas.testing import CleanDatabaseResponse, SeedDataResponse
from app.schemas.user import UserResponse

logger = file_logger(getLogger(__name__))


class SeedService:
    """Wipes user data and seeds the profiles and the demo account."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user_repo = UserRepository(session)
        self.profile_repo = ProfileRepository(session)

    async def clean(self) -> CleanDatabaseResponse:
        """
        Delete all user-owned rows; traveler profiles are kept and reseeded if missing.

        Returns:
            CleanDatabaseResponse: Deleted row counts per table.
        """
        deleted = await clean_database(self.session)
        seeded = await seed_profiles(self.session)
        await self.session.commit()
        logger.warning(f"Test database cleaned: {deleted}")
        return CleanDatabaseResponse(
            message="Database cleaned successfully",
            deleted=deleted,
            profiles_seeded=seeded,
        )

    async def seed(self) -> SeedDataResponse:
        """
        Make sure the traveler profiles and the demo user exist.

        Returns:
            SeedDataResponse: The profiles and the demo user.
        """
        await seed_profiles(self.session)

        user = await self.user_repo.get_by_email(DEMO_USER_EMAIL)
        created = user is None
        if user is None:
            user = await self.user_repo.create(
                email=DEMO_USER_EMAIL,
                password_hash=await hash_password(DEMO_USER_PASSWORD),
                first_name=DEMO_USER_FIRST_NAME,
                last_name=DEMO_USER_LAST_NAME,
            )
        await self.session.commit()

        profiles = await self.profile_repo.list_all()
        return SeedDataResponse(
            message="Test data seeded successfully",
            profiles=[ProfileResponse.model_validate(profile) for profile in profiles],
            user=UserResponse.model_validate(user),
            user_created=created,
        )
