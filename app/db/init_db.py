"""
Database setup script.

Creates the tables and inserts the default traveler profiles. It runs as
part of application startup and can also be run on its own:
``python -m app.db.init_db``.
"""

from asyncio import run as asyncio_run
from logging import getLogger

from app.configs import file_logger
from app.db.database import Database
from app.db.seed import seed_profiles

logger = file_logger(getLogger(__name__))


async def setup_database(db: Database) -> None:
    """Create all tables and seed the traveler profiles."""
    await db.create_all()
    async with db.transaction() as session:
        await seed_profiles(session)


async def main(url: str | None = None) -> None:
    """Set up the configured database, then release its connections."""
    db = Database(url)
    try:
        logger.info(f"Setting up database at {db.url}...")
        await setup_database(db)
        logger.info("Database ready!")
    finally:
        await db.dispose()


def run() -> None:
    asyncio_run(main())


if __name__ == "__main__":
    run()
