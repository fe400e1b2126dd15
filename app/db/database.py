"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from app.configs import file_logger, settings
from app.errors.base import BaseAppError

logger = file_logger(getLogger(__name__))


def _engine_kwargs(url: str) -> dict[str, Any]:
    """Engine options for a database URL; in-memory SQLite needs a single shared connection."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}

    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores ON DELETE clauses unless the pragma is set per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: Any, connection_record: object) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Database:
    """
    Owns one async engine and its session factory.

    An instance is created per application (in the lifespan) or per test and
    stored on ``app.state.db``; nothing in the code base reaches for a
    module-level engine.

    Attributes:
        url: SQLAlchemy database URL.
        engine: The async engine.
        session_maker: Factory producing ``AsyncSession`` objects.
    """

    def __init__(self, url: str | None = None, echo: bool | None = None) -> None:
        self.url = url or settings.DATABASE_URL
        self.engine: AsyncEngine = create_async_engine(
            self.url,
            echo=settings.DATABASE_ECHO if echo is None else echo,
            **_engine_kwargs(self.url),
        )
        if self.engine.dialect.name == "sqlite":
            _enable_sqlite_foreign_keys(self.engine)

        self.session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """
        Create all tables defined in SQLModel models.

        Note:
            This is a simple initialization suited to SQLite. Schema changes
            on an existing database need a migration tool.
        """
        # Import all models to ensure they are registered
        from app.models import (  # noqa: F401, PLC0415
            ActivityDB,
            ItineraryDayDB,
            TravelerProfileDB,
            TripDB,
            UserDB,
            UserPersonaDB,
        )

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized successfully!")

    async def ping(self) -> bool:
        """Return True when a trivial query succeeds."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("Database ping failed")
            return False
        return True

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Context manager for explicit transaction management.

        Commits on successful exit, rolls back on exception.

        Yields:
            AsyncSession: Database session within a transaction

        Example:
            ```python
            async with db.transaction() as session:
                session.add(UserDB(email="ada@example.com", password_hash="..."))
            ```
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except BaseAppError as e:
                await session.rollback()
                logger.info(f"Transaction rolled back: {e}")
                raise
            except Exception:
                await session.rollback()
                logger.exception("Transaction error")
                raise

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")


def get_database(request: Request) -> Database:
    """
    Dependency returning the application's database handle.

    Parameters
    ----------
    request : Request
        Current request; the handle lives on ``request.app.state.db``.

    Returns
    -------
    Database
        The injected database handle.
    """
    return request.app.state.db


async def get_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Services commit their own unit of work; anything left pending is
    committed when the request finishes and rolled back if it raised.

    Yields:
        AsyncSession: Database session
    """
    async with get_database(request).transaction() as session:
        yield session
