# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before app is imported anywhere
os.environ["LOG_TO_FILE"] = "false"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["ENABLE_TEST_ENDPOINTS"] = "true"
os.environ["ENVIRONMENT"] = "testing"
os.environ["GEMINI_API_KEY"] = ""

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from typing import Any  # noqa: E402

from httpx import ASGITransport, AsyncClient  # noqa: E402
from pytest import fixture  # noqa: E402

from app.db import Database, setup_database  # noqa: E402
from app.main import app  # noqa: E402
from app.managers.rate_limiter import limiter  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

type RegisterUser = Callable[..., Awaitable[dict[str, Any]]]


@fixture
async def database() -> AsyncGenerator[Database]:
    """Fresh in-memory database with the traveler profiles seeded."""
    db = Database(TEST_DATABASE_URL, echo=False)
    await setup_database(db)
    app.state.db = db
    yield db
    app.state.db = None
    await db.dispose()


@fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing FastAPI endpoints."""
    limiter.enabled = False
    app.state.ai_client = None
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
    limiter.enabled = True


@fixture
def register_user(client: AsyncClient) -> RegisterUser:
    """Return a coroutine that registers a user and returns the response body."""

    async def _register(
        email: str = "a@b.com",
        password: str = "pw123456",  # noqa: S107
        **names: str,
    ) -> dict[str, Any]:
        response = await client.post(
            "/api/auth/register",
            json={"email": email, "password": password, **names},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@fixture
async def auth(register_user: RegisterUser) -> dict[str, Any]:
    """A registered user: its auth body plus ready-made request headers."""
    body = await register_user()
    return {**body, "headers": {"Authorization": f"Bearer {body['token']}"}}


@fixture
def trip_payload() -> dict[str, Any]:
    return {
        "title": "T",
        "destination": "Paris",
        "startDate": "2025-12-01",
        "endDate": "2025-12-05",
        "travelerProfileId": 1,
        "numberOfTravelers": 2,
        "budget": 1500,
    }
