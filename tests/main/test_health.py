"""Tests for the health endpoint and app wiring."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient
from pytest_mock import MockerFixture

from app.db import Database
from app.main import app


class TestHealth:
    @pytest.mark.asyncio
    async def test_healthy(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == "1.0.0"
        assert body["services"] == {"database": "ok", "ai_client": "not_initialized"}

    @pytest.mark.asyncio
    async def test_database_down(
        self,
        client: AsyncClient,
        database: Database,
        mocker: MockerFixture,
    ) -> None:
        mocker.patch.object(database, "ping", AsyncMock(return_value=False))

        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["services"]["database"] == "unavailable"

    @pytest.mark.asyncio
    async def test_ai_client_reported(self, client: AsyncClient) -> None:
        app.state.ai_client = MagicMock()

        response = await client.get("/health")

        assert response.json()["services"]["ai_client"] == "initialized"

    @pytest.mark.asyncio
    async def test_security_headers(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.headers["x-content-type-options"] == "nosniff"

    @pytest.mark.asyncio
    async def test_unknown_route(self, client: AsyncClient) -> None:
        response = await client.get("/api/nowhere")

        assert response.status_code == 404
