"""Tests for registration, login and the current-user endpoint."""

from datetime import timedelta
from typing import Any

import pytest
from httpx import AsyncClient

from app.managers.token_manager import create_access_token, decode_access_token


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_returns_token_and_user(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/auth/register",
            json={
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "Ada@Example.com",
                "password": "pw123456",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["token"]
        assert body["user"]["email"] == "ada@example.com"
        assert body["user"]["firstName"] == "Ada"
        assert body["user"]["lastName"] == "Lovelace"
        assert "password" not in body["user"]
        assert "password_hash" not in body["user"]

    @pytest.mark.asyncio
    async def test_names_are_optional(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/auth/register",
            json={"email": "a@b.com", "password": "pw123456"},
        )

        assert response.status_code == 201
        assert response.json()["user"]["firstName"] is None

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, client: AsyncClient, register_user: Any) -> None:
        await register_user(email="a@b.com")

        response = await client.post(
            "/api/auth/register",
            json={"email": "A@B.com", "password": "another123"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "User with email 'a@b.com' already exists"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"email": "not-an-email", "password": "pw123456"}, "email"),
            ({"email": "a@b.com", "password": "123"}, "password"),
            ({"password": "pw123456"}, "email"),
        ],
    )
    async def test_invalid_payload(
        self,
        client: AsyncClient,
        payload: dict[str, str],
        field: str,
    ) -> None:
        response = await client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Validation failed"
        assert field in [error["field"] for error in body["errors"]]


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_token_carries_user_id(self, client: AsyncClient, register_user: Any) -> None:
        registered = await register_user(email="a@b.com", password="pw123456")

        response = await client.post(
            "/api/auth/login",
            json={"email": "a@b.com", "password": "pw123456"},
        )

        assert response.status_code == 200
        body = response.json()
        token_data = decode_access_token(body["token"])
        assert token_data is not None
        assert token_data.user_id == registered["user"]["id"]
        assert body["user"]["id"] == registered["user"]["id"]

    @pytest.mark.asyncio
    async def test_wrong_password(self, client: AsyncClient, register_user: Any) -> None:
        await register_user(email="a@b.com", password="pw123456")

        response = await client.post(
            "/api/auth/login",
            json={"email": "a@b.com", "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_unknown_email(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/auth/login",
            json={"email": "ghost@b.com", "password": "pw123456"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"


class TestCurrentUser:
    @pytest.mark.asyncio
    async def test_me(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        response = await client.get("/api/auth/me", headers=auth["headers"])

        assert response.status_code == 200
        assert response.json()["id"] == auth["user"]["id"]

    @pytest.mark.asyncio
    async def test_missing_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["detail"] == "Access token required"
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_malformed_header(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        response = await client.get(
            "/api/auth/me",
            headers={"Authorization": f"Token {auth['token']}"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/auth/me",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid or expired token"

    @pytest.mark.asyncio
    async def test_expired_token(self, client: AsyncClient, auth: dict[str, Any]) -> None:
        token = create_access_token(
            user_id=auth["user"]["id"],
            email=auth["user"]["email"],
            expires_delta=timedelta(minutes=-1),
        )

        response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, client: AsyncClient) -> None:
        token = create_access_token(user_id=999, email="ghost@b.com")

        response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403
