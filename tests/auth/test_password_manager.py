"""Tests for the argon2 password hasher."""

import pytest

from app.managers.password_manager import PasswordHasher, hash_password, verify_password


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(level="low")


class TestPasswordHasher:
    def test_hash_is_argon2(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("pw123456")
        assert hashed.startswith("$argon2")
        assert hashed != "pw123456"

    def test_verify_roundtrip(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("pw123456")
        assert hasher.verify("pw123456", hashed) is True
        assert hasher.verify("wrong-password", hashed) is False

    def test_missing_hash_never_matches(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("pw123456", None) is False

    def test_corrupted_hash_never_matches(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("pw123456", "not-a-hash") is False

    def test_empty_password_is_rejected(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")


@pytest.mark.asyncio
async def test_async_helpers_run_on_executor() -> None:
    hashed = await hash_password("pw123456")
    assert await verify_password("pw123456", hashed) is True
    assert await verify_password("nope1234", hashed) is False
