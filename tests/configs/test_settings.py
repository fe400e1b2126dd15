"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from app.configs.settings import DEFAULT_SECRET_KEY, Settings


class TestSecretKey:
    def test_production_requires_secret_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SECRET_KEY", raising=False)

        with pytest.raises(ValidationError, match="SECRET_KEY must be set"):
            Settings(_env_file=None, ENVIRONMENT="production")

    def test_production_accepts_explicit_key(self) -> None:
        settings = Settings(_env_file=None, ENVIRONMENT="production", SECRET_KEY="s3cret")

        assert settings.SECRET_KEY == "s3cret"

    def test_development_keeps_default_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SECRET_KEY", raising=False)

        settings = Settings(_env_file=None, ENVIRONMENT="development")

        assert settings.SECRET_KEY == DEFAULT_SECRET_KEY
