"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Travel Planner backend application.
"""

from pathlib import Path
from typing import Literal, NamedTuple, Self

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MAX_TITLE_LENGTH = 200
MAX_DESTINATION_LENGTH = 100
MAX_NAME_LENGTH = 100
MIN_PASSWORD_LENGTH = 6
MAX_TRIP_DURATION = 365
MAX_INTERESTS_COUNT = 20

# Itinerary generation
DEFAULT_TRIP_BUDGET = 1000.0
MAX_ACTIVITY_BUDGET_SHARE = 0.4  # of the daily budget
COST_VARIATION_RANGE = (0.8, 1.2)

# Response constants
ITINERARY_GENERATION_ERROR = "Failed to generate itinerary"
TRIP_PLAN_MISSING_PARTS = "Missing travelerProfile or tripParameters in request"

# Development-only signing key; production must set SECRET_KEY
DEFAULT_SECRET_KEY = "change-me-in-production"

# AI Model Configuration
GEMINI_MODEL = "gemini-2.0-flash"


class Argon2Params(NamedTuple):
    memory_cost: int
    time_cost: int
    parallelism: int


# Argon2 cost presets selected by PASSWORD_SECURITY_LEVEL
CONFIG_MAP: dict[str, Argon2Params] = {
    "low": Argon2Params(memory_cost=8192, time_cost=1, parallelism=1),
    "medium": Argon2Params(memory_cost=65536, time_cost=2, parallelism=2),
    "high": Argon2Params(memory_cost=262144, time_cost=3, parallelism=4),
}


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Travel Planner Backend"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "testing", "production"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_FILE: str = "logs/travel_planner.log"
    PRODUCTION_FRONTEND_URL: str | None = None
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./travel_planner.db"
    DATABASE_ECHO: bool = False

    # Auth
    SECRET_KEY: str = DEFAULT_SECRET_KEY
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days
    JWT_ISSUER: str = "travel-planner"
    JWT_AUDIENCE: str = "travel-planner-client"
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"

    # AI Configuration
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = GEMINI_MODEL
    AI_REQUEST_TIMEOUT: int = 60  # seconds
    AI_MAX_RETRIES: int = 2
    AI_RETRY_DELAY: float = 1.0  # seconds
    AI_TEMPERATURE: float = 0.4

    # Test support
    ENABLE_TEST_ENDPOINTS: bool = False

    @model_validator(mode="after")
    def require_secret_in_production(self) -> Self:
        if self.ENVIRONMENT == "production" and self.SECRET_KEY == DEFAULT_SECRET_KEY:
            msg = "SECRET_KEY must be set when ENVIRONMENT is production"
            raise ValueError(msg)
        return self


settings = Settings()


class LimiterConfig(BaseSettings):
    """Rate limiter configuration passed straight to slowapi's Limiter."""

    model_config = SettingsConfigDict(env_prefix="LIMITER_", case_sensitive=False)

    default_limits: list[str] = ["100/minute"]
    storage_uri: str = "memory://"
    headers_enabled: bool = False
    strategy: str = "fixed-window"
    key_prefix: str = "travel-planner"
    enabled: bool = True
