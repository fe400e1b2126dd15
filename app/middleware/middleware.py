# app/middleware/middleware.py
"""
Middleware and lifespan for the travel planner API.

Startup builds the database handle (tables plus seeded traveler profiles)
and, when a Gemini key is configured, the AI client. Both live on
``app.state`` and are released on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import basicConfig, getLogger
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.logging import RichHandler
from rich.traceback import install
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.clients.ai_client import AiClient
from app.configs import file_logger, settings
from app.db import Database, setup_database
from app.utils.helpers import get_summary, host

basicConfig(
    level=settings.LOG_LEVEL,
    format="%(message)s",
    datefmt="%X",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = file_logger(getLogger("rich"))

install()

DEV_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")


async def _start_services(app: FastAPI) -> None:
    # A database injected before startup (tests, scripts) is kept as is
    if getattr(app.state, "db", None) is None:
        app.state.db = Database()
    await setup_database(app.state.db)

    app.state.ai_client = None
    if settings.GEMINI_API_KEY:
        app.state.ai_client = AiClient()
        logger.info(f"Itineraries are planned by {app.state.ai_client.model}")
    else:
        logger.info("GEMINI_API_KEY not set, itineraries use the template generator")


async def _stop_services(app: FastAPI) -> None:
    if ai_client := getattr(app.state, "ai_client", None):
        await ai_client.close()
    if db := getattr(app.state, "db", None):
        await db.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Create the database handle and AI client, then release them on shutdown."""
    logger.info(f"Starting {app.title} ({settings.ENVIRONMENT})...")
    if settings.LOG_TO_FILE:
        logger.info(f"Logging to file enabled: {settings.LOG_FILE}")

    try:
        await _start_services(app)
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    base_url = f"http://{settings.HOST}:{settings.PORT}"
    logger.info(f"API ready at {base_url}, docs at {base_url}/docs")

    yield

    logger.info(f"Shutting down {app.title}...")
    try:
        await _stop_services(app)
    except Exception:
        logger.exception("Error during service cleanup")
    else:
        logger.info("Services cleaned up successfully")


def configure_cors(app: FastAPI) -> None:
    """Allow the local web client, plus the production frontend when configured."""
    allowed_origins = list(DEV_ORIGINS)
    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its route summary, caller and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started = perf_counter()
        route = get_summary(request) or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route}, from ip: {host(request)}")

        response = await call_next(request)
        elapsed = perf_counter() - started

        # Set by the bearer-token dependency on authenticated routes
        user_id = getattr(request.state, "user_id", None)
        caller = f"user {user_id}" if user_id is not None else "anonymous"
        logger.info(
            f"Response: {response.status_code} for {route} ({caller}) in {elapsed:.3f}s",
        )
        response.headers["X-Process-Time"] = f"{elapsed:.3f}"
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Static security headers on every response."""

    HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
    }

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)
        response.headers.update(self.HEADERS)
        return response
