# app/main.py

"""Travel Planner Backend - trips, personas and generated itineraries over FastAPI."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded

from app.configs import settings
from app.db import get_database
from app.errors import (
    AiError,
    BaseAppError,
    DatabaseError,
    PasswordHashingError,
    UserAuthenticationError,
    ValidationError,
    ai_exception_handler,
    auth_exception_handler,
    create_exception_handler,
    database_exception_handler,
    validation_error_handler,
    validation_exception_handler,
)
from app.managers import limiter, rate_limit_exceeded_handler
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.middleware.middleware import logger
from app.routes import (
    activities_router,
    ai_router,
    auth_router,
    personas_router,
    profiles_router,
    testing_router,
    trips_router,
)
from app.schemas import HealthCheckResponse
from app.schemas.system import ServicesStatus
from app.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Travel planning API: trips, personas and generated itineraries",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)


routes = [
    auth_router,
    profiles_router,
    trips_router,
    activities_router,
    personas_router,
    ai_router,
    testing_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (UserAuthenticationError, auth_exception_handler),
    (ValidationError, validation_error_handler),
    (PasswordHashingError, auth_exception_handler),
    (DatabaseError, database_exception_handler),
    (AiError, ai_exception_handler),
    (BaseAppError, create_exception_handler(logger)),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 10:00:00",
                        "services": {"database": "ok", "ai_client": "not_initialized"},
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Version, overall status and the state of the database and AI client.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "...", "services": { ... }}
    """
    database_ok = await get_database(request).ping()
    ai_client_status = (
        "initialized" if getattr(request.app.state, "ai_client", None) else "not_initialized"
    )

    return HealthCheckResponse(
        version=app.version,
        status="ok" if database_ok else "degraded",
        timestamp=today_str(),
        services=ServicesStatus(
            database="ok" if database_ok else "unavailable",
            ai_client=ai_client_status,
        ),
    )


if __name__ == "__main__":
    from uvicorn import run

    run(app, host="127.0.0.1", port=8000, log_level="info")
