"""Authentication routes for handling user login and registration."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.dependencies import AuthServiceDep, UserDBDep
from app.managers import limiter
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.user import UserResponse

router = APIRouter(prefix="/api/auth", tags=["🔐 Auth"])

_AUTH_EXAMPLE = {
    "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    "user": {
        "id": 1,
        "email": "ada@example.com",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "createdAt": "2025-01-01T00:00:00Z",
    },
}


@router.post(
    "/register",
    response_class=ORJSONResponse,
    response_model=AuthResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an account and receive an access token for it.",
    responses={
        201: {"content": {"application/json": {"example": _AUTH_EXAMPLE}}},
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"detail": "User with email 'ada@example.com' already exists"},
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_register",
)
@limiter.limit("10/minute")
async def register(
    request: Request,
    payload: RegisterRequest,
    auth_service: AuthServiceDep,
) -> AuthResponse:
    """
    Register a user.

    Parameters
    ----------
    request : Request
        Current request context.
    payload : RegisterRequest
        Names, email and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    AuthResponse
        Token and the created user.

    Raises
    ------
    DuplicateUserError
        If the email is already registered.
    """
    return await auth_service.register(payload)


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=AuthResponse,
    summary="Login for access token",
    description="Authenticate with email and password to obtain an access token.",
    responses={
        200: {"content": {"application/json": {"example": _AUTH_EXAMPLE}}},
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "Invalid email or password"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_login",
)
@limiter.limit("5/minute")
async def login(
    request: Request,
    payload: LoginRequest,
    auth_service: AuthServiceDep,
) -> AuthResponse:
    """
    Login with email and password.

    Parameters
    ----------
    request : Request
        Current request context.
    payload : LoginRequest
        Email and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    AuthResponse
        Token and user.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    return await auth_service.login(payload)


@router.get(
    "/me",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    summary="Get current user",
    responses={
        401: {
            "description": "Unauthorized",
            "content": {"application/json": {"example": {"detail": "Access token required"}}},
        },
        403: {
            "description": "Forbidden",
            "content": {"application/json": {"example": {"detail": "Invalid or expired token"}}},
        },
    },
    operation_id="auth_me",
)
async def me(user: UserDBDep) -> UserResponse:
    """Return the user the bearer token belongs to."""
    return UserResponse.model_validate(user)
