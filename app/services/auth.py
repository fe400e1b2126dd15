"""Authentication service: registration and password login."""

from logging import getLogger
from typing import cast

from app.configs import file_logger
from app.errors.auth import DuplicateUserError, InvalidCredentialsError
from app.managers.password_manager import hash_password, verify_password
from app.managers.token_manager import create_access_token
from app.models import UserDB
from app.repositories import UserRepository
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.user import UserResponse

logger = file_logger(getLogger(__name__))


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def register(self, payload: RegisterRequest) -> AuthResponse:
        """
        Register a new user and issue a token for them.

        Args:
            payload: Registration data with an already normalised email

        Returns:
            AuthResponse: Token and the created user

        Raises:
            DuplicateUserError: If the email is already registered
        """
        if await self.user_repo.get_by_email(payload.email):
            raise DuplicateUserError(payload.email)

        password_hash = await hash_password(payload.password.get_secret_value())
        user = await self.user_repo.create(
            email=payload.email,
            password_hash=password_hash,
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
        await self.user_repo.session.commit()
        logger.info(f"Registered user {user.id}")
        return self.auth_response(user)

    async def authenticate_user(self, email: str, password: str) -> UserDB:
        """
        Authenticate a user by email and password.

        Args:
            email: User email
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_email(email)
        # verify_password still hashes when the user is unknown, so both paths take as long
        if not await verify_password(password, user.password_hash if user else None):
            raise InvalidCredentialsError
        return cast(UserDB, user)

    async def login(self, payload: LoginRequest) -> AuthResponse:
        user = await self.authenticate_user(payload.email, payload.password.get_secret_value())
        logger.info(f"User {user.id} logged in")
        return self.auth_response(user)

    @staticmethod
    def auth_response(user: UserDB) -> AuthResponse:
        """
        Create an access token for a user and pair it with the user's public data.

        Args:
            user: User entity

        Returns:
            AuthResponse: Token and user
        """
        token = create_access_token(user_id=cast(int, user.id), email=user.email)
        return AuthResponse(token=token, user=UserResponse.model_validate(user))
