"""User repository for database operations."""

from typing import cast

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from app.errors.auth import DuplicateUserError
from app.errors.database import DuplicateEntryError
from app.models.user import UserDB
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Passwords arrive here already hashed; hashing is the service's concern.
    """

    model = UserDB

    async def create(
        self,
        email: str,
        password_hash: str,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> UserDB:
        """
        Create a new user in the database.

        Args:
            email: Normalised (lower case) email
            password_hash: Argon2 hash of the password
            first_name: Optional first name
            last_name: Optional last name

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateUserError: If the email is already registered
            DatabaseError: For other database errors
        """
        db_user = UserDB(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )
        try:
            return await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            raise DuplicateUserError(email) from e

    async def get_by_email(self, email: str) -> UserDB | None:
        """
        Get user by email.

        Args:
            email: Email to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.email == email.lower())),
        )
        return result.scalar_one_or_none()
