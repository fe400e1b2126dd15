"""Shared repository plumbing for the SQLModel tables."""

from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import ColumnElement
from sqlmodel import SQLModel

from app.errors.database import DatabaseError, DuplicateEntryError
from app.utils.helpers import utc_now


class BaseRepository[ModelT: SQLModel]:
    """
    Lookups and writes shared by the entity repositories.

    Repositories flush but never commit; the calling service owns the unit
    of work.

    Attributes:
        model: The table model this repository reads and writes.
        owner_field: Column holding the owning user's id, for tables that have one.
    """

    model: type[ModelT]
    owner_field: str | None = None

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, record_id: int) -> ModelT | None:
        return await self.session.get(self.model, record_id)

    async def get_by_field(self, field_name: str, value: Any) -> ModelT | None:
        """
        Get the first record whose ``field_name`` equals ``value``.

        Args:
            field_name: Column to filter on
            value: Value to match

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        column = getattr(self.model, field_name)
        result = await self.session.execute(
            select(self.model).where(cast(ColumnElement[bool], column == value)).limit(1),
        )
        return result.scalar_one_or_none()

    async def get_owned(self, record_id: int, user_id: int) -> ModelT | None:
        """
        Get a record only when it belongs to ``user_id``.

        Another user's record and a missing record look the same to callers.

        Args:
            record_id: Primary key
            user_id: Expected owner

        Returns:
            ModelT | None: The record, or None when missing or not owned
        """
        if self.owner_field is None:
            msg = f"{self.model.__name__} has no owner column"
            raise TypeError(msg)

        record = await self.get_by_id(record_id)
        if record is None or getattr(record, self.owner_field) != user_id:
            return None
        return record

    async def apply_changes(self, record: ModelT, changes: dict[str, Any]) -> ModelT:
        """Set column values, stamp ``updated_at`` when the table has one, and flush."""
        for key, value in changes.items():
            setattr(record, key, value)
        if "updated_at" in type(record).model_fields:
            record.updated_at = utc_now()  # type: ignore[attr-defined]
        return await self._add_and_refresh(record)

    async def delete(self, record: ModelT) -> None:
        await self.session.delete(record)
        await self.session.flush()

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Flush a new or changed record and reload its server-side values.

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For any other database failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            reason = str(e.orig) if e.orig else str(e)
            if "unique" in reason.lower() or "duplicate" in reason.lower():
                raise DuplicateEntryError(detail=reason) from e
            raise DatabaseError(detail=f"Constraint violated: {reason}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseError(detail=f"Failed to save {self.model.__name__}: {e}") from e
        return record
