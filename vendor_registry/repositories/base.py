"""Generic async repository with hard-delete and driver error translation."""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_registry.core.exceptions import StorageError
from vendor_registry.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


def storage_error(exc: SQLAlchemyError) -> StorageError:
    """Wrap a SQLAlchemy failure, keeping the driver's own message when there is one."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return StorageError(str(exc.orig))
    return StorageError(str(exc))


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository keyed by an integer `id` column.

    Every driver failure leaves this class as a StorageError (or a more
    specific subclass chosen by the concrete repository), so services never
    see SQLAlchemy exceptions.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_all(self) -> list[ModelT]:
        """Return every row ordered by id."""
        try:
            result = await self._session.execute(
                select(self.model).order_by(self.model.id.asc())
            )
        except SQLAlchemyError as exc:
            raise storage_error(exc) from exc
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def delete(self, entity_id: int) -> bool:
        """Delete by id. Returns False when no row matched."""
        try:
            result = await self._session.execute(
                delete(self.model).where(self.model.id == entity_id)
            )
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise storage_error(exc) from exc
        return result.rowcount > 0
