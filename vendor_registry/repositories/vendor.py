"""Vendor repository: gap-filling id allocation and tagged constraint failures."""

from __future__ import annotations

import logging

from sqlalchemy import case, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import aliased

from vendor_registry.core.exceptions import (
    EmailConflictError,
    IdConflictError,
    UniqueViolationError,
)
from vendor_registry.domain.vendor import Vendor
from vendor_registry.repositories.base import BaseRepository, storage_error

logger = logging.getLogger(__name__)


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor

    async def next_free_id(self) -> int:
        """Smallest positive integer not used as a vendor id.

        1 when the table is empty or 1 is free; otherwise the first `t + 1`
        (ascending `t`) with no row behind it. Runs as one query.
        """
        current = aliased(Vendor)
        following = aliased(Vendor)
        first_gap = (
            select(current.id + 1)
            .select_from(current)
            .outerjoin(following, following.id == current.id + 1)
            .where(following.id.is_(None))
            .order_by(current.id)
            .limit(1)
            .scalar_subquery()
        )
        one_taken = select(Vendor.id).where(Vendor.id == 1).exists()
        stmt = select(case((one_taken, func.coalesce(first_gap, 1)), else_=1))

        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise storage_error(exc) from exc
        return int(result.scalar_one())

    async def insert(
        self,
        vendor_id: int,
        *,
        name: str,
        contact_person: str,
        email: str,
        partner_type: str,
    ) -> Vendor:
        """Insert a vendor under an explicit id.

        Raises EmailConflictError or IdConflictError when a uniqueness
        constraint rejects the row; the session is rolled back first.
        """
        instance = Vendor(
            id=vendor_id,
            name=name,
            contact_person=contact_person,
            email=email,
            partner_type=partner_type,
        )
        self._session.add(instance)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            violation = await self._classify_violation(vendor_id, email)
            if violation is None:
                raise storage_error(exc) from exc
            raise violation from exc
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise storage_error(exc) from exc
        return instance

    async def _classify_violation(
        self, vendor_id: int, email: str
    ) -> UniqueViolationError | None:
        """Work out which unique constraint a failed insert hit.

        Email is checked first: a duplicate email cannot be fixed by a new id.
        Returns None when neither constraint explains the failure.
        """
        try:
            email_owner = (
                await self._session.execute(select(Vendor.id).where(Vendor.email == email))
            ).scalar_one_or_none()
            if email_owner is not None:
                return EmailConflictError()

            id_owner = (
                await self._session.execute(select(Vendor.id).where(Vendor.id == vendor_id))
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise storage_error(exc) from exc

        if id_owner is not None:
            return IdConflictError(vendor_id)
        logger.debug("Integrity failure for vendor %s matched no unique constraint", vendor_id)
        return None
