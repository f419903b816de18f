"""Vendor service — validation, gap-filling id allocation and the id-race retry.

Creation is a strict sequence: allocate → insert → (on id conflict) allocate
again → insert once more. Allocation and insertion are separate statements,
so another request can claim the candidate id in between; the database's
primary key rejects the loser, which gets exactly one more attempt.

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""


import logging

from vendor_registry.core.exceptions import (
    AllocationError,
    IdConflictError,
    NotFoundError,
    ValidationError,
)
from vendor_registry.domain.vendor import PartnerType, Vendor
from vendor_registry.repositories.vendor import VendorRepository
from vendor_registry.schemas.vendor import VendorCreate

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("name", "contact_person", "email", "partner_type")
_MIN_ID, _MAX_ID = -(2**63), 2**63 - 1

class VendorService:
    def __init__(self, repo: VendorRepository):
        self._repo = repo

    async def list_vendors(self) -> list[Vendor]:
        return await self._repo.list_all()

    async def create_vendor(self, data: VendorCreate) -> Vendor:
        fields = self._validate(data)

        candidate = await self._repo.next_free_id()
        try:
            vendor = await self._repo.insert(candidate, **fields)
        except IdConflictError:
            logger.warning("Vendor id %d was claimed concurrently, reallocating", candidate)
        else:
            logger.info("Created vendor %d (%s)", vendor.id, vendor.email)
            return vendor

        retry_id = await self._repo.next_free_id()
        if retry_id == candidate:
            logger.error("Allocator returned taken vendor id %d again", candidate)
            raise AllocationError("Could not allocate a vendor id")

        try:
            vendor = await self._repo.insert(retry_id, **fields)
        except IdConflictError as exc:
            logger.error("Vendor id %d was also claimed concurrently, giving up", retry_id)
            raise AllocationError("Could not allocate a vendor id") from exc
        logger.info("Created vendor %d (%s) after one retry", vendor.id, vendor.email)
        return vendor

    async def delete_vendor(self, vendor_id: str | int) -> None:
        try:
            parsed_id = int(vendor_id)
        except (TypeError, ValueError):
            raise ValidationError("Invalid vendor id") from None

        # No stored id can lie outside the signed 64-bit INTEGER range
        if not _MIN_ID <= parsed_id <= _MAX_ID:
            raise NotFoundError("Vendor")

        deleted = await self._repo.delete(parsed_id)
        if not deleted:
            raise NotFoundError("Vendor")
        logger.info("Deleted vendor %d", parsed_id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(data: VendorCreate) -> dict[str, str]:
        """Return the four insertable fields or raise ValidationError. Touches no storage."""
        fields = data.model_dump(include=set(_REQUIRED_FIELDS))
        if not all(fields.get(name) for name in _REQUIRED_FIELDS):
            raise ValidationError("All fields are required")
        if fields["partner_type"] not in PartnerType.values():
            raise ValidationError('partner_type must be either "Supplier" or "Partner"')
        return fields
