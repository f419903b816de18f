"""Vendor router — list, create and delete.

Pattern:
  1. Inject the DB session via Depends
  2. Build the repository and hand it to the service
  3. Call service methods and shape the response
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_registry.db.base import get_db
from vendor_registry.repositories.vendor import VendorRepository
from vendor_registry.schemas.vendor import VendorCreate, VendorOut
from vendor_registry.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


# ------------------------------------------------------------------
# Helper — instantiate service with a repository bound to the session
# ------------------------------------------------------------------

def _svc(session: AsyncSession) -> VendorService:
    return VendorService(VendorRepository(session))


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=list[VendorOut])
async def list_vendors(session: AsyncSession = Depends(get_db)):
    """List all vendors ordered by id."""
    vendors = await _svc(session).list_vendors()
    return [VendorOut.model_validate(v) for v in vendors]


@router.post("", response_model=VendorOut, status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: Optional[VendorCreate] = None,
    session: AsyncSession = Depends(get_db),
):
    """Register a vendor under the lowest free id."""
    vendor = await _svc(session).create_vendor(body or VendorCreate())
    return VendorOut.model_validate(vendor)


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    await _svc(session).delete_vendor(vendor_id)
