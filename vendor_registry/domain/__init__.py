"""Domain package — all ORM models are imported here so metadata.create_all sees them.

Folder intent:
  vendor.py  — Vendor table and the PartnerType enum
"""

from vendor_registry.domain.vendor import PartnerType, Vendor

__all__ = [
    "PartnerType",
    "Vendor",
]
