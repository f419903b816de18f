"""SQLAlchemy ORM model for Vendors.

Ids are plain positive integers handed out by the repository's gap-filling
allocator, so the primary key is never auto-incremented by the database.
"""

from __future__ import annotations

import enum

from sqlalchemy import CheckConstraint, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from vendor_registry.db.base import Base


class PartnerType(str, enum.Enum):
    SUPPLIER = "Supplier"
    PARTNER = "Partner"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class Vendor(Base):
    __tablename__ = "vendors"
    __table_args__ = (
        UniqueConstraint("email", name="uq_vendors_email"),
        CheckConstraint(
            "partner_type IN ('Supplier', 'Partner')", name="ck_vendors_partner_type"
        ),
        CheckConstraint("id > 0", name="ck_vendors_id_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_person: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    # "Supplier" | "Partner"
    partner_type: Mapped[str] = mapped_column(String(20), nullable=False)

    def __repr__(self) -> str:
        return f"<Vendor id={self.id} email={self.email!r}>"
