"""Vendor Pydantic schemas (request DTOs and response models)."""


from vendor_registry.schemas.common import ApiModel

class VendorCreate(ApiModel):
    # Presence and partner_type are checked by VendorService so that every
    # field error maps to the same 400 response.
    name: str | None = None
    contact_person: str | None = None
    email: str | None = None
    partner_type: str | None = None

class VendorOut(ApiModel):
    id: int
    name: str
    contact_person: str
    email: str
    partner_type: str
