"""DTOs for business profile addresses (no dependency on ORM)."""

from dataclasses import dataclass

from app.domain.enums import AddressType


@dataclass(frozen=True)
class AddressCreate:
    """Input for inserting an address row."""

    id: str
    business_profile_id: str
    address_type: AddressType
    line1: str
    suburb: str
    state: str
    postcode: str
    line2: str | None = None
    country: str = "Australia"
    is_primary: bool = False


@dataclass(frozen=True)
class AddressResult:
    """Address read-model."""

    id: str
    business_profile_id: str
    address_type: AddressType
    line1: str
    line2: str | None
    suburb: str
    state: str
    postcode: str
    country: str
    is_primary: bool
