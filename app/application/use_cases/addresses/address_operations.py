"""Address operations: postal and property addresses of a business profile."""

from __future__ import annotations

from typing import Any

from app.application.dtos.address import AddressCreate, AddressResult
from app.application.interfaces.repositories import IAddressRepository
from app.application.use_cases.validation import require_business_profile_id
from app.domain.enums import AddressType
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.utils.generators import generate_cuid

REQUIRED_TEXT_FIELDS = ("line1", "suburb", "state", "postcode", "country")
UPDATABLE_FIELDS = frozenset(
    {"address_type", "line1", "line2", "suburb", "state", "postcode", "country", "is_primary"}
)
NULLABLE_FIELDS = frozenset({"line2"})


def require_address_type(value: AddressType | str) -> AddressType:
    if isinstance(value, AddressType):
        return value
    try:
        return AddressType(value)
    except ValueError:
        raise ValidationException(
            f"Unknown address type: {value}", field="address_type"
        ) from None


def _require_text(fields: dict[str, Any]) -> None:
    for key in REQUIRED_TEXT_FIELDS:
        if key in fields and (fields[key] is None or not str(fields[key]).strip()):
            raise ValidationException(f"{key} is required", field=key)


class AddressService:
    """Creates, lists, updates and deletes the addresses of one business profile.

    Every lookup is scoped to the business profile: an address that belongs
    to another profile reads as not found.
    """

    def __init__(self, address_repo: IAddressRepository) -> None:
        self.address_repo = address_repo

    async def create(
        self,
        business_profile_id: str,
        address_type: AddressType | str,
        line1: str,
        suburb: str,
        state: str,
        postcode: str,
        line2: str | None = None,
        country: str = "Australia",
        is_primary: bool = False,
    ) -> AddressResult:
        """Insert an address for the business profile.

        Raises:
            ValidationException: Unknown address type or a blank required field.
        """
        business_profile_id = require_business_profile_id(business_profile_id)
        _require_text(
            {"line1": line1, "suburb": suburb, "state": state, "postcode": postcode, "country": country}
        )
        return await self.address_repo.create_address(
            AddressCreate(
                id=generate_cuid(),
                business_profile_id=business_profile_id,
                address_type=require_address_type(address_type),
                line1=line1.strip(),
                line2=line2,
                suburb=suburb.strip(),
                state=state.strip(),
                postcode=postcode.strip(),
                country=country.strip(),
                is_primary=is_primary,
            )
        )

    async def list_by_entity(self, business_profile_id: str) -> list[AddressResult]:
        business_profile_id = require_business_profile_id(business_profile_id)
        return await self.address_repo.list_by_entity(business_profile_id)

    async def get_owned(self, business_profile_id: str, address_id: str) -> AddressResult:
        """Return the address when it belongs to business_profile_id.

        Raises:
            ResourceNotFoundException: No such address for this business profile.
        """
        address = await self.address_repo.get_by_id(address_id)
        if address is None or address.business_profile_id != business_profile_id:
            raise ResourceNotFoundException("address", address_id)
        return address

    async def update(
        self, business_profile_id: str, address_id: str, updates: dict[str, Any]
    ) -> AddressResult:
        """Apply a partial update. Only line2 may be cleared with null.

        Raises:
            ValidationException: Unknown field, unknown address type or a
                blank required field.
            ResourceNotFoundException: No such address for this business profile.
        """
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationException(
                f"Fields cannot be updated: {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )
        nulled = sorted(k for k, v in updates.items() if v is None and k not in NULLABLE_FIELDS)
        if nulled:
            raise ValidationException(f"{nulled[0]} cannot be null", field=nulled[0])
        _require_text(updates)
        updates = dict(updates)
        if "address_type" in updates:
            updates["address_type"] = require_address_type(updates["address_type"])

        await self.get_owned(business_profile_id, address_id)
        updated = await self.address_repo.update_address(address_id, updates)
        if updated is None:
            raise ResourceNotFoundException("address", address_id)
        return updated

    async def delete(self, business_profile_id: str, address_id: str) -> None:
        """Delete the address.

        Raises:
            ResourceNotFoundException: No such address for this business profile.
        """
        await self.get_owned(business_profile_id, address_id)
        await self.address_repo.delete_address(address_id)
