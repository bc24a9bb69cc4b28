"""Address repository. Returns application DTOs."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.address import AddressCreate, AddressResult
from app.domain.enums import AddressType
from app.infrastructure.persistence.models.address import Address
from app.infrastructure.persistence.repositories.base import BaseRepository, store_errors


def _to_result(a: Address) -> AddressResult:
    return AddressResult(
        id=a.id,
        business_profile_id=a.business_profile_id,
        address_type=AddressType(a.address_type),
        line1=a.line1,
        line2=a.line2,
        suburb=a.suburb,
        state=a.state,
        postcode=a.postcode,
        country=a.country,
        is_primary=a.is_primary,
    )


class AddressRepository(BaseRepository[Address]):
    """Addresses of business profiles (many per profile)."""

    collection = "addresses"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Address)

    async def create_address(self, data: AddressCreate) -> AddressResult:
        row = Address(
            id=data.id,
            business_profile_id=data.business_profile_id,
            address_type=data.address_type,
            line1=data.line1,
            line2=data.line2,
            suburb=data.suburb,
            state=data.state,
            postcode=data.postcode,
            country=data.country,
            is_primary=data.is_primary,
        )
        created = await self._create(row)
        return _to_result(created)

    async def get_by_id(self, address_id: str) -> AddressResult | None:
        row = await self._get_model_by_id(address_id)
        return _to_result(row) if row else None

    async def list_by_entity(self, business_profile_id: str) -> list[AddressResult]:
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(Address)
                .where(Address.business_profile_id == business_profile_id)
                .order_by(Address.is_primary.desc(), Address.address_type, Address.id)
            )
            rows = result.scalars().all()
        return [_to_result(r) for r in rows]

    async def update_address(
        self, address_id: str, updates: dict[str, Any]
    ) -> AddressResult | None:
        if not updates:
            return await self.get_by_id(address_id)
        with store_errors("update", self.collection):
            result = await self.db.execute(
                update(Address)
                .where(Address.id == address_id)
                .values(**updates)
                .returning(Address)
                .execution_options(populate_existing=True)
            )
            row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def delete_address(self, address_id: str) -> bool:
        row = await self._get_model_by_id(address_id)
        if row is None:
            return False
        await self._delete(row)
        return True
