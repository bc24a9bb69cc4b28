"""Business profile repository. Returns application DTOs."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.business_profile import (
    BusinessProfileCreate,
    BusinessProfileResult,
)
from app.domain.exceptions import BusinessProfileAlreadyExistsException
from app.infrastructure.exceptions import StoreError
from app.infrastructure.persistence.models.business_profile import BusinessProfile
from app.infrastructure.persistence.repositories.base import (
    UNIQUE_VIOLATION,
    BaseRepository,
    store_errors,
)


def _to_result(p: BusinessProfile) -> BusinessProfileResult:
    """Map ORM to BusinessProfileResult."""
    return BusinessProfileResult(
        id=p.id,
        user_id=p.user_id,
        full_name=p.full_name,
        trading_name=p.trading_name,
        abn=p.abn,
        acn=p.acn,
        gst_registered=p.gst_registered,
        business_structure=p.business_structure,
        main_contact=dict(p.main_contact or {}),
        contact_emails=dict(p.contact_emails or {}),
        contact_phones=dict(p.contact_phones or {}),
        onboarding_complete_at=p.onboarding_complete_at,
        created_at=p.created_at,
        updated_at=p.updated_at,
    )


class BusinessProfileRepository(BaseRepository[BusinessProfile]):
    """Business profile repository (unique per user_id)."""

    collection = "business_profiles"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, BusinessProfile)

    async def get_by_id(self, profile_id: str) -> BusinessProfileResult | None:
        row = await self._get_model_by_id(profile_id)
        return _to_result(row) if row else None

    async def get_by_user_id(self, user_id: str) -> BusinessProfileResult | None:
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(BusinessProfile).where(BusinessProfile.user_id == user_id)
            )
            row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def create_profile(
        self, profile_id: str, user_id: str, data: BusinessProfileCreate
    ) -> BusinessProfileResult:
        row = BusinessProfile(
            id=profile_id,
            user_id=user_id,
            full_name=data.full_name,
            trading_name=data.trading_name,
            abn=data.abn,
            acn=data.acn,
            gst_registered=data.gst_registered,
            business_structure=data.business_structure,
            main_contact=data.main_contact or {},
            contact_emails=data.contact_emails or {},
            contact_phones=data.contact_phones or {},
        )
        try:
            created = await self._create(row)
        except StoreError as e:
            # A concurrent first submission for the same user won the insert.
            if e.provider_code == UNIQUE_VIOLATION:
                raise BusinessProfileAlreadyExistsException(user_id) from e
            raise
        return _to_result(created)

    async def update_profile(
        self, profile_id: str, updates: dict[str, Any]
    ) -> BusinessProfileResult | None:
        """Apply updates and return the refreshed row (None when missing)."""
        if not updates:
            return await self.get_by_id(profile_id)
        with store_errors("update", self.collection):
            result = await self.db.execute(
                update(BusinessProfile)
                .where(BusinessProfile.id == profile_id)
                .values(**updates)
                .returning(BusinessProfile)
                .execution_options(populate_existing=True)
            )
            row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def set_onboarding_complete(
        self, profile_id: str, completed_at: datetime
    ) -> BusinessProfileResult | None:
        return await self.update_profile(
            profile_id, {"onboarding_complete_at": completed_at}
        )

    async def list_ids(self) -> list[str]:
        """All business profile ids, oldest first (used by maintenance scripts)."""
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(BusinessProfile.id).order_by(BusinessProfile.created_at)
            )
            return list(result.scalars().all())
