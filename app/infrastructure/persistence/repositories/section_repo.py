"""Onboarding section repository: upsert keyed on (business_profile_id, section_name)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.section import SectionRecordResult
from app.domain.enums import OnboardingSection
from app.infrastructure.persistence.models.onboarding_section import (
    BusinessOnboardingSection,
)
from app.infrastructure.persistence.repositories.base import BaseRepository, store_errors


def _to_result(s: BusinessOnboardingSection) -> SectionRecordResult:
    return SectionRecordResult(
        business_profile_id=s.business_profile_id,
        section_name=OnboardingSection(s.section_name),
        data=dict(s.data or {}),
        updated_at=s.updated_at,
    )


class SectionRepository(BaseRepository[BusinessOnboardingSection]):
    """Per-section payloads. Saving replaces data wholesale (last write wins)."""

    collection = "business_onboarding_sections"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, BusinessOnboardingSection)

    async def upsert(
        self,
        business_profile_id: str,
        section: OnboardingSection,
        data: dict[str, Any],
        updated_at: datetime,
    ) -> SectionRecordResult:
        stmt = pg_insert(BusinessOnboardingSection).values(
            business_profile_id=business_profile_id,
            section_name=section,
            data=data,
            updated_at=updated_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["business_profile_id", "section_name"],
            set_={"data": stmt.excluded["data"], "updated_at": stmt.excluded["updated_at"]},
        ).returning(BusinessOnboardingSection)
        with store_errors("upsert", self.collection):
            result = await self.db.execute(
                stmt, execution_options={"populate_existing": True}
            )
            row = result.scalar_one()
        return _to_result(row)

    async def get(
        self, business_profile_id: str, section: OnboardingSection
    ) -> SectionRecordResult | None:
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(BusinessOnboardingSection).where(
                    BusinessOnboardingSection.business_profile_id == business_profile_id,
                    BusinessOnboardingSection.section_name == section,
                )
            )
            row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def list_by_entity(self, business_profile_id: str) -> list[SectionRecordResult]:
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(BusinessOnboardingSection).where(
                    BusinessOnboardingSection.business_profile_id == business_profile_id
                )
            )
            rows = result.scalars().all()
        return [_to_result(r) for r in rows]
