"""Onboarding progress repository: one row per business profile."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.progress import OnboardingProgressResult
from app.domain.enums import OnboardingSection
from app.infrastructure.persistence.models.onboarding_progress import OnboardingProgress
from app.infrastructure.persistence.repositories.base import BaseRepository, store_errors


def _to_result(p: OnboardingProgress) -> OnboardingProgressResult:
    return OnboardingProgressResult(
        business_profile_id=p.business_profile_id,
        current_step=OnboardingSection(p.current_step),
        completed_steps=[OnboardingSection(s) for s in (p.completed_steps or [])],
    )


class OnboardingProgressRepository(BaseRepository[OnboardingProgress]):
    """Progress rows, written with a single upsert (last write wins)."""

    collection = "onboarding_progress"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, OnboardingProgress)

    async def get(self, business_profile_id: str) -> OnboardingProgressResult | None:
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(OnboardingProgress).where(
                    OnboardingProgress.business_profile_id == business_profile_id
                )
            )
            row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def upsert(
        self,
        business_profile_id: str,
        current_step: OnboardingSection,
        completed_steps: list[OnboardingSection],
    ) -> OnboardingProgressResult:
        stmt = pg_insert(OnboardingProgress).values(
            business_profile_id=business_profile_id,
            current_step=current_step,
            completed_steps=list(completed_steps),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["business_profile_id"],
            set_={
                "current_step": stmt.excluded.current_step,
                "completed_steps": stmt.excluded.completed_steps,
            },
        ).returning(OnboardingProgress)
        with store_errors("upsert", self.collection):
            result = await self.db.execute(
                stmt, execution_options={"populate_existing": True}
            )
            row = result.scalar_one()
        return _to_result(row)
