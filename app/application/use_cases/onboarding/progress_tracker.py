"""Progress tracker: one progress record per business profile and the step advancement rule."""

from __future__ import annotations

from app.application.dtos.progress import OnboardingProgressResult
from app.application.interfaces.repositories import IOnboardingProgressRepository
from app.application.use_cases.validation import (
    require_business_profile_id,
    require_section,
)
from app.domain.entities.progress import OnboardingProgressEntity
from app.domain.enums import OnboardingSection
from app.domain.sections import next_section, previous_section


def _to_entity(
    business_profile_id: str, progress: OnboardingProgressResult | None
) -> OnboardingProgressEntity:
    if progress is None:
        return OnboardingProgressEntity.initial(business_profile_id)
    return OnboardingProgressEntity(
        business_profile_id=progress.business_profile_id,
        current_step=progress.current_step,
        completed_steps=list(progress.completed_steps),
    )


class ProgressTracker:
    """Reads and advances onboarding progress.

    Progress is created lazily on the first transition; before that
    get_progress returns None and callers treat the state as
    current_step=basic with nothing completed.
    """

    def __init__(self, progress_repo: IOnboardingProgressRepository) -> None:
        self.progress_repo = progress_repo

    async def get_progress(self, business_profile_id: str) -> OnboardingProgressResult | None:
        business_profile_id = require_business_profile_id(business_profile_id)
        return await self.progress_repo.get(business_profile_id)

    async def mark_step_complete(
        self,
        business_profile_id: str,
        step: OnboardingSection | str,
    ) -> OnboardingProgressResult:
        """Record step as completed and move the pointer to the following section.

        The step is appended to completed_steps only when absent. When step is
        the last section the pointer stays on it. Completing out of order is
        allowed. The record is written with a single upsert (last write wins).

        Raises:
            ValidationException: Empty business profile id or unknown section.
        """
        business_profile_id = require_business_profile_id(business_profile_id)
        step = require_section(step)
        existing = await self.progress_repo.get(business_profile_id)
        entity = _to_entity(business_profile_id, existing)
        entity.mark_complete(step)
        return await self.progress_repo.upsert(
            business_profile_id=business_profile_id,
            current_step=entity.current_step,
            completed_steps=entity.completed_steps,
        )

    @staticmethod
    def get_next_section(current: OnboardingSection | str) -> OnboardingSection | None:
        """Section after current; None when current is the last section."""
        return next_section(require_section(current))

    @staticmethod
    def get_previous_section(current: OnboardingSection | str) -> OnboardingSection | None:
        """Section before current; None when current is the first section."""
        return previous_section(require_section(current))

    @staticmethod
    def is_complete(progress: OnboardingProgressResult | None) -> bool:
        """True iff every section is in completed_steps. Missing progress is not complete."""
        if progress is None:
            return False
        return _to_entity(progress.business_profile_id, progress).is_complete()

    @staticmethod
    def is_section_complete(
        progress: OnboardingProgressResult | None, section: OnboardingSection | str
    ) -> bool:
        if progress is None:
            return False
        return require_section(section) in progress.completed_steps
