"""Section data store: per-section payloads keyed on (business profile, section)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.section import SectionRecordResult
from app.application.interfaces.repositories import ISectionRepository
from app.application.use_cases.validation import (
    require_business_profile_id,
    require_section,
)
from app.domain.enums import OnboardingSection
from app.domain.sections import SECTION_ORDER
from app.shared.utils.datetime import utc_now


class SectionDataService:
    """Saves and reads section payloads. Each save replaces the payload wholesale."""

    def __init__(self, section_repo: ISectionRepository) -> None:
        self.section_repo = section_repo

    async def save_section(
        self,
        business_profile_id: str,
        section: OnboardingSection | str,
        data: dict[str, Any],
    ) -> SectionRecordResult:
        """Upsert the payload for (business_profile_id, section) and return the stored record.

        Raises:
            ValidationException: Empty business profile id or unknown section.
        """
        business_profile_id = require_business_profile_id(business_profile_id)
        section = require_section(section)
        return await self.section_repo.upsert(
            business_profile_id=business_profile_id,
            section=section,
            data=dict(data),
            updated_at=utc_now(),
        )

    async def get_section(
        self,
        business_profile_id: str,
        section: OnboardingSection | str,
    ) -> SectionRecordResult | None:
        business_profile_id = require_business_profile_id(business_profile_id)
        return await self.section_repo.get(business_profile_id, require_section(section))

    async def get_all_sections(self, business_profile_id: str) -> list[SectionRecordResult]:
        business_profile_id = require_business_profile_id(business_profile_id)
        return await self.section_repo.list_by_entity(business_profile_id)

    async def get_section_data_map(
        self, business_profile_id: str
    ) -> dict[OnboardingSection, dict[str, Any]]:
        """Return every section's payload in workflow order; {} for sections never saved."""
        records = await self.get_all_sections(business_profile_id)
        by_section = {r.section_name: r.data for r in records}
        return {section: by_section.get(section, {}) for section in SECTION_ORDER}
