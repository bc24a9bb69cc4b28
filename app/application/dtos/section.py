"""DTOs for per-section onboarding data."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from app.domain.enums import OnboardingSection


@dataclass(frozen=True)
class SectionRecordResult:
    """Stored payload for one (business profile, section) pair."""

    business_profile_id: str
    section_name: OnboardingSection
    data: dict[str, Any]
    updated_at: datetime | None
