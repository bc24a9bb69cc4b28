"""DTOs for onboarding progress."""

from dataclasses import dataclass

from app.domain.enums import OnboardingSection


@dataclass(frozen=True)
class OnboardingProgressResult:
    """Progress read-model: current pointer and completed sections (completion order)."""

    business_profile_id: str
    current_step: OnboardingSection
    completed_steps: list[OnboardingSection]
