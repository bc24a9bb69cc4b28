"""DTOs for aggregate onboarding views (status and resume snapshot)."""

from dataclasses import dataclass
from typing import Any

from app.application.dtos.agreement import SignedAgreementResult
from app.application.dtos.document import OnboardingDocumentResult
from app.application.dtos.progress import OnboardingProgressResult
from app.domain.enums import OnboardingSection


@dataclass(frozen=True)
class SectionStatusItem:
    """Completion state of one section in workflow order."""

    section: OnboardingSection
    completed: bool
    is_current: bool


@dataclass(frozen=True)
class OverallStatusResult:
    """Whole-workflow view for one business profile."""

    business_profile_id: str
    progress: list[SectionStatusItem]
    current_step: OnboardingSection
    completed_steps: list[OnboardingSection]
    documents: list[OnboardingDocumentResult]
    agreements: list[SignedAgreementResult]
    is_complete: bool


@dataclass(frozen=True)
class OnboardingSnapshotResult:
    """Everything needed to resume the workflow in one read.

    sections holds every section, with an empty dict for sections never saved.
    """

    business_profile_id: str
    progress: OnboardingProgressResult | None
    current_section: OnboardingSection
    sections: dict[OnboardingSection, dict[str, Any]]
    documents: list[OnboardingDocumentResult]
    agreements: list[SignedAgreementResult]


@dataclass(frozen=True)
class SectionSubmitResult:
    """Outcome of saving and completing a section in one step."""

    progress: OnboardingProgressResult
    next_section: OnboardingSection | None


@dataclass(frozen=True)
class SectionNavigationResult:
    section: OnboardingSection
    next_section: OnboardingSection | None
    previous_section: OnboardingSection | None
