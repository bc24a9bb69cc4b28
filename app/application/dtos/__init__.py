"""Application DTOs (no ORM dependency)."""

from app.application.dtos.address import AddressCreate, AddressResult
from app.application.dtos.agreement import SignedAgreementResult
from app.application.dtos.business_profile import (
    BusinessProfileCreate,
    BusinessProfileResult,
)
from app.application.dtos.document import (
    OnboardingDocumentCreate,
    OnboardingDocumentResult,
)
from app.application.dtos.document_requirement import (
    MandatoryDocumentRule,
    SectionRequirementsResult,
)
from app.application.dtos.onboarding_status import (
    OnboardingSnapshotResult,
    OverallStatusResult,
    SectionNavigationResult,
    SectionStatusItem,
    SectionSubmitResult,
)
from app.application.dtos.progress import OnboardingProgressResult
from app.application.dtos.reconciliation import OrphanSweepResult
from app.application.dtos.section import SectionRecordResult

__all__ = [
    "AddressCreate",
    "AddressResult",
    "BusinessProfileCreate",
    "BusinessProfileResult",
    "MandatoryDocumentRule",
    "OnboardingDocumentCreate",
    "OnboardingDocumentResult",
    "OnboardingProgressResult",
    "OnboardingSnapshotResult",
    "OrphanSweepResult",
    "OverallStatusResult",
    "SectionNavigationResult",
    "SectionRecordResult",
    "SectionRequirementsResult",
    "SectionStatusItem",
    "SectionSubmitResult",
    "SignedAgreementResult",
]
