"""Application use cases: one entry point per workflow."""

from app.application.use_cases.addresses import AddressService
from app.application.use_cases.agreements import AgreementService
from app.application.use_cases.business_profiles import BusinessProfileService
from app.application.use_cases.documents import (
    FindOrphanedUploadsUseCase,
    OnboardingDocumentService,
)
from app.application.use_cases.onboarding import (
    OnboardingOrchestrator,
    ProgressTracker,
    RequirementEvaluator,
    SectionDataService,
)

__all__ = [
    "AddressService",
    "AgreementService",
    "BusinessProfileService",
    "FindOrphanedUploadsUseCase",
    "OnboardingDocumentService",
    "OnboardingOrchestrator",
    "ProgressTracker",
    "RequirementEvaluator",
    "SectionDataService",
]
