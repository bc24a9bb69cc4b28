"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repos, storage).
"""

from app.application.interfaces import (
    IAddressRepository,
    IBusinessProfileRepository,
    IOnboardingDocumentRepository,
    IOnboardingProgressRepository,
    IRequirementCatalog,
    ISectionRepository,
    ISignedAgreementRepository,
    IStorageService,
)
from app.application.services.requirement_catalog import StaticRequirementCatalog
from app.application.use_cases.onboarding import OnboardingOrchestrator

__all__ = [
    "IAddressRepository",
    "IBusinessProfileRepository",
    "IOnboardingDocumentRepository",
    "IOnboardingProgressRepository",
    "IRequirementCatalog",
    "ISectionRepository",
    "ISignedAgreementRepository",
    "IStorageService",
    "OnboardingOrchestrator",
    "StaticRequirementCatalog",
]
