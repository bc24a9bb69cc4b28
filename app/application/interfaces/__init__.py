"""Application interfaces (ports): repository and storage protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IAddressRepository,
    IBusinessProfileRepository,
    IOnboardingDocumentRepository,
    IOnboardingProgressRepository,
    IRequirementCatalog,
    ISectionRepository,
    ISignedAgreementRepository,
)
from app.application.interfaces.storage import IStorageService

__all__ = [
    "IAddressRepository",
    "IBusinessProfileRepository",
    "IOnboardingDocumentRepository",
    "IOnboardingProgressRepository",
    "IRequirementCatalog",
    "ISectionRepository",
    "ISignedAgreementRepository",
    "IStorageService",
]
