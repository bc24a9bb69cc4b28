"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.address_repo import AddressRepository
from app.infrastructure.persistence.repositories.agreement_repo import (
    SignedAgreementRepository,
)
from app.infrastructure.persistence.repositories.base import BaseRepository, store_errors
from app.infrastructure.persistence.repositories.business_profile_repo import (
    BusinessProfileRepository,
)
from app.infrastructure.persistence.repositories.document_repo import (
    OnboardingDocumentRepository,
)
from app.infrastructure.persistence.repositories.progress_repo import (
    OnboardingProgressRepository,
)
from app.infrastructure.persistence.repositories.section_repo import SectionRepository

__all__ = [
    "AddressRepository",
    "BaseRepository",
    "BusinessProfileRepository",
    "OnboardingDocumentRepository",
    "OnboardingProgressRepository",
    "SectionRepository",
    "SignedAgreementRepository",
    "store_errors",
]
