"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.address import Address
from app.infrastructure.persistence.models.business_profile import BusinessProfile
from app.infrastructure.persistence.models.mixins import (
    BusinessProfileMixin,
    CuidMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.onboarding_document import OnboardingDocument
from app.infrastructure.persistence.models.onboarding_progress import OnboardingProgress
from app.infrastructure.persistence.models.onboarding_section import (
    BusinessOnboardingSection,
)
from app.infrastructure.persistence.models.signed_agreement import SignedAgreement

__all__ = [
    "Address",
    "BusinessOnboardingSection",
    "BusinessProfile",
    "BusinessProfileMixin",
    "CuidMixin",
    "OnboardingDocument",
    "OnboardingProgress",
    "SignedAgreement",
    "TimestampMixin",
]
