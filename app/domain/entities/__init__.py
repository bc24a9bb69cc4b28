"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.business_profile import BusinessProfileEntity
from app.domain.entities.progress import OnboardingProgressEntity

__all__ = [
    "BusinessProfileEntity",
    "OnboardingProgressEntity",
]
