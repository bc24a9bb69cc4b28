"""Domain layer: entities, enums, section ordering, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import (
    BusinessProfileEntity,
    OnboardingProgressEntity,
)
from app.domain.enums import (
    AgreementType,
    BusinessStructure,
    DocumentType,
    OnboardingSection,
)
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    BusinessProfileAlreadyExistsException,
    OnboardingException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from app.domain.sections import SECTION_ORDER, next_section, previous_section

__all__ = [
    # Entities
    "BusinessProfileEntity",
    "OnboardingProgressEntity",
    # Enums
    "AgreementType",
    "BusinessStructure",
    "DocumentType",
    "OnboardingSection",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "BusinessProfileAlreadyExistsException",
    "OnboardingException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
    # Sections
    "SECTION_ORDER",
    "next_section",
    "previous_section",
]
