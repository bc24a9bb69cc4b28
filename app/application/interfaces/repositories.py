"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Single-row lookups return None when no row matches; store failures raise
StoreError from the implementation.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
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
    from app.application.dtos.document_requirement import MandatoryDocumentRule
    from app.application.dtos.progress import OnboardingProgressResult
    from app.application.dtos.section import SectionRecordResult
    from app.domain.enums import AgreementType, OnboardingSection


class IBusinessProfileRepository(Protocol):
    """Protocol for business profile repository (DIP)."""

    async def get_by_id(self, profile_id: str) -> BusinessProfileResult | None:
        """Return profile by ID."""

    async def get_by_user_id(self, user_id: str) -> BusinessProfileResult | None:
        """Return the profile owned by user_id."""

    async def create_profile(
        self, profile_id: str, user_id: str, data: BusinessProfileCreate
    ) -> BusinessProfileResult:
        """Insert a new profile.

        Raises BusinessProfileAlreadyExistsException when user_id already owns one.
        """

    async def update_profile(
        self, profile_id: str, updates: dict[str, Any]
    ) -> BusinessProfileResult | None:
        """Apply a partial update; None when the profile does not exist."""

    async def set_onboarding_complete(
        self, profile_id: str, completed_at: datetime
    ) -> BusinessProfileResult | None:
        """Stamp onboarding_complete_at."""


class IAddressRepository(Protocol):
    """Protocol for addresses owned by a business profile."""

    async def create_address(self, data: AddressCreate) -> AddressResult:
        """Insert an address."""

    async def get_by_id(self, address_id: str) -> AddressResult | None:
        """Return address by ID."""

    async def list_by_entity(self, business_profile_id: str) -> list[AddressResult]:
        """Return every address of the business profile, primary first."""

    async def update_address(
        self, address_id: str, updates: dict[str, Any]
    ) -> AddressResult | None:
        """Apply a partial update; None when the address does not exist."""

    async def delete_address(self, address_id: str) -> bool:
        """Delete one address. Returns False when it did not exist."""


class ISectionRepository(Protocol):
    """Protocol for per-section payload storage keyed on (business_profile_id, section)."""

    async def upsert(
        self,
        business_profile_id: str,
        section: OnboardingSection,
        data: dict[str, Any],
        updated_at: datetime,
    ) -> SectionRecordResult:
        """Insert or wholesale-replace the section payload."""

    async def get(
        self, business_profile_id: str, section: OnboardingSection
    ) -> SectionRecordResult | None:
        """Return the stored payload for one section."""

    async def list_by_entity(self, business_profile_id: str) -> list[SectionRecordResult]:
        """Return every stored section for the business profile."""


class IOnboardingDocumentRepository(Protocol):
    """Protocol for onboarding document metadata."""

    async def create_document(self, data: OnboardingDocumentCreate) -> OnboardingDocumentResult:
        """Insert a metadata record."""

    async def delete_document(self, document_id: str) -> bool:
        """Delete one metadata record. Returns False when it did not exist."""

    async def get_by_id(self, document_id: str) -> OnboardingDocumentResult | None:
        """Return document by ID."""

    async def list_by_entity(self, business_profile_id: str) -> list[OnboardingDocumentResult]:
        """Return all documents of the business profile."""

    async def list_by_entity_section(
        self,
        business_profile_id: str,
        section: OnboardingSection,
        include_untagged: bool = False,
    ) -> list[OnboardingDocumentResult]:
        """Return documents tagged with section (and untagged ones when include_untagged)."""


class ISignedAgreementRepository(Protocol):
    """Protocol for signed agreements; one row per (business_profile_id, agreement)."""

    async def upsert(
        self,
        agreement_id: str,
        business_profile_id: str,
        agreement: AgreementType,
        signed_by_user: str,
        signed_at: datetime,
        file_url: str | None,
    ) -> SignedAgreementResult:
        """Insert or replace the signature for the agreement."""

    async def get(
        self, business_profile_id: str, agreement: AgreementType
    ) -> SignedAgreementResult | None:
        """Return the current signature for the agreement."""

    async def list_by_entity(self, business_profile_id: str) -> list[SignedAgreementResult]:
        """Return all signed agreements of the business profile."""


class IOnboardingProgressRepository(Protocol):
    """Protocol for onboarding progress; one row per business profile."""

    async def get(self, business_profile_id: str) -> OnboardingProgressResult | None:
        """Return progress, or None before the first transition."""

    async def upsert(
        self,
        business_profile_id: str,
        current_step: OnboardingSection,
        completed_steps: list[OnboardingSection],
    ) -> OnboardingProgressResult:
        """Insert or replace the progress row."""


class IRequirementCatalog(Protocol):
    """Protocol for the section -> document type rule catalog."""

    async def get_rules(self, section: OnboardingSection) -> list[MandatoryDocumentRule]:
        """Return every rule (mandatory or optional) for section."""

    async def get_mandatory_rules(
        self, section: OnboardingSection
    ) -> list[MandatoryDocumentRule]:
        """Return rules for section with mandatory set."""
