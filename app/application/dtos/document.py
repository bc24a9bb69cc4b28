"""DTOs for onboarding document use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import date, datetime

from app.domain.enums import DocumentType, OnboardingSection


@dataclass(frozen=True)
class OnboardingDocumentCreate:
    """Input for creating a document metadata record (write-model).

    Use case builds this after the bytes are stored; repo persists and
    returns OnboardingDocumentResult.
    """

    id: str
    business_profile_id: str
    section_name: OnboardingSection | None
    doc_type: DocumentType
    storage_ref: str
    file_url: str
    expiry_date: date | None = None


@dataclass(frozen=True)
class OnboardingDocumentResult:
    """Document metadata read-model. Never updated in place.

    storage_ref addresses the bytes in the file store; file_url is the
    public address derived from it at upload time.
    """

    id: str
    business_profile_id: str
    section_name: OnboardingSection | None
    doc_type: DocumentType
    storage_ref: str
    file_url: str
    expiry_date: date | None
    uploaded_at: datetime | None
