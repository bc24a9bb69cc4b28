"""DTOs for document requirements (mandatory vs uploaded check)."""

from dataclasses import dataclass

from app.application.dtos.document import OnboardingDocumentResult
from app.domain.enums import DocumentType, OnboardingSection


@dataclass(frozen=True)
class MandatoryDocumentRule:
    """Catalog rule: whether doc_type is mandatory for section_name."""

    section_name: OnboardingSection
    doc_type: DocumentType
    mandatory: bool
    notes: str | None = None


@dataclass(frozen=True)
class SectionRequirementsResult:
    """Mandatory rules vs uploaded documents for one section of one business."""

    section: OnboardingSection
    required: list[MandatoryDocumentRule]
    uploaded: list[OnboardingDocumentResult]
    missing: list[MandatoryDocumentRule]
    can_proceed: bool
