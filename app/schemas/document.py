"""Onboarding document API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from app.domain.enums import DocumentType, OnboardingSection


class OnboardingDocumentResponse(BaseModel):
    """Document metadata as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    business_profile_id: str
    section_name: OnboardingSection | None = None
    doc_type: DocumentType
    file_url: str
    expiry_date: date | None = None
    uploaded_at: datetime | None = None


class DocumentDeleteResponse(BaseModel):
    id: str
    deleted: bool
