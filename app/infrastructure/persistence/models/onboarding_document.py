"""OnboardingDocument ORM model. Table: onboarding_documents. Rows are never updated in place."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.domain.enums import DocumentType, OnboardingSection
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    BusinessProfileMixin,
    CuidMixin,
    document_type_enum,
    onboarding_section_enum,
)


class OnboardingDocument(CuidMixin, BusinessProfileMixin, Base):
    """Metadata of an uploaded supporting document.

    section_name is null for business-wide documents.
    """

    __tablename__ = "onboarding_documents"

    section_name: Mapped[OnboardingSection | None] = mapped_column(
        onboarding_section_enum, nullable=True
    )
    doc_type: Mapped[DocumentType] = mapped_column(document_type_enum, nullable=False)
    storage_ref: Mapped[str] = mapped_column(String, nullable=False)
    file_url: Mapped[str] = mapped_column(String, nullable=False)
    expiry_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index(
            "ix_onboarding_documents_business_profile_section",
            "business_profile_id",
            "section_name",
        ),
        UniqueConstraint("storage_ref", name="uq_onboarding_documents_storage_ref"),
    )
