"""SQLAlchemy mixins and shared column types for onboarding models (DRY).

Provides: CuidMixin, TimestampMixin, BusinessProfileMixin and the
Postgres enum types shared across tables.
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.domain.enums import AddressType, AgreementType, DocumentType, OnboardingSection
from app.shared.utils.generators import generate_cuid


def _enum_values(enum_cls: type) -> list[str]:
    return [member.value for member in enum_cls]


# Postgres enum types; values (not member names) are persisted.
onboarding_section_enum = SAEnum(
    OnboardingSection, name="onboarding_section", values_callable=_enum_values
)
document_type_enum = SAEnum(
    DocumentType, name="document_type", values_callable=_enum_values
)
agreement_type_enum = SAEnum(
    AgreementType, name="agreement_type", values_callable=_enum_values
)
address_type_enum = SAEnum(
    AddressType, name="address_type", values_callable=_enum_values
)


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class BusinessProfileMixin:
    """Mixin for rows owned by a business profile (FK with CASCADE delete)."""

    @declared_attr
    def business_profile_id(cls) -> Mapped[str]:
        return mapped_column(
            String,
            ForeignKey("business_profiles.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
