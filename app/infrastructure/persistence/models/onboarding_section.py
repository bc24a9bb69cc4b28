"""BusinessOnboardingSection ORM model. Table: business_onboarding_sections.

One row per (business_profile_id, section_name); data is replaced wholesale on save.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.domain.enums import OnboardingSection
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import onboarding_section_enum


class BusinessOnboardingSection(Base):
    """Opaque JSON payload of one section for one business profile."""

    __tablename__ = "business_onboarding_sections"

    business_profile_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("business_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    section_name: Mapped[OnboardingSection] = mapped_column(
        onboarding_section_enum, primary_key=True
    )
    data: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
