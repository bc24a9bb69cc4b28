"""OnboardingProgress ORM model. Table: onboarding_progress (one row per business profile)."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import OnboardingSection
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import onboarding_section_enum


class OnboardingProgress(Base):
    """Current pointer and completed sections (completion order, no duplicates)."""

    __tablename__ = "onboarding_progress"

    business_profile_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("business_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    current_step: Mapped[OnboardingSection] = mapped_column(
        onboarding_section_enum,
        nullable=False,
        default=OnboardingSection.BASIC,
    )
    completed_steps: Mapped[list[OnboardingSection]] = mapped_column(
        ARRAY(onboarding_section_enum), nullable=False, default=list
    )
