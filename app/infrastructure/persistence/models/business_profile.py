"""BusinessProfile ORM model. Table: business_profiles."""

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class BusinessProfile(CuidMixin, TimestampMixin, Base):
    """The business entity being onboarded. At most one per user (unique user_id)."""

    __tablename__ = "business_profiles"

    user_id: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    full_name: Mapped[str] = mapped_column(String, nullable=False)
    trading_name: Mapped[str] = mapped_column(String, nullable=False)
    abn: Mapped[str] = mapped_column(String(11), nullable=False)
    acn: Mapped[str | None] = mapped_column(String(9), nullable=True)
    gst_registered: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    business_structure: Mapped[str | None] = mapped_column(String, nullable=True)
    # {name, title}
    main_contact: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)
    # {accounts, admin, personal?}
    contact_emails: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)
    # {primary, secondary?, mobile?}
    contact_phones: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)
    onboarding_complete_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
