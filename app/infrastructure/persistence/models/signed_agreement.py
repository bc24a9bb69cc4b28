"""SignedAgreement ORM model. Table: signed_agreements."""

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import AgreementType
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    BusinessProfileMixin,
    CuidMixin,
    agreement_type_enum,
)


class SignedAgreement(CuidMixin, BusinessProfileMixin, Base):
    """Latest signature of one agreement type by a business profile."""

    __tablename__ = "signed_agreements"

    agreement: Mapped[AgreementType] = mapped_column(agreement_type_enum, nullable=False)
    signed_by_user: Mapped[str] = mapped_column(String, nullable=False)
    signed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    file_url: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "business_profile_id",
            "agreement",
            name="uq_signed_agreements_business_profile_agreement",
        ),
    )
