"""Address ORM model. Table: addresses."""

from sqlalchemy import Boolean, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import AddressType
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    BusinessProfileMixin,
    CuidMixin,
    address_type_enum,
)


class Address(CuidMixin, BusinessProfileMixin, Base):
    """Postal or property address of a business profile."""

    __tablename__ = "addresses"

    address_type: Mapped[AddressType] = mapped_column(address_type_enum, nullable=False)
    line1: Mapped[str] = mapped_column(String, nullable=False)
    line2: Mapped[str | None] = mapped_column(String, nullable=True)
    suburb: Mapped[str] = mapped_column(String, nullable=False)
    state: Mapped[str] = mapped_column(String, nullable=False)
    postcode: Mapped[str] = mapped_column(String(10), nullable=False)
    country: Mapped[str] = mapped_column(
        String, nullable=False, default="Australia", server_default="Australia"
    )
    is_primary: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )

    __table_args__ = (
        Index("ix_addresses_business_profile_type", "business_profile_id", "address_type"),
    )
