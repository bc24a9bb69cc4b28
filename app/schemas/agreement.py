"""Signed agreement API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import AgreementType


class SignAgreementRequest(BaseModel):
    """Request body for POST /agreements/{agreement}/sign."""

    file_url: str | None = Field(default=None, max_length=2048)


class SignedAgreementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    business_profile_id: str
    agreement: AgreementType
    signed_by_user: str
    signed_at: datetime
    file_url: str | None = None


class AgreementStatusResponse(BaseModel):
    """Response for GET /agreements/{agreement}."""

    agreement: AgreementType
    signed: bool
    signature: SignedAgreementResponse | None = None
