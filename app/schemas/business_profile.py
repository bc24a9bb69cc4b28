"""Business profile API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.domain.enums import BusinessStructure


class MainContact(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    title: str = Field(..., min_length=1, max_length=200)


class ContactEmails(BaseModel):
    accounts: EmailStr
    admin: EmailStr
    personal: EmailStr | None = None


class ContactPhones(BaseModel):
    primary: str = Field(..., min_length=1, max_length=32)
    secondary: str | None = Field(default=None, max_length=32)
    mobile: str | None = Field(default=None, max_length=32)


class BusinessProfileCreateRequest(BaseModel):
    """Request body for POST /business-profile."""

    full_name: str = Field(..., min_length=1, max_length=255)
    trading_name: str = Field(..., min_length=1, max_length=255)
    abn: str = Field(..., description="11 digits; spaces allowed")
    acn: str | None = Field(default=None, description="9 digits; spaces allowed")
    gst_registered: bool = False
    business_structure: BusinessStructure | None = None
    main_contact: MainContact | None = None
    contact_emails: ContactEmails | None = None
    contact_phones: ContactPhones | None = None


class BusinessProfileUpdateRequest(BaseModel):
    """Request body for PATCH /business-profile (partial; omitted fields are unchanged)."""

    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    trading_name: str | None = Field(default=None, min_length=1, max_length=255)
    abn: str | None = None
    acn: str | None = None
    gst_registered: bool | None = None
    business_structure: BusinessStructure | None = None
    main_contact: MainContact | None = None
    contact_emails: ContactEmails | None = None
    contact_phones: ContactPhones | None = None


class BusinessProfileResponse(BaseModel):
    """Business profile as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    full_name: str
    trading_name: str
    abn: str
    acn: str | None = None
    gst_registered: bool
    business_structure: str | None = None
    main_contact: dict
    contact_emails: dict
    contact_phones: dict
    onboarding_complete_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
