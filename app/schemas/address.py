"""Address API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import AddressType


class AddressCreateRequest(BaseModel):
    """Request body for POST /business-profile/addresses."""

    address_type: AddressType
    line1: str = Field(..., min_length=1, max_length=255)
    line2: str | None = Field(default=None, max_length=255)
    suburb: str = Field(..., min_length=1, max_length=120)
    state: str = Field(..., min_length=1, max_length=50)
    postcode: str = Field(..., min_length=1, max_length=10)
    country: str = Field(default="Australia", min_length=1, max_length=100)
    is_primary: bool = False


class AddressUpdateRequest(BaseModel):
    """Request body for PATCH /business-profile/addresses/{id} (partial)."""

    address_type: AddressType | None = None
    line1: str | None = Field(default=None, min_length=1, max_length=255)
    line2: str | None = Field(default=None, max_length=255)
    suburb: str | None = Field(default=None, min_length=1, max_length=120)
    state: str | None = Field(default=None, min_length=1, max_length=50)
    postcode: str | None = Field(default=None, min_length=1, max_length=10)
    country: str | None = Field(default=None, min_length=1, max_length=100)
    is_primary: bool | None = None


class AddressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    business_profile_id: str
    address_type: AddressType
    line1: str
    line2: str | None = None
    suburb: str
    state: str
    postcode: str
    country: str
    is_primary: bool


class AddressDeleteResponse(BaseModel):
    id: str
    deleted: bool
