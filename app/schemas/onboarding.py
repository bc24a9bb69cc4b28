"""Onboarding API schemas: per-section payloads, progress, status, and requirements.

Each section has its own payload model; SECTION_PAYLOAD_MODELS keys them by
section so a PUT to /sections/{section} is validated against the right shape.
The store keeps payloads as opaque JSON.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import DocumentType, OnboardingSection
from app.schemas.agreement import SignedAgreementResponse
from app.schemas.business_profile import ContactEmails, ContactPhones, MainContact
from app.schemas.document import OnboardingDocumentResponse


class SectionPayload(BaseModel):
    """Base for section payloads. Unknown keys are kept so older clients do not lose data."""

    model_config = ConfigDict(extra="allow")


class AddressPayload(BaseModel):
    line1: str
    line2: str | None = None
    suburb: str
    state: str
    postcode: str
    country: str = "Australia"
    is_primary: bool = False


class BasicSectionData(SectionPayload):
    full_name: str = Field(..., min_length=1)
    trading_name: str = Field(..., min_length=1)
    abn: str = Field(..., pattern=r"^\d{2} ?\d{3} ?\d{3} ?\d{3}$")
    acn: str | None = Field(default=None, pattern=r"^\d{3} ?\d{3} ?\d{3}$")
    gst_registered: bool = False
    main_contact: MainContact
    contact_emails: ContactEmails
    contact_phones: ContactPhones
    business_structure: str
    postal_address: AddressPayload | None = None
    property_addresses: list[AddressPayload] = Field(default_factory=list)


class KeyStaffMember(BaseModel):
    name: str
    role: str
    qualifications: str | None = None


class FarmSectionData(SectionPayload):
    main_farming_activities: list[str] = Field(default_factory=list)
    key_staff: list[KeyStaffMember] = Field(default_factory=list)
    licenses_held: list[str] = Field(default_factory=list)
    chemical_usage: bool = False
    livestock_numbers: dict[str, int] | None = None
    crop_types: list[str] = Field(default_factory=list)
    water_license: bool = False


class AdvisorDetails(BaseModel):
    name: str
    contact: str


class FinancialSectionData(SectionPayload):
    bookkeeping_software: str
    bank_feeds_setup: bool = False
    accountant_details: AdvisorDetails | None = None
    bas_agent_details: AdvisorDetails | None = None
    bas_frequency: str
    payroll_needs: bool = False
    num_employees: int = Field(default=0, ge=0)
    payroll_software: str | None = None


class VehicleEntry(BaseModel):
    type: str
    registration: str
    insurance_expiry: str


class InsurancePolicyEntry(BaseModel):
    type: str
    provider: str
    expiry_date: str
    policy_number: str


class SupplierEntry(BaseModel):
    name: str
    contact: str
    services: str


class ComplianceSectionData(SectionPayload):
    vehicles: list[VehicleEntry] = Field(default_factory=list)
    insurance_policies: list[InsurancePolicyEntry] = Field(default_factory=list)
    license_expiry_dates: dict[str, str] = Field(default_factory=dict)
    contract_expiry_dates: dict[str, str] = Field(default_factory=dict)
    suppliers: list[SupplierEntry] = Field(default_factory=list)


class StorageSectionData(SectionPayload):
    cloud_storage_type: str
    access_granted: bool = False
    filing_preference: str


class CommunicationsSectionData(SectionPayload):
    preferred_method: str
    preferred_times: list[str] = Field(default_factory=list)
    reporting_frequency: str


SECTION_PAYLOAD_MODELS: dict[OnboardingSection, type[SectionPayload]] = {
    OnboardingSection.BASIC: BasicSectionData,
    OnboardingSection.FARM: FarmSectionData,
    OnboardingSection.FINANCIAL: FinancialSectionData,
    OnboardingSection.COMPLIANCE: ComplianceSectionData,
    OnboardingSection.STORAGE: StorageSectionData,
    OnboardingSection.COMMUNICATIONS: CommunicationsSectionData,
}


def validate_section_payload(section: OnboardingSection, data: dict[str, Any]) -> dict[str, Any]:
    """Validate data against the section's payload model and return it as JSON-ready dict.

    Only keys the client sent are returned; model defaults are not added,
    so a later read gives back exactly what was saved.

    Raises:
        pydantic.ValidationError: data does not match the section's shape.
    """
    model = SECTION_PAYLOAD_MODELS[section]
    return model.model_validate(data).model_dump(mode="json", exclude_unset=True)


class SectionDataRequest(BaseModel):
    """Request body for PUT/submit of a section."""

    data: dict[str, Any]


class SectionRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    business_profile_id: str
    section_name: OnboardingSection
    data: dict[str, Any]
    updated_at: datetime | None = None


class ProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    business_profile_id: str
    current_step: OnboardingSection
    completed_steps: list[OnboardingSection]
    is_complete: bool = False


class SectionStatusItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    section: OnboardingSection
    completed: bool
    is_current: bool


class OverallStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    business_profile_id: str
    progress: list[SectionStatusItemResponse]
    current_step: OnboardingSection
    completed_steps: list[OnboardingSection]
    documents: list[OnboardingDocumentResponse]
    agreements: list[SignedAgreementResponse]
    is_complete: bool


class OnboardingSnapshotResponse(BaseModel):
    """Response for GET /onboarding (resume view)."""

    business_profile_id: str
    current_section: OnboardingSection
    completed_steps: list[OnboardingSection]
    sections: dict[OnboardingSection, dict[str, Any]]
    documents: list[OnboardingDocumentResponse]
    agreements: list[SignedAgreementResponse]


class SectionSubmitResponse(BaseModel):
    progress: ProgressResponse
    next_section: OnboardingSection | None = None


class NavigationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    section: OnboardingSection
    next_section: OnboardingSection | None = None
    previous_section: OnboardingSection | None = None


class RequirementRuleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    section_name: OnboardingSection
    doc_type: DocumentType
    mandatory: bool
    notes: str | None = None


class SectionRequirementsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    section: OnboardingSection
    required: list[RequirementRuleResponse]
    uploaded: list[OnboardingDocumentResponse]
    missing: list[RequirementRuleResponse]
    can_proceed: bool
