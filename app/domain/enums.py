"""Domain enumerations for the onboarding engine.

Enum values are persisted as Postgres enum types and returned in API
responses, so they must not be renamed.
"""

from enum import Enum


class OnboardingSection(str, Enum):
    """Data-collection section of the onboarding workflow.

    Declaration order is the workflow order; see app.domain.sections.
    """

    BASIC = "basic"
    FARM = "farm"
    FINANCIAL = "financial"
    COMPLIANCE = "compliance"
    STORAGE = "storage"
    COMMUNICATIONS = "communications"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid section values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [section.value for section in cls]


class DocumentType(str, Enum):
    """Kind of supporting document a business can upload."""

    ABN_CERTIFICATE = "abn_certificate"
    ACN_CERTIFICATE = "acn_certificate"
    GST_REGISTRATION_NOTICE = "gst_registration_notice"
    CHEMICAL_HANDLING_LICENCE = "chemical_handling_licence"
    MACHINERY_OPERATOR_LICENCE = "machinery_operator_licence"
    FOOD_SAFETY_CERT = "food_safety_cert"
    WATER_LICENCE = "water_licence"
    BANK_FEED_AUTHORITY = "bank_feed_authority"
    BAS_STATEMENT = "bas_statement"
    PUBLIC_LIABILITY_POLICY = "public_liability_policy"
    WORKERS_COMP_POLICY = "workers_comp_policy"
    VEHICLE_INSURANCE_POLICY = "vehicle_insurance_policy"
    CROP_OR_LIVESTOCK_POLICY = "crop_or_livestock_policy"
    VEHICLE_REGISTRATION_CERTIFICATE = "vehicle_registration_certificate"
    EQUIPMENT_LEASE_AGREEMENT = "equipment_lease_agreement"
    LAND_LEASE_AGREEMENT = "land_lease_agreement"
    SERVICE_AGREEMENT = "service_agreement"
    PRIVACY_CONSENT = "privacy_consent"
    DIRECT_DEBIT_AUTHORITY = "direct_debit_authority"

    @classmethod
    def values(cls) -> list[str]:
        return [doc_type.value for doc_type in cls]


class AgreementType(str, Enum):
    """Agreement a business signs during onboarding."""

    SERVICE_AGREEMENT = "service_agreement"
    PRIVACY_CONSENT = "privacy_consent"
    DIRECT_DEBIT = "direct_debit"
    TERMS_AND_CONDITIONS = "terms_and_conditions"

    @classmethod
    def values(cls) -> list[str]:
        return [agreement.value for agreement in cls]


class BusinessStructure(str, Enum):
    """Legal structure captured on the basic section."""

    SOLE_TRADER = "sole_trader"
    PARTNERSHIP = "partnership"
    COMPANY = "company"
    TRUST = "trust"

    @classmethod
    def values(cls) -> list[str]:
        return [structure.value for structure in cls]


class AddressType(str, Enum):
    """Kind of address recorded against a business profile."""

    POSTAL = "postal"
    PROPERTY = "property"

    @classmethod
    def values(cls) -> list[str]:
        return [address_type.value for address_type in cls]
