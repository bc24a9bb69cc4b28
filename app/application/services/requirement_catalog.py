"""Static requirement catalog: which document types each section asks for."""

from __future__ import annotations

from app.application.dtos.document_requirement import MandatoryDocumentRule
from app.domain.enums import DocumentType, OnboardingSection

_S = OnboardingSection
_D = DocumentType

DEFAULT_RULES: tuple[MandatoryDocumentRule, ...] = (
    # basic
    MandatoryDocumentRule(_S.BASIC, _D.ABN_CERTIFICATE, True, "ABN registration confirmation"),
    MandatoryDocumentRule(_S.BASIC, _D.ACN_CERTIFICATE, False, "Companies only"),
    MandatoryDocumentRule(_S.BASIC, _D.GST_REGISTRATION_NOTICE, False, "When registered for GST"),
    # farm
    MandatoryDocumentRule(_S.FARM, _D.CHEMICAL_HANDLING_LICENCE, False, None),
    MandatoryDocumentRule(_S.FARM, _D.MACHINERY_OPERATOR_LICENCE, False, None),
    MandatoryDocumentRule(_S.FARM, _D.FOOD_SAFETY_CERT, False, None),
    MandatoryDocumentRule(_S.FARM, _D.WATER_LICENCE, False, None),
    # financial
    MandatoryDocumentRule(_S.FINANCIAL, _D.BANK_FEED_AUTHORITY, True, "Signed bank feed authority"),
    MandatoryDocumentRule(_S.FINANCIAL, _D.BAS_STATEMENT, False, "Most recent BAS"),
    # compliance
    MandatoryDocumentRule(_S.COMPLIANCE, _D.PUBLIC_LIABILITY_POLICY, True, "Current certificate of currency"),
    MandatoryDocumentRule(_S.COMPLIANCE, _D.WORKERS_COMP_POLICY, True, "Current certificate of currency"),
    MandatoryDocumentRule(_S.COMPLIANCE, _D.VEHICLE_INSURANCE_POLICY, False, None),
    MandatoryDocumentRule(_S.COMPLIANCE, _D.CROP_OR_LIVESTOCK_POLICY, False, None),
    MandatoryDocumentRule(_S.COMPLIANCE, _D.VEHICLE_REGISTRATION_CERTIFICATE, False, None),
    MandatoryDocumentRule(_S.COMPLIANCE, _D.EQUIPMENT_LEASE_AGREEMENT, False, None),
    MandatoryDocumentRule(_S.COMPLIANCE, _D.LAND_LEASE_AGREEMENT, False, None),
    # communications
    MandatoryDocumentRule(_S.COMMUNICATIONS, _D.SERVICE_AGREEMENT, False, None),
    MandatoryDocumentRule(_S.COMMUNICATIONS, _D.PRIVACY_CONSENT, False, None),
    MandatoryDocumentRule(_S.COMMUNICATIONS, _D.DIRECT_DEBIT_AUTHORITY, False, None),
)


class StaticRequirementCatalog:
    """In-memory IRequirementCatalog over a fixed rule table.

    Rules are unique on (section_name, doc_type). The storage section
    has no rules.
    """

    def __init__(self, rules: tuple[MandatoryDocumentRule, ...] | list[MandatoryDocumentRule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    async def get_rules(self, section: OnboardingSection) -> list[MandatoryDocumentRule]:
        return [r for r in self._rules if r.section_name == section]

    async def get_mandatory_rules(self, section: OnboardingSection) -> list[MandatoryDocumentRule]:
        return [r for r in self._rules if r.section_name == section and r.mandatory]

    def all_rules(self) -> list[MandatoryDocumentRule]:
        """Every rule in catalog order."""
        return list(self._rules)
