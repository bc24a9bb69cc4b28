"""Requirement evaluator: mandatory document rules vs uploaded documents per section."""

from __future__ import annotations

from app.application.dtos.document_requirement import SectionRequirementsResult
from app.application.interfaces.repositories import (
    IOnboardingDocumentRepository,
    IRequirementCatalog,
)
from app.application.use_cases.validation import (
    require_business_profile_id,
    require_section,
)
from app.domain.enums import OnboardingSection


class RequirementEvaluator:
    """Computes which mandatory documents of a section are still missing.

    By default only documents tagged with the section satisfy its rules.
    With count_business_wide_documents, documents uploaded without a
    section tag also count (and are reported as uploaded).
    """

    def __init__(
        self,
        requirement_catalog: IRequirementCatalog,
        document_repo: IOnboardingDocumentRepository,
        count_business_wide_documents: bool = False,
    ) -> None:
        self._catalog = requirement_catalog
        self._document_repo = document_repo
        self._count_business_wide_documents = count_business_wide_documents

    async def check_section_requirements(
        self,
        business_profile_id: str,
        section: OnboardingSection | str,
    ) -> SectionRequirementsResult:
        """Return required, uploaded and missing documents for the section.

        A rule is missing when no uploaded document has its doc_type.
        can_proceed is True iff nothing is missing, so sections without
        mandatory rules can always proceed.

        Raises:
            ValidationException: Empty business profile id or unknown section.
        """
        business_profile_id = require_business_profile_id(business_profile_id)
        section = require_section(section)
        required = await self._catalog.get_mandatory_rules(section)
        uploaded = await self._document_repo.list_by_entity_section(
            business_profile_id,
            section,
            include_untagged=self._count_business_wide_documents,
        )
        uploaded_types = {doc.doc_type for doc in uploaded}
        missing = [rule for rule in required if rule.doc_type not in uploaded_types]
        return SectionRequirementsResult(
            section=section,
            required=required,
            uploaded=uploaded,
            missing=missing,
            can_proceed=len(missing) == 0,
        )

    async def can_proceed_to_next_section(
        self,
        business_profile_id: str,
        section: OnboardingSection | str,
    ) -> bool:
        result = await self.check_section_requirements(business_profile_id, section)
        return result.can_proceed
