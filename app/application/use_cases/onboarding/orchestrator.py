"""Onboarding orchestrator: caller-facing facade over the onboarding components."""

from __future__ import annotations

from datetime import date
from typing import Any

from app.application.dtos.agreement import SignedAgreementResult
from app.application.dtos.document import OnboardingDocumentResult
from app.application.dtos.document_requirement import SectionRequirementsResult
from app.application.dtos.onboarding_status import (
    OnboardingSnapshotResult,
    OverallStatusResult,
    SectionNavigationResult,
    SectionStatusItem,
    SectionSubmitResult,
)
from app.application.dtos.progress import OnboardingProgressResult
from app.application.dtos.section import SectionRecordResult
from app.application.use_cases.agreements.agreement_operations import AgreementService
from app.application.use_cases.documents.document_operations import (
    OnboardingDocumentService,
)
from app.application.use_cases.onboarding.progress_tracker import ProgressTracker
from app.application.use_cases.onboarding.requirements import RequirementEvaluator
from app.application.use_cases.onboarding.section_data import SectionDataService
from app.application.use_cases.validation import (
    require_business_profile_id,
    require_section,
)
from app.domain.enums import AgreementType, DocumentType, OnboardingSection
from app.domain.sections import FIRST_SECTION, SECTION_ORDER


class OnboardingOrchestrator:
    """Composes section data, documents, agreements, progress and requirements.

    Completing a section does not consult the requirement evaluator; callers
    that want gating call can_proceed_to_next_section first.
    """

    def __init__(
        self,
        section_service: SectionDataService,
        document_service: OnboardingDocumentService,
        agreement_service: AgreementService,
        progress_tracker: ProgressTracker,
        requirement_evaluator: RequirementEvaluator,
    ) -> None:
        self.sections = section_service
        self.documents = document_service
        self.agreements = agreement_service
        self.progress = progress_tracker
        self.requirements = requirement_evaluator

    # Section data

    async def save_section_data(
        self,
        business_profile_id: str,
        section: OnboardingSection | str,
        data: dict[str, Any],
    ) -> SectionRecordResult:
        return await self.sections.save_section(business_profile_id, section, data)

    async def get_section_data(
        self, business_profile_id: str, section: OnboardingSection | str
    ) -> SectionRecordResult | None:
        return await self.sections.get_section(business_profile_id, section)

    async def get_all_section_data(self, business_profile_id: str) -> list[SectionRecordResult]:
        return await self.sections.get_all_sections(business_profile_id)

    # Progress

    async def complete_section(
        self, business_profile_id: str, section: OnboardingSection | str
    ) -> OnboardingProgressResult:
        """Mark section complete and advance the pointer (no requirement gating)."""
        return await self.progress.mark_step_complete(business_profile_id, section)

    async def submit_section(
        self,
        business_profile_id: str,
        section: OnboardingSection | str,
        data: dict[str, Any],
    ) -> SectionSubmitResult:
        """Save the section payload, then complete it.

        Returns the updated progress and the section to navigate to, which
        is None after the last section.
        """
        section = require_section(section)
        await self.sections.save_section(business_profile_id, section, data)
        progress = await self.progress.mark_step_complete(business_profile_id, section)
        return SectionSubmitResult(
            progress=progress,
            next_section=self.progress.get_next_section(section),
        )

    async def get_progress(self, business_profile_id: str) -> OnboardingProgressResult | None:
        return await self.progress.get_progress(business_profile_id)

    async def is_section_complete(
        self, business_profile_id: str, section: OnboardingSection | str
    ) -> bool:
        progress = await self.progress.get_progress(business_profile_id)
        return self.progress.is_section_complete(progress, section)

    async def is_onboarding_complete(self, business_profile_id: str) -> bool:
        progress = await self.progress.get_progress(business_profile_id)
        return self.progress.is_complete(progress)

    def get_next_section(self, current: OnboardingSection | str) -> OnboardingSection | None:
        return self.progress.get_next_section(current)

    def get_previous_section(self, current: OnboardingSection | str) -> OnboardingSection | None:
        return self.progress.get_previous_section(current)

    def get_navigation(self, current: OnboardingSection | str) -> SectionNavigationResult:
        section = require_section(current)
        return SectionNavigationResult(
            section=section,
            next_section=self.progress.get_next_section(section),
            previous_section=self.progress.get_previous_section(section),
        )

    # Documents

    async def upload_document(
        self,
        business_profile_id: str,
        file_data: bytes,
        filename: str,
        doc_type: DocumentType | str,
        section: OnboardingSection | str | None = None,
        expiry_date: date | None = None,
        content_type: str = "application/octet-stream",
    ) -> OnboardingDocumentResult:
        return await self.documents.upload_document(
            business_profile_id=business_profile_id,
            file_data=file_data,
            filename=filename,
            doc_type=doc_type,
            section=section,
            expiry_date=expiry_date,
            content_type=content_type,
        )

    async def get_document(self, document_id: str) -> OnboardingDocumentResult | None:
        return await self.documents.get_document(document_id)

    async def delete_document(self, document_id: str) -> bool:
        return await self.documents.delete_document(document_id)

    async def list_documents(
        self,
        business_profile_id: str,
        section: OnboardingSection | str | None = None,
    ) -> list[OnboardingDocumentResult]:
        if section is None:
            return await self.documents.list_by_entity(business_profile_id)
        return await self.documents.list_by_entity_section(business_profile_id, section)

    @staticmethod
    def get_documents_for_section(
        documents: list[OnboardingDocumentResult],
        section: OnboardingSection | str,
    ) -> list[OnboardingDocumentResult]:
        """Filter an already-loaded document list by section tag."""
        section = require_section(section)
        return [doc for doc in documents if doc.section_name == section]

    # Agreements

    async def sign_agreement(
        self,
        business_profile_id: str,
        agreement: AgreementType | str,
        signed_by_user: str,
        file_url: str | None = None,
    ) -> SignedAgreementResult:
        return await self.agreements.sign(
            business_profile_id, agreement, signed_by_user, file_url=file_url
        )

    async def list_agreements(self, business_profile_id: str) -> list[SignedAgreementResult]:
        return await self.agreements.list_by_entity(business_profile_id)

    async def is_agreement_signed(
        self, business_profile_id: str, agreement: AgreementType | str
    ) -> bool:
        return await self.agreements.is_signed(business_profile_id, agreement)

    # Requirements

    async def check_section_requirements(
        self, business_profile_id: str, section: OnboardingSection | str
    ) -> SectionRequirementsResult:
        return await self.requirements.check_section_requirements(business_profile_id, section)

    async def can_proceed_to_next_section(
        self, business_profile_id: str, section: OnboardingSection | str
    ) -> bool:
        return await self.requirements.can_proceed_to_next_section(business_profile_id, section)

    # Aggregate views

    async def get_overall_status(self, business_profile_id: str) -> OverallStatusResult:
        """Per-section completion, pointer, documents and agreements in one result.

        Missing progress reads as current_step=basic with nothing completed.
        """
        business_profile_id = require_business_profile_id(business_profile_id)
        progress = await self.progress.get_progress(business_profile_id)
        documents = await self.documents.list_by_entity(business_profile_id)
        agreements = await self.agreements.list_by_entity(business_profile_id)

        current_step = progress.current_step if progress else FIRST_SECTION
        completed_steps = list(progress.completed_steps) if progress else []
        items = [
            SectionStatusItem(
                section=section,
                completed=section in completed_steps,
                is_current=section == current_step,
            )
            for section in SECTION_ORDER
        ]
        return OverallStatusResult(
            business_profile_id=business_profile_id,
            progress=items,
            current_step=current_step,
            completed_steps=completed_steps,
            documents=documents,
            agreements=agreements,
            is_complete=self.progress.is_complete(progress),
        )

    async def load_onboarding(self, business_profile_id: str) -> OnboardingSnapshotResult:
        """Resume snapshot: progress, every section payload, documents and agreements."""
        business_profile_id = require_business_profile_id(business_profile_id)
        progress = await self.progress.get_progress(business_profile_id)
        sections = await self.sections.get_section_data_map(business_profile_id)
        documents = await self.documents.list_by_entity(business_profile_id)
        agreements = await self.agreements.list_by_entity(business_profile_id)
        return OnboardingSnapshotResult(
            business_profile_id=business_profile_id,
            progress=progress,
            current_section=progress.current_step if progress else FIRST_SECTION,
            sections=sections,
            documents=documents,
            agreements=agreements,
        )
