"""Onboarding document repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.document import (
    OnboardingDocumentCreate,
    OnboardingDocumentResult,
)
from app.domain.enums import DocumentType, OnboardingSection
from app.infrastructure.persistence.models.onboarding_document import OnboardingDocument
from app.infrastructure.persistence.repositories.base import BaseRepository, store_errors


def _to_result(d: OnboardingDocument) -> OnboardingDocumentResult:
    """Map ORM to OnboardingDocumentResult."""
    return OnboardingDocumentResult(
        id=d.id,
        business_profile_id=d.business_profile_id,
        section_name=OnboardingSection(d.section_name) if d.section_name else None,
        doc_type=DocumentType(d.doc_type),
        storage_ref=d.storage_ref,
        file_url=d.file_url,
        expiry_date=d.expiry_date,
        uploaded_at=d.uploaded_at,
    )


class OnboardingDocumentRepository(BaseRepository[OnboardingDocument]):
    """Document metadata repository. Records are inserted and deleted, never updated."""

    collection = "onboarding_documents"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, OnboardingDocument)

    async def create_document(self, data: OnboardingDocumentCreate) -> OnboardingDocumentResult:
        row = OnboardingDocument(
            id=data.id,
            business_profile_id=data.business_profile_id,
            section_name=data.section_name,
            doc_type=data.doc_type,
            storage_ref=data.storage_ref,
            file_url=data.file_url,
            expiry_date=data.expiry_date,
        )
        created = await self._create(row)
        return _to_result(created)

    async def delete_document(self, document_id: str) -> bool:
        row = await self._get_model_by_id(document_id)
        if row is None:
            return False
        await self._delete(row)
        return True

    async def get_by_id(self, document_id: str) -> OnboardingDocumentResult | None:
        row = await self._get_model_by_id(document_id)
        return _to_result(row) if row else None

    async def list_by_entity(self, business_profile_id: str) -> list[OnboardingDocumentResult]:
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(OnboardingDocument)
                .where(OnboardingDocument.business_profile_id == business_profile_id)
                .order_by(OnboardingDocument.uploaded_at.desc())
            )
            rows = result.scalars().all()
        return [_to_result(r) for r in rows]

    async def list_by_entity_section(
        self,
        business_profile_id: str,
        section: OnboardingSection,
        include_untagged: bool = False,
    ) -> list[OnboardingDocumentResult]:
        section_filter = OnboardingDocument.section_name == section
        if include_untagged:
            section_filter = or_(section_filter, OnboardingDocument.section_name.is_(None))
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(OnboardingDocument)
                .where(
                    OnboardingDocument.business_profile_id == business_profile_id,
                    section_filter,
                )
                .order_by(OnboardingDocument.uploaded_at.desc())
            )
            rows = result.scalars().all()
        return [_to_result(r) for r in rows]
