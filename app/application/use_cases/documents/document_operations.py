"""Document registry: two-phase upload, metadata delete, and listing."""

from __future__ import annotations

import os
from datetime import date

from app.application.dtos.document import (
    OnboardingDocumentCreate,
    OnboardingDocumentResult,
)
from app.application.interfaces.repositories import IOnboardingDocumentRepository
from app.application.interfaces.storage import IStorageService
from app.application.use_cases.validation import (
    require_business_profile_id,
    require_section,
)
from app.domain.enums import DocumentType, OnboardingSection
from app.domain.exceptions import ValidationException
from app.shared.utils.datetime import epoch_ms
from app.shared.utils.generators import generate_cuid

DEFAULT_EXTENSION = "bin"
REF_NONCE_LENGTH = 8


def _file_extension(filename: str) -> str:
    """Lower-case extension of filename without the dot; DEFAULT_EXTENSION when absent."""
    name = os.path.basename(filename or "").replace("\x00", "").strip(". ")
    _, ext = os.path.splitext(name)
    ext = ext.lstrip(".").lower()
    if not ext or not ext.isalnum():
        return DEFAULT_EXTENSION
    return ext


def _require_doc_type(doc_type: DocumentType | str) -> DocumentType:
    if isinstance(doc_type, DocumentType):
        return doc_type
    try:
        return DocumentType(doc_type)
    except ValueError:
        raise ValidationException(f"Unknown document type: {doc_type}", field="doc_type") from None


class OnboardingDocumentService:
    """Uploads document bytes to the file store and records their metadata.

    Upload is two-phase without compensation: bytes are stored first, then
    the metadata row is inserted. A failed insert leaves an orphaned object
    for the reconciliation sweep. Delete removes the metadata row only.
    """

    def __init__(
        self,
        storage_service: IStorageService,
        document_repo: IOnboardingDocumentRepository,
    ) -> None:
        self.storage = storage_service
        self.document_repo = document_repo

    @staticmethod
    def generate_storage_ref(
        business_profile_id: str,
        doc_type: DocumentType,
        filename: str,
        timestamp_ms: int | None = None,
        nonce: str | None = None,
    ) -> str:
        """Return "{business_profile_id}/{doc_type}_{epoch_ms}_{nonce}.{ext}".

        nonce is a short random token so two uploads of one type in the same
        millisecond never share a ref.
        """
        ts = timestamp_ms if timestamp_ms is not None else epoch_ms()
        nonce = nonce or generate_cuid()[:REF_NONCE_LENGTH]
        ext = _file_extension(filename)
        return f"{business_profile_id}/{doc_type.value}_{ts}_{nonce}.{ext}"

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
        """Store file bytes, then insert the metadata record. Returns the created document.

        Raises:
            ValidationException: Empty business profile id, unknown section or doc type.
            StorageUploadError: Bytes could not be stored; nothing was recorded.
            StoreError: Metadata insert failed; the stored object is orphaned.
        """
        business_profile_id = require_business_profile_id(business_profile_id)
        doc_type = _require_doc_type(doc_type)
        section_name = require_section(section) if section is not None else None

        storage_ref = self.generate_storage_ref(business_profile_id, doc_type, filename)
        await self.storage.upload(
            file_data=file_data,
            storage_ref=storage_ref,
            content_type=content_type,
        )
        file_url = self.storage.get_public_url(storage_ref)

        create_dto = OnboardingDocumentCreate(
            id=generate_cuid(),
            business_profile_id=business_profile_id,
            section_name=section_name,
            doc_type=doc_type,
            storage_ref=storage_ref,
            file_url=file_url,
            expiry_date=expiry_date,
        )
        return await self.document_repo.create_document(create_dto)

    async def delete_document(self, document_id: str) -> bool:
        """Delete the metadata record only. Stored bytes are left in place."""
        if not document_id:
            raise ValidationException("Document ID is required", field="document_id")
        return await self.document_repo.delete_document(document_id)

    async def get_document(self, document_id: str) -> OnboardingDocumentResult | None:
        return await self.document_repo.get_by_id(document_id)

    async def list_by_entity(self, business_profile_id: str) -> list[OnboardingDocumentResult]:
        business_profile_id = require_business_profile_id(business_profile_id)
        return await self.document_repo.list_by_entity(business_profile_id)

    async def list_by_entity_section(
        self,
        business_profile_id: str,
        section: OnboardingSection | str,
    ) -> list[OnboardingDocumentResult]:
        business_profile_id = require_business_profile_id(business_profile_id)
        return await self.document_repo.list_by_entity_section(
            business_profile_id, require_section(section)
        )
