"""Tests for OnboardingDocumentService and the orphaned-upload sweep."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from app.application.use_cases.documents import (
    FindOrphanedUploadsUseCase,
    OnboardingDocumentService,
)
from app.application.use_cases.documents.document_operations import _file_extension
from app.domain.enums import DocumentType, OnboardingSection
from app.domain.exceptions import ValidationException
from app.infrastructure.exceptions import StorageUploadError, StoreError

OLD = timedelta(hours=2)


class TestStorageRef:
    def test_layout(self) -> None:
        ref = OnboardingDocumentService.generate_storage_ref(
            "bp-1",
            DocumentType.ABN_CERTIFICATE,
            "My ABN.PDF",
            timestamp_ms=1700000000000,
            nonce="abc12345",
        )
        assert ref == "bp-1/abn_certificate_1700000000000_abc12345.pdf"

    def test_same_millisecond_gives_distinct_refs(self) -> None:
        refs = {
            OnboardingDocumentService.generate_storage_ref(
                "bp-1", DocumentType.BAS_STATEMENT, "bas.pdf", timestamp_ms=1700000000000
            )
            for _ in range(50)
        }
        assert len(refs) == 50
        assert all(r.startswith("bp-1/bas_statement_1700000000000_") for r in refs)

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [("scan.jpeg", "jpeg"), ("/tmp/dir/report.pdf", "pdf"), ("noext", "bin"), ("", "bin")],
    )
    def test_file_extension(self, filename: str, expected: str) -> None:
        assert _file_extension(filename) == expected


class TestOnboardingDocumentService:
    async def test_upload_stores_bytes_then_metadata(self, backend) -> None:
        service = OnboardingDocumentService(backend.storage, backend.documents)
        doc = await service.upload_document(
            business_profile_id="bp-1",
            file_data=b"%PDF-1.7",
            filename="abn.pdf",
            doc_type="abn_certificate",
            section="basic",
            content_type="application/pdf",
        )
        assert doc.doc_type == DocumentType.ABN_CERTIFICATE
        assert doc.section_name == OnboardingSection.BASIC
        [ref] = backend.storage.objects
        assert ref.startswith("bp-1/abn_certificate_")
        assert doc.file_url == backend.storage.get_public_url(ref)
        assert doc.storage_ref == ref
        assert await service.get_document(doc.id) == doc

    async def test_business_wide_document_has_no_section(self, backend) -> None:
        service = OnboardingDocumentService(backend.storage, backend.documents)
        doc = await service.upload_document("bp-1", b"x", "a.pdf", DocumentType.PRIVACY_CONSENT)
        assert doc.section_name is None
        assert await service.list_by_entity_section("bp-1", "communications") == []
        assert [d.id for d in await service.list_by_entity("bp-1")] == [doc.id]

    async def test_unknown_doc_type_rejected_before_upload(self, backend) -> None:
        service = OnboardingDocumentService(backend.storage, backend.documents)
        with pytest.raises(ValidationException):
            await service.upload_document("bp-1", b"x", "a.pdf", "passport")
        assert backend.storage.objects == {}

    async def test_storage_failure_records_nothing(self, backend) -> None:
        backend.storage.upload = AsyncMock(side_effect=StorageUploadError("ref", "disk full"))
        service = OnboardingDocumentService(backend.storage, backend.documents)
        with pytest.raises(StorageUploadError):
            await service.upload_document("bp-1", b"x", "a.pdf", "abn_certificate", "basic")
        assert backend.documents.rows == {}

    async def test_metadata_failure_leaves_orphan(self, backend) -> None:
        backend.documents.create_document = AsyncMock(
            side_effect=StoreError("insert", "onboarding_documents", "OperationalError")
        )
        service = OnboardingDocumentService(backend.storage, backend.documents)
        with pytest.raises(StoreError):
            await service.upload_document("bp-1", b"x", "a.pdf", "abn_certificate", "basic")
        assert len(backend.storage.objects) == 1

    async def test_delete_removes_only_that_record(self, backend) -> None:
        service = OnboardingDocumentService(backend.storage, backend.documents)
        first = await service.upload_document("bp-1", b"1", "a.pdf", "abn_certificate", "basic")
        second = await service.upload_document("bp-1", b"2", "b.pdf", "bas_statement", "financial")

        assert await service.delete_document(first.id) is True
        remaining = await service.list_by_entity("bp-1")
        assert [d.id for d in remaining] == [second.id]
        assert len(backend.storage.objects) == 2

    async def test_delete_leaves_other_profiles_documents(self, backend) -> None:
        service = OnboardingDocumentService(backend.storage, backend.documents)
        own = await service.upload_document("bp-1", b"1", "a.pdf", "abn_certificate", "basic")
        other = await service.upload_document("bp-2", b"2", "a.pdf", "abn_certificate", "basic")

        assert await service.delete_document(own.id) is True
        assert await service.list_by_entity("bp-1") == []
        assert [d.id for d in await service.list_by_entity("bp-2")] == [other.id]
        assert await service.get_document(other.id) == other

    async def test_delete_missing_returns_false(self, backend) -> None:
        service = OnboardingDocumentService(backend.storage, backend.documents)
        assert await service.delete_document("missing") is False


class TestFindOrphanedUploads:
    async def test_reports_unreferenced_objects(self, backend) -> None:
        service = OnboardingDocumentService(backend.storage, backend.documents)
        await service.upload_document("bp-1", b"1", "a.pdf", "abn_certificate", "basic")
        await backend.storage.upload(b"orphan", "bp-1/bas_statement_1.pdf", "application/pdf")
        await backend.storage.upload(b"other", "bp-2/bas_statement_1.pdf", "application/pdf")
        for ref in list(backend.storage.objects):
            backend.storage.backdate(ref, OLD)

        result = await FindOrphanedUploadsUseCase(backend.documents, backend.storage).run("bp-1")
        assert result.orphaned_refs == ["bp-1/bas_statement_1.pdf"]
        assert result.orphan_count == 1
        assert result.deleted_count == 0
        assert await backend.storage.exists("bp-1/bas_statement_1.pdf")

    async def test_delete_mode_removes_orphans(self, backend) -> None:
        await backend.storage.upload(b"orphan", "bp-1/bas_statement_1.pdf", "application/pdf")
        backend.storage.backdate("bp-1/bas_statement_1.pdf", OLD)
        result = await FindOrphanedUploadsUseCase(backend.documents, backend.storage).run(
            "bp-1", delete=True
        )
        assert result.deleted_count == 1
        assert not await backend.storage.exists("bp-1/bas_statement_1.pdf")

    async def test_recent_unreferenced_objects_are_left_alone(self, backend) -> None:
        await backend.storage.upload(b"in flight", "bp-1/bas_statement_2.pdf", "application/pdf")
        result = await FindOrphanedUploadsUseCase(backend.documents, backend.storage).run(
            "bp-1", delete=True
        )
        assert result.orphaned_refs == []
        assert result.skipped_recent_count == 1
        assert result.deleted_count == 0
        assert await backend.storage.exists("bp-1/bas_statement_2.pdf")

    async def test_zero_grace_period_judges_every_object(self, backend) -> None:
        await backend.storage.upload(b"orphan", "bp-1/bas_statement_3.pdf", "application/pdf")
        sweep = FindOrphanedUploadsUseCase(
            backend.documents, backend.storage, grace_period=timedelta(0)
        )
        result = await sweep.run("bp-1")
        assert result.orphaned_refs == ["bp-1/bas_statement_3.pdf"]
        assert result.skipped_recent_count == 0

    async def test_changed_public_base_url_keeps_live_documents(self, backend) -> None:
        service = OnboardingDocumentService(backend.storage, backend.documents)
        doc = await service.upload_document("bp-1", b"1", "a.pdf", "abn_certificate", "basic")
        backend.storage.backdate(doc.storage_ref, OLD)
        backend.storage.base_url = "https://cdn.growerfarms.com.au"

        result = await FindOrphanedUploadsUseCase(
            backend.documents, backend.storage, grace_period=timedelta(0)
        ).run("bp-1", delete=True)
        assert result.orphaned_refs == []
        assert result.deleted_count == 0
        assert await backend.storage.exists(doc.storage_ref)
