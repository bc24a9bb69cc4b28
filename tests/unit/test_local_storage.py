"""Tests for LocalStorageService against a temporary directory."""

from datetime import timedelta

import pytest

from app.infrastructure.exceptions import StoragePermissionError
from app.infrastructure.external.storage.local_storage import LocalStorageService
from app.shared.utils.datetime import utc_now


@pytest.fixture
def storage(tmp_path) -> LocalStorageService:
    return LocalStorageService(storage_root=str(tmp_path), base_url="https://api.example.com/")


async def test_upload_and_exists(storage, tmp_path) -> None:
    await storage.upload(b"data", "bp-1/abn_certificate_1.pdf", "application/pdf")
    assert (tmp_path / "bp-1" / "abn_certificate_1.pdf").read_bytes() == b"data"
    assert await storage.exists("bp-1/abn_certificate_1.pdf")


def test_public_url(storage) -> None:
    assert (
        storage.get_public_url("bp-1/a.pdf")
        == "https://api.example.com/files/bp-1/a.pdf"
    )


async def test_list_refs_by_prefix(storage) -> None:
    await storage.upload(b"1", "bp-1/a.pdf", "application/pdf")
    await storage.upload(b"2", "bp-1/b.pdf", "application/pdf")
    await storage.upload(b"3", "bp-2/c.pdf", "application/pdf")
    assert sorted(await storage.list_refs("bp-1/")) == ["bp-1/a.pdf", "bp-1/b.pdf"]


async def test_delete(storage) -> None:
    await storage.upload(b"1", "bp-1/a.pdf", "application/pdf")
    assert await storage.delete("bp-1/a.pdf") is True
    assert await storage.exists("bp-1/a.pdf") is False
    assert await storage.delete("bp-1/a.pdf") is False


async def test_path_traversal_rejected(storage) -> None:
    with pytest.raises(StoragePermissionError):
        await storage.upload(b"x", "../outside.pdf", "application/pdf")


async def test_modified_at(storage) -> None:
    await storage.upload(b"1", "bp-1/a.pdf", "application/pdf")
    modified_at = await storage.get_modified_at("bp-1/a.pdf")
    assert modified_at is not None
    assert modified_at.tzinfo is not None
    assert abs(utc_now() - modified_at) < timedelta(minutes=1)
    assert await storage.get_modified_at("bp-1/missing.pdf") is None
