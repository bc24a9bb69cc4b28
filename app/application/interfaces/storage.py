"""File store port. Implementations: LocalStorageService, S3StorageService."""

from datetime import datetime
from typing import Protocol


class IStorageService(Protocol):
    """Protocol for object storage backends (local, S3-compatible).

    Objects are addressed by a storage_ref such as
    "{business_profile_id}/{doc_type}_{epoch_ms}_{nonce}.pdf".
    """

    async def upload(
        self,
        file_data: bytes,
        storage_ref: str,
        content_type: str,
    ) -> None:
        """Write bytes under storage_ref. Raises StorageUploadError on failure."""
        ...

    def get_public_url(self, storage_ref: str) -> str:
        """Return the retrievable address for storage_ref."""
        ...

    async def list_refs(self, prefix: str) -> list[str]:
        """Return every storage_ref that starts with prefix."""
        ...

    async def get_modified_at(self, storage_ref: str) -> datetime | None:
        """Return when the object was last written (aware UTC), or None when missing."""
        ...

    async def delete(self, storage_ref: str) -> bool:
        """Delete file. Returns True if deleted, False if not found."""
        ...

    async def exists(self, storage_ref: str) -> bool:
        """Return True if file exists."""
        ...
