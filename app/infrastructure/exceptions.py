"""Infrastructure exceptions for the record store and the file store.

Both extend OnboardingException so presentation can map them to HTTP
responses consistently.
"""

from app.domain.exceptions import OnboardingException


class StoreError(OnboardingException):
    """A record store operation failed (connection, constraint, or query error).

    provider_code carries the driver's code (Postgres SQLSTATE when
    available, otherwise SQLAlchemy's error code). A lookup that matches
    no row is not an error.
    """

    def __init__(
        self,
        operation: str,
        collection: str,
        reason: str,
        provider_code: str | None = None,
    ) -> None:
        self.provider_code = provider_code
        super().__init__(
            f"Store {operation} on {collection} failed",
            "STORE_ERROR",
            {
                "operation": operation,
                "collection": collection,
                "reason": reason,
                "provider_code": provider_code,
            },
        )


class StorageException(OnboardingException):
    """Base exception for file storage operations."""


class StorageUploadError(StorageException):
    """File upload failed; no document metadata was recorded."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to upload file: {file_path}",
            "STORAGE_UPLOAD_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class StorageDeleteError(StorageException):
    """File deletion failed."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to delete file: {file_path}",
            "STORAGE_DELETE_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class StoragePermissionError(StorageException):
    """Insufficient permissions for storage operation."""

    def __init__(self, file_path: str, operation: str) -> None:
        super().__init__(
            f"Permission denied for {operation} on {file_path}",
            "STORAGE_PERMISSION_ERROR",
            {"file_path": file_path, "operation": operation},
        )
