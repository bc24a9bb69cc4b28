"""File store for uploaded onboarding documents.

LocalStorageService writes under STORAGE_ROOT (served at /files);
S3StorageService needs the "storage" extra. Both satisfy IStorageService.
"""

from app.infrastructure.external.storage.factory import StorageFactory

__all__ = [
    "StorageFactory",
]
