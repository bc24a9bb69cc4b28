"""Builds the file store selected by STORAGE_BACKEND."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.interfaces.storage import IStorageService

if TYPE_CHECKING:
    from app.core.config import Settings


class StorageFactory:
    """Creates the file store used for onboarding document uploads."""

    @staticmethod
    def create_storage_service(settings: Settings | None = None) -> IStorageService:
        """Return a LocalStorageService or S3StorageService.

        Settings validation has already rejected unknown backends and a
        missing S3 bucket; boto3 is imported only for the s3 backend.

        Raises:
            ValueError: boto3 is not installed while STORAGE_BACKEND=s3.
        """
        from app.core.config import get_settings

        settings = settings or get_settings()

        if settings.storage_backend == "s3":
            try:
                from app.infrastructure.external.storage.s3_storage import (
                    S3StorageService,
                )
            except ImportError as e:
                raise ValueError(
                    "STORAGE_BACKEND=s3 needs boto3: pip install -e '.[storage]'"
                ) from e
            secret = settings.s3_secret_key
            return S3StorageService(
                bucket=settings.s3_bucket,
                region=settings.s3_region,
                endpoint_url=settings.s3_endpoint_url,
                access_key=settings.s3_access_key,
                secret_key=secret.get_secret_value() if secret else None,
                public_base_url=settings.s3_public_base_url,
            )

        from app.infrastructure.external.storage.local_storage import (
            LocalStorageService,
        )

        return LocalStorageService(
            storage_root=settings.storage_root,
            base_url=settings.storage_base_url,
        )
