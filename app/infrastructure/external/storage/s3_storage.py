"""S3-compatible object storage (AWS S3, MinIO, etc.) with public object URLs."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.infrastructure.exceptions import StorageDeleteError, StorageUploadError

logger = logging.getLogger(__name__)


class S3StorageService:
    """S3-compatible storage with server-side encryption.

    Uses boto3 (sync) via asyncio.to_thread for async API. Compatible with
    AWS S3, MinIO, DigitalOcean Spaces. Public URLs are built from
    public_base_url when set, otherwise from the bucket's virtual-host URL.
    """

    def __init__(
        self,
        bucket: str,
        region: str = "ap-southeast-2",
        endpoint_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        public_base_url: str | None = None,
    ) -> None:
        """Initialize S3 client.

        Args:
            bucket: Bucket name.
            region: AWS region.
            endpoint_url: Custom endpoint (MinIO/Spaces).
            access_key: Optional; uses env/IAM if not set.
            secret_key: Optional.
            public_base_url: Optional base for public object URLs (CDN or endpoint/bucket).
        """
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        if public_base_url:
            self.public_base_url = public_base_url.rstrip("/")
        elif endpoint_url:
            self.public_base_url = f"{endpoint_url.rstrip('/')}/{bucket}"
        else:
            self.public_base_url = f"https://{bucket}.s3.{region}.amazonaws.com"
        extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
        self._client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            **extra,
        )

    async def upload(
        self,
        file_data: bytes,
        storage_ref: str,
        content_type: str,
    ) -> None:
        """Put object. Overwrites an existing key."""
        def _upload() -> None:
            self._client.put_object(
                Bucket=self.bucket,
                Key=storage_ref,
                Body=file_data,
                ContentType=content_type,
                ServerSideEncryption="AES256",
            )

        try:
            await asyncio.to_thread(_upload)
        except (ClientError, BotoCoreError) as e:
            logger.error("S3 upload failed for %s: %s", storage_ref, e)
            raise StorageUploadError(storage_ref, str(e)) from e

    def get_public_url(self, storage_ref: str) -> str:
        return f"{self.public_base_url}/{storage_ref}"

    async def list_refs(self, prefix: str) -> list[str]:
        """Return every key under prefix (paginated list_objects_v2)."""
        def _list() -> list[str]:
            paginator = self._client.get_paginator("list_objects_v2")
            keys: list[str] = []
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
                keys.extend(obj["Key"] for obj in page.get("Contents", []))
            return keys

        return sorted(await asyncio.to_thread(_list))

    async def get_modified_at(self, storage_ref: str) -> datetime | None:
        """LastModified of the object (from head_object), or None when missing."""
        def _head() -> datetime | None:
            try:
                head = self._client.head_object(Bucket=self.bucket, Key=storage_ref)
            except ClientError as e:
                if e.response["Error"]["Code"] in ("404", "NoSuchKey"):
                    return None
                raise
            return head["LastModified"]

        return await asyncio.to_thread(_head)

    async def delete(self, storage_ref: str) -> bool:
        """Delete object. Returns True if deleted."""
        def _delete() -> bool:
            try:
                self._client.head_object(Bucket=self.bucket, Key=storage_ref)
            except ClientError as e:
                if e.response["Error"]["Code"] == "404":
                    return False
                raise StorageDeleteError(storage_ref, str(e)) from e
            self._client.delete_object(Bucket=self.bucket, Key=storage_ref)
            return True

        try:
            return await asyncio.to_thread(_delete)
        except StorageDeleteError:
            raise
        except (ClientError, BotoCoreError) as e:
            raise StorageDeleteError(storage_ref, str(e)) from e

    async def exists(self, storage_ref: str) -> bool:
        """Return True if object exists."""
        def _exists() -> bool:
            try:
                self._client.head_object(Bucket=self.bucket, Key=storage_ref)
                return True
            except ClientError:
                return False

        return await asyncio.to_thread(_exists)
