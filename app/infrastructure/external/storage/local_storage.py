"""Local filesystem storage with path validation and atomic writes."""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path

import aiofiles
import aiofiles.os

from app.infrastructure.exceptions import (
    StorageDeleteError,
    StoragePermissionError,
    StorageUploadError,
)

logger = logging.getLogger(__name__)

PUBLIC_PATH_PREFIX = "/files"


class LocalStorageService:
    """Local filesystem storage with atomic writes and path traversal protection.

    Paths are validated against storage_root. Writes use temp file + rename.
    Public URLs point at the static files mount ({base_url}/files/{storage_ref}).
    """

    def __init__(self, storage_root: str, base_url: str | None = None) -> None:
        """Initialize local storage.

        Args:
            storage_root: Base directory for all files.
            base_url: Public base URL of the API (e.g. https://api.example.com).
        """
        self.storage_root = Path(storage_root).resolve()
        self.base_url = base_url.rstrip("/") if base_url else ""
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)

    def _get_full_path(self, storage_ref: str) -> Path:
        """Resolve and validate path under storage_root. Raises StoragePermissionError if traversal."""
        full_path = (self.storage_root / storage_ref).resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            raise StoragePermissionError(storage_ref, "path_validation") from e
        return full_path

    async def upload(
        self,
        file_data: bytes,
        storage_ref: str,
        content_type: str,
    ) -> None:
        """Write bytes atomically (temp file + rename). Overwrites an existing ref."""
        target_path = self._get_full_path(storage_ref)
        try:
            target_path.parent.mkdir(parents=True, exist_ok=True, mode=0o750)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=target_path.parent,
                prefix=".tmp_",
                suffix=target_path.suffix,
            )
            os.close(temp_fd)
            try:
                async with aiofiles.open(temp_path, "wb") as f:
                    await f.write(file_data)
                os.chmod(temp_path, 0o640)
                os.replace(temp_path, target_path)
            finally:
                if Path(temp_path).exists():
                    os.unlink(temp_path)
        except OSError as e:
            logger.error("Local upload failed for %s: %s", storage_ref, e)
            raise StorageUploadError(storage_ref, str(e)) from e
        logger.debug(
            "Stored %s (%d bytes, %s)", storage_ref, len(file_data), content_type
        )

    def get_public_url(self, storage_ref: str) -> str:
        return f"{self.base_url}{PUBLIC_PATH_PREFIX}/{storage_ref}"

    async def list_refs(self, prefix: str) -> list[str]:
        """Return refs of regular files under storage_root starting with prefix (temp files skipped)."""
        base = self._get_full_path(prefix.rsplit("/", 1)[0]) if "/" in prefix else self.storage_root
        if not base.is_dir():
            return []
        refs: list[str] = []
        for path in base.rglob("*"):
            if not path.is_file() or path.name.startswith(".tmp_"):
                continue
            ref = path.relative_to(self.storage_root).as_posix()
            if ref.startswith(prefix):
                refs.append(ref)
        return sorted(refs)

    async def get_modified_at(self, storage_ref: str) -> datetime | None:
        try:
            stat = await aiofiles.os.stat(self._get_full_path(storage_ref))
        except FileNotFoundError:
            return None
        return datetime.fromtimestamp(stat.st_mtime, tz=UTC)

    async def delete(self, storage_ref: str) -> bool:
        """Delete file and prune empty parent directories. Returns True if deleted."""
        file_path = self._get_full_path(storage_ref)
        if not file_path.exists():
            return False
        try:
            await aiofiles.os.remove(file_path)
        except OSError as e:
            raise StorageDeleteError(storage_ref, str(e)) from e
        parent = file_path.parent
        while parent != self.storage_root:
            try:
                if any(parent.iterdir()):
                    break
                parent.rmdir()
                parent = parent.parent
            except OSError:
                break
        return True

    async def exists(self, storage_ref: str) -> bool:
        """Return True if file exists."""
        try:
            return self._get_full_path(storage_ref).is_file()
        except StoragePermissionError:
            return False
