"""Find (and optionally remove) stored files that no document record points at."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from app.application.dtos.reconciliation import OrphanSweepResult
from app.application.use_cases.validation import require_business_profile_id
from app.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IOnboardingDocumentRepository
    from app.application.interfaces.storage import IStorageService

DEFAULT_GRACE_PERIOD = timedelta(hours=1)


class FindOrphanedUploadsUseCase:
    """Reconciles the file store against document metadata for one business profile.

    An object is orphaned when no document's storage_ref names it, which
    happens when the metadata insert of a two-phase upload fails. Objects
    written less than grace_period ago are skipped: their metadata insert
    may not have committed yet. Runs out of band (see scripts/).
    """

    def __init__(
        self,
        document_repo: "IOnboardingDocumentRepository",
        storage_service: "IStorageService",
        grace_period: timedelta = DEFAULT_GRACE_PERIOD,
    ) -> None:
        self._document_repo = document_repo
        self._storage = storage_service
        self._grace_period = grace_period

    async def run(self, business_profile_id: str, delete: bool = False) -> OrphanSweepResult:
        """List orphaned refs under the business profile's prefix.

        Args:
            business_profile_id: Business profile whose files are checked.
            delete: When True, remove each orphaned object.

        Returns:
            Summary with the orphaned refs, how many were deleted and how
            many unreferenced objects were too recent to judge.
        """
        business_profile_id = require_business_profile_id(business_profile_id)
        refs = await self._storage.list_refs(f"{business_profile_id}/")
        documents = await self._document_repo.list_by_entity(business_profile_id)
        referenced = {doc.storage_ref for doc in documents}

        cutoff = utc_now() - self._grace_period
        orphaned: list[str] = []
        skipped_recent = 0
        for ref in refs:
            if ref in referenced:
                continue
            modified_at = await self._storage.get_modified_at(ref)
            if modified_at is None:
                continue
            if modified_at > cutoff:
                skipped_recent += 1
                continue
            orphaned.append(ref)

        deleted = 0
        if delete:
            for ref in orphaned:
                if await self._storage.delete(ref):
                    deleted += 1
        return OrphanSweepResult(
            business_profile_id=business_profile_id,
            orphaned_refs=sorted(orphaned),
            deleted_count=deleted,
            skipped_recent_count=skipped_recent,
        )
