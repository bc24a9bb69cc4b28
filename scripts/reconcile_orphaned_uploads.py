"""Find stored upload files that no document record points at, and optionally delete them.

A failed metadata insert after a successful file write leaves such a file
behind; so does deleting a document record.

Usage:
    python -m scripts.reconcile_orphaned_uploads [business_profile_id] [--delete]
        [--min-age-minutes N]
If business_profile_id is omitted, every business profile is checked. Files
younger than --min-age-minutes (default ORPHAN_GRACE_PERIOD_MINUTES) are
skipped, since their upload may still be in flight.
Requires DATABASE_URL and the same storage settings as the API.
"""

import argparse
import asyncio
import logging
import sys
from datetime import timedelta

from app.application.use_cases.documents import FindOrphanedUploadsUseCase
from app.core.config import get_settings
from app.domain.exceptions import OnboardingException
from app.infrastructure.external.storage import StorageFactory
from app.infrastructure.persistence.database import dispose_engine, get_session_factory
from app.infrastructure.persistence.repositories import (
    BusinessProfileRepository,
    OnboardingDocumentRepository,
)
from app.shared.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "business_profile_id",
        nargs="?",
        help="Only check this business profile (default: all)",
    )
    parser.add_argument(
        "--delete",
        action="store_true",
        help="Delete orphaned files (default: report only)",
    )
    parser.add_argument(
        "--min-age-minutes",
        type=int,
        default=None,
        help="Skip files written within this many minutes",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    """Run the sweep; returns the process exit code."""
    args = parse_args(argv)
    setup_logging()
    try:
        session_factory = get_session_factory()
    except OnboardingException as e:
        print(e.message, file=sys.stderr)
        return 1
    settings = get_settings()
    storage = StorageFactory.create_storage_service(settings)
    min_age = (
        args.min_age_minutes
        if args.min_age_minutes is not None
        else settings.orphan_grace_period_minutes
    )

    try:
        async with session_factory() as session:
            if args.business_profile_id:
                profile_ids = [args.business_profile_id]
            else:
                profile_ids = await BusinessProfileRepository(session).list_ids()

            use_case = FindOrphanedUploadsUseCase(
                OnboardingDocumentRepository(session),
                storage,
                grace_period=timedelta(minutes=min_age),
            )
            total_orphans = 0
            total_deleted = 0
            for profile_id in profile_ids:
                result = await use_case.run(profile_id, delete=args.delete)
                total_orphans += result.orphan_count
                total_deleted += result.deleted_count
                for ref in result.orphaned_refs:
                    logger.info("Orphaned upload: %s", ref)
                if result.orphan_count or result.skipped_recent_count:
                    print(
                        f"Business profile {profile_id}: {result.orphan_count} orphaned, "
                        f"{result.deleted_count} deleted, "
                        f"{result.skipped_recent_count} too recent to check"
                    )
    finally:
        await dispose_engine()

    print(
        f"Done. Checked {len(profile_ids)} business profile(s); "
        f"orphaned: {total_orphans}, deleted: {total_deleted}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
