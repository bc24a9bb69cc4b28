"""DTOs for the orphaned-upload reconciliation sweep."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrphanSweepResult:
    """Result of reconciling stored files against document metadata for one business."""

    business_profile_id: str
    """Business profile that was processed."""

    orphaned_refs: list[str] = field(default_factory=list)
    """Storage refs with no matching document record."""

    deleted_count: int = 0
    """Number of orphaned objects removed (0 unless delete mode was requested)."""

    skipped_recent_count: int = 0
    """Unreferenced objects younger than the grace period, left alone."""

    @property
    def orphan_count(self) -> int:
        return len(self.orphaned_refs)
