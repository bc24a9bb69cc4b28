"""Document use cases: two-phase upload, metadata delete, listing, orphan reconciliation."""

from app.application.use_cases.documents.document_operations import (
    OnboardingDocumentService,
)
from app.application.use_cases.documents.reconcile_uploads import FindOrphanedUploadsUseCase

__all__ = [
    "FindOrphanedUploadsUseCase",
    "OnboardingDocumentService",
]
