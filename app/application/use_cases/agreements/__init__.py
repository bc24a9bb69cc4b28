"""Agreement use cases."""

from app.application.use_cases.agreements.agreement_operations import AgreementService

__all__ = ["AgreementService"]
