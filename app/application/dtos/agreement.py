"""DTOs for signed agreements."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import AgreementType


@dataclass(frozen=True)
class SignedAgreementResult:
    """Latest signature of one agreement by a business profile."""

    id: str
    business_profile_id: str
    agreement: AgreementType
    signed_by_user: str
    signed_at: datetime
    file_url: str | None
