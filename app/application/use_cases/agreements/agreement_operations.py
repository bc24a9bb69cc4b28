"""Agreement registry: sign (latest signature wins), list, and is-signed."""

from __future__ import annotations

from app.application.dtos.agreement import SignedAgreementResult
from app.application.interfaces.repositories import ISignedAgreementRepository
from app.application.use_cases.validation import require_business_profile_id
from app.domain.enums import AgreementType
from app.domain.exceptions import ValidationException
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


def require_agreement_type(agreement: AgreementType | str) -> AgreementType:
    if isinstance(agreement, AgreementType):
        return agreement
    try:
        return AgreementType(agreement)
    except ValueError:
        raise ValidationException(
            f"Unknown agreement type: {agreement}", field="agreement"
        ) from None


class AgreementService:
    """Records agreement signatures. One record per (business profile, agreement type)."""

    def __init__(self, agreement_repo: ISignedAgreementRepository) -> None:
        self.agreement_repo = agreement_repo

    async def sign(
        self,
        business_profile_id: str,
        agreement: AgreementType | str,
        signed_by_user: str,
        file_url: str | None = None,
    ) -> SignedAgreementResult:
        """Upsert the signature with signed_at=now. Earlier signatures are replaced.

        Raises:
            ValidationException: Empty business profile id or signer, unknown agreement type.
        """
        business_profile_id = require_business_profile_id(business_profile_id)
        agreement = require_agreement_type(agreement)
        if not signed_by_user:
            raise ValidationException("Signing user is required", field="signed_by_user")
        return await self.agreement_repo.upsert(
            agreement_id=generate_cuid(),
            business_profile_id=business_profile_id,
            agreement=agreement,
            signed_by_user=signed_by_user,
            signed_at=utc_now(),
            file_url=file_url,
        )

    async def list_by_entity(self, business_profile_id: str) -> list[SignedAgreementResult]:
        business_profile_id = require_business_profile_id(business_profile_id)
        return await self.agreement_repo.list_by_entity(business_profile_id)

    async def get(
        self, business_profile_id: str, agreement: AgreementType | str
    ) -> SignedAgreementResult | None:
        business_profile_id = require_business_profile_id(business_profile_id)
        return await self.agreement_repo.get(business_profile_id, require_agreement_type(agreement))

    async def is_signed(self, business_profile_id: str, agreement: AgreementType | str) -> bool:
        return await self.get(business_profile_id, agreement) is not None
