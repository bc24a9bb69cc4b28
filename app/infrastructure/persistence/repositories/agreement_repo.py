"""Signed agreement repository: upsert keyed on (business_profile_id, agreement)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.agreement import SignedAgreementResult
from app.domain.enums import AgreementType
from app.infrastructure.persistence.models.signed_agreement import SignedAgreement
from app.infrastructure.persistence.repositories.base import BaseRepository, store_errors


def _to_result(a: SignedAgreement) -> SignedAgreementResult:
    return SignedAgreementResult(
        id=a.id,
        business_profile_id=a.business_profile_id,
        agreement=AgreementType(a.agreement),
        signed_by_user=a.signed_by_user,
        signed_at=a.signed_at,
        file_url=a.file_url,
    )


class SignedAgreementRepository(BaseRepository[SignedAgreement]):
    """Signed agreements. Re-signing replaces signer, time and file (id is kept)."""

    collection = "signed_agreements"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, SignedAgreement)

    async def upsert(
        self,
        agreement_id: str,
        business_profile_id: str,
        agreement: AgreementType,
        signed_by_user: str,
        signed_at: datetime,
        file_url: str | None,
    ) -> SignedAgreementResult:
        stmt = pg_insert(SignedAgreement).values(
            id=agreement_id,
            business_profile_id=business_profile_id,
            agreement=agreement,
            signed_by_user=signed_by_user,
            signed_at=signed_at,
            file_url=file_url,
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_signed_agreements_business_profile_agreement",
            set_={
                "signed_by_user": stmt.excluded.signed_by_user,
                "signed_at": stmt.excluded.signed_at,
                "file_url": stmt.excluded.file_url,
            },
        ).returning(SignedAgreement)
        with store_errors("upsert", self.collection):
            result = await self.db.execute(
                stmt, execution_options={"populate_existing": True}
            )
            row = result.scalar_one()
        return _to_result(row)

    async def get(
        self, business_profile_id: str, agreement: AgreementType
    ) -> SignedAgreementResult | None:
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(SignedAgreement).where(
                    SignedAgreement.business_profile_id == business_profile_id,
                    SignedAgreement.agreement == agreement,
                )
            )
            row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def list_by_entity(self, business_profile_id: str) -> list[SignedAgreementResult]:
        with store_errors("select", self.collection):
            result = await self.db.execute(
                select(SignedAgreement)
                .where(SignedAgreement.business_profile_id == business_profile_id)
                .order_by(SignedAgreement.signed_at)
            )
            rows = result.scalars().all()
        return [_to_result(r) for r in rows]
