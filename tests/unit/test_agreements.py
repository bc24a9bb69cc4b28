"""Tests for AgreementService."""

import pytest

from app.application.use_cases.agreements import AgreementService
from app.domain.enums import AgreementType
from app.domain.exceptions import ValidationException


async def test_sign_records_signer_and_time(backend) -> None:
    service = AgreementService(backend.agreements)
    signed = await service.sign("bp-1", "privacy_consent", "user-1", file_url="http://x/p.pdf")
    assert signed.agreement == AgreementType.PRIVACY_CONSENT
    assert signed.signed_by_user == "user-1"
    assert signed.signed_at.tzinfo is not None
    assert await service.is_signed("bp-1", AgreementType.PRIVACY_CONSENT)


async def test_resign_keeps_one_record_with_latest_signer(backend) -> None:
    service = AgreementService(backend.agreements)
    first = await service.sign("bp-1", AgreementType.SERVICE_AGREEMENT, "user-1")
    second = await service.sign("bp-1", AgreementType.SERVICE_AGREEMENT, "user-2")

    agreements = await service.list_by_entity("bp-1")
    assert len(agreements) == 1
    assert agreements[0].signed_by_user == "user-2"
    assert agreements[0].signed_at >= first.signed_at
    assert second.id == first.id


async def test_unsigned_agreement(backend) -> None:
    service = AgreementService(backend.agreements)
    assert await service.get("bp-1", "direct_debit") is None
    assert await service.is_signed("bp-1", "direct_debit") is False


async def test_unknown_agreement_type_rejected(backend) -> None:
    service = AgreementService(backend.agreements)
    with pytest.raises(ValidationException):
        await service.sign("bp-1", "nda", "user-1")
    assert backend.agreements.rows == {}


async def test_signer_required(backend) -> None:
    service = AgreementService(backend.agreements)
    with pytest.raises(ValidationException):
        await service.sign("bp-1", AgreementType.PRIVACY_CONSENT, "")
