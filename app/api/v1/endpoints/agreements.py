"""Agreement API: sign, list, and check signature status."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies.auth import get_current_user_id
from app.api.v1.dependencies.onboarding import (
    get_onboarding_orchestrator,
    get_onboarding_orchestrator_for_write,
    get_owned_business_profile,
)
from app.application.dtos.business_profile import BusinessProfileResult
from app.application.use_cases.agreements.agreement_operations import (
    require_agreement_type,
)
from app.application.use_cases.onboarding import OnboardingOrchestrator
from app.core.limiter import limit_writes
from app.schemas.agreement import (
    AgreementStatusResponse,
    SignAgreementRequest,
    SignedAgreementResponse,
)

router = APIRouter()


@router.post("/{agreement_type}/sign", response_model=SignedAgreementResponse)
@limit_writes
async def sign_agreement(
    request: Request,
    agreement_type: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    orchestrator: Annotated[
        OnboardingOrchestrator, Depends(get_onboarding_orchestrator_for_write)
    ],
    body: SignAgreementRequest | None = None,
):
    """Sign (or re-sign) an agreement as the calling user."""
    signed = await orchestrator.sign_agreement(
        profile.id,
        agreement_type,
        signed_by_user=user_id,
        file_url=body.file_url if body else None,
    )
    return SignedAgreementResponse.model_validate(signed)


@router.get("", response_model=list[SignedAgreementResponse])
async def list_agreements(
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    orchestrator: Annotated[OnboardingOrchestrator, Depends(get_onboarding_orchestrator)],
):
    """All signed agreements of the caller's business."""
    agreements = await orchestrator.list_agreements(profile.id)
    return [SignedAgreementResponse.model_validate(a) for a in agreements]


@router.get("/{agreement_type}", response_model=AgreementStatusResponse)
async def get_agreement_status(
    agreement_type: str,
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    orchestrator: Annotated[OnboardingOrchestrator, Depends(get_onboarding_orchestrator)],
):
    """Whether an agreement has been signed, with the signature when it has."""
    agreement = require_agreement_type(agreement_type)
    signatures = await orchestrator.list_agreements(profile.id)
    signature = next((a for a in signatures if a.agreement == agreement), None)
    return AgreementStatusResponse(
        agreement=agreement,
        signed=signature is not None,
        signature=SignedAgreementResponse.model_validate(signature) if signature else None,
    )
