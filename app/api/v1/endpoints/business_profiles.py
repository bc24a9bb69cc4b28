"""Business profile API: one profile per authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies.auth import get_current_user_id
from app.api.v1.dependencies.onboarding import (
    get_business_profile_service_for_write,
    get_onboarding_orchestrator,
    get_owned_business_profile,
)
from app.application.dtos.business_profile import (
    BusinessProfileCreate,
    BusinessProfileResult,
)
from app.application.use_cases.business_profiles import BusinessProfileService
from app.application.use_cases.onboarding import OnboardingOrchestrator
from app.core.limiter import limit_create_profile, limit_writes
from app.domain.exceptions import ValidationException
from app.schemas.business_profile import (
    BusinessProfileCreateRequest,
    BusinessProfileResponse,
    BusinessProfileUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=BusinessProfileResponse, status_code=201)
@limit_create_profile
async def create_business_profile(
    request: Request,
    body: BusinessProfileCreateRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[BusinessProfileService, Depends(get_business_profile_service_for_write)],
):
    """Create the caller's business profile (409 if one already exists)."""
    created = await service.create(
        user_id, BusinessProfileCreate(**body.model_dump(mode="json"))
    )
    return BusinessProfileResponse.model_validate(created)


@router.get("", response_model=BusinessProfileResponse)
async def get_business_profile(
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
):
    """Get the caller's business profile."""
    return BusinessProfileResponse.model_validate(profile)


@router.patch("", response_model=BusinessProfileResponse)
@limit_writes
async def update_business_profile(
    request: Request,
    body: BusinessProfileUpdateRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[BusinessProfileService, Depends(get_business_profile_service_for_write)],
):
    """Partially update the caller's business profile."""
    profile = await service.get_owned(user_id)
    updated = await service.update(profile.id, body.model_dump(mode="json", exclude_unset=True))
    return BusinessProfileResponse.model_validate(updated)


@router.post("/complete", response_model=BusinessProfileResponse)
@limit_writes
async def complete_onboarding(
    request: Request,
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[BusinessProfileService, Depends(get_business_profile_service_for_write)],
    orchestrator: Annotated[OnboardingOrchestrator, Depends(get_onboarding_orchestrator)],
):
    """Stamp onboarding_complete_at once every section has been completed."""
    profile = await service.get_owned(user_id)
    if not await orchestrator.is_onboarding_complete(profile.id):
        raise ValidationException(
            "Onboarding is not complete: every section must be completed first",
            field="completed_steps",
        )
    updated = await service.mark_onboarding_complete(profile.id)
    return BusinessProfileResponse.model_validate(updated)
