"""Onboarding workflow API: section data, progress, navigation, requirements, status.

Routes act on the business profile owned by the authenticated user.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.api.v1.dependencies.auth import get_current_user_id
from app.api.v1.dependencies.onboarding import (
    get_business_profile_service_for_write,
    get_onboarding_orchestrator,
    get_onboarding_orchestrator_for_write,
    get_owned_business_profile,
    get_requirement_catalog,
)
from app.application.dtos.business_profile import BusinessProfileResult
from app.application.dtos.progress import OnboardingProgressResult
from app.application.interfaces.repositories import IRequirementCatalog
from app.application.use_cases.business_profiles import BusinessProfileService
from app.application.use_cases.onboarding import OnboardingOrchestrator, ProgressTracker
from app.application.use_cases.validation import require_section
from app.core.limiter import limit_writes
from app.domain.enums import OnboardingSection
from app.domain.exceptions import ResourceNotFoundException
from app.domain.sections import FIRST_SECTION, SECTION_ORDER
from app.schemas.agreement import SignedAgreementResponse
from app.schemas.document import OnboardingDocumentResponse
from app.schemas.onboarding import (
    NavigationResponse,
    OnboardingSnapshotResponse,
    OverallStatusResponse,
    ProgressResponse,
    RequirementRuleResponse,
    SectionDataRequest,
    SectionRecordResponse,
    SectionRequirementsResponse,
    SectionSubmitResponse,
    validate_section_payload,
)

router = APIRouter()

OwnedProfile = Annotated[BusinessProfileResult, Depends(get_owned_business_profile)]
ReadOrchestrator = Annotated[OnboardingOrchestrator, Depends(get_onboarding_orchestrator)]
WriteOrchestrator = Annotated[
    OnboardingOrchestrator, Depends(get_onboarding_orchestrator_for_write)
]


def _validated_payload(section: OnboardingSection, data: dict[str, Any]) -> dict[str, Any]:
    """Validate data against the section's payload model; 422 on mismatch."""
    try:
        return validate_section_payload(section, data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


def _progress_response(
    business_profile_id: str, progress: OnboardingProgressResult | None
) -> ProgressResponse:
    """Progress as returned by the API; no record yet reads as the initial state."""
    return ProgressResponse(
        business_profile_id=business_profile_id,
        current_step=progress.current_step if progress else FIRST_SECTION,
        completed_steps=list(progress.completed_steps) if progress else [],
        is_complete=ProgressTracker.is_complete(progress),
    )


@router.get("", response_model=OnboardingSnapshotResponse)
async def load_onboarding(profile: OwnedProfile, orchestrator: ReadOrchestrator):
    """Resume snapshot: pointer, every section payload, documents and agreements."""
    snapshot = await orchestrator.load_onboarding(profile.id)
    return OnboardingSnapshotResponse(
        business_profile_id=snapshot.business_profile_id,
        current_section=snapshot.current_section,
        completed_steps=list(snapshot.progress.completed_steps) if snapshot.progress else [],
        sections=snapshot.sections,
        documents=[OnboardingDocumentResponse.model_validate(d) for d in snapshot.documents],
        agreements=[SignedAgreementResponse.model_validate(a) for a in snapshot.agreements],
    )


@router.get("/status", response_model=OverallStatusResponse)
async def get_overall_status(profile: OwnedProfile, orchestrator: ReadOrchestrator):
    """Per-section completion flags, pointer, documents and agreements."""
    status = await orchestrator.get_overall_status(profile.id)
    return OverallStatusResponse.model_validate(status)


@router.get("/progress", response_model=ProgressResponse)
async def get_progress(profile: OwnedProfile, orchestrator: ReadOrchestrator):
    """Progress record; an entity with no record reads as on the first section."""
    progress = await orchestrator.get_progress(profile.id)
    return _progress_response(profile.id, progress)


@router.get("/requirements", response_model=list[RequirementRuleResponse])
async def list_requirement_rules(
    catalog: Annotated[IRequirementCatalog, Depends(get_requirement_catalog)],
    _: Annotated[str, Depends(get_current_user_id)],
    section: str | None = None,
):
    """Document requirement rules, for one section or the whole workflow."""
    sections = [require_section(section)] if section is not None else list(SECTION_ORDER)
    rules = []
    for s in sections:
        rules.extend(await catalog.get_rules(s))
    return [RequirementRuleResponse.model_validate(r) for r in rules]


@router.get("/sections", response_model=list[SectionRecordResponse])
async def list_sections(profile: OwnedProfile, orchestrator: ReadOrchestrator):
    """Every saved section record (unsaved sections are omitted)."""
    records = await orchestrator.get_all_section_data(profile.id)
    return [SectionRecordResponse.model_validate(r) for r in records]


@router.get("/sections/{section}", response_model=SectionRecordResponse)
async def get_section(section: str, profile: OwnedProfile, orchestrator: ReadOrchestrator):
    """One section record; 404 when the section was never saved."""
    record = await orchestrator.get_section_data(profile.id, section)
    if record is None:
        raise ResourceNotFoundException("onboarding_section", f"{profile.id}:{section}")
    return SectionRecordResponse.model_validate(record)


@router.put("/sections/{section}", response_model=SectionRecordResponse)
@limit_writes
async def save_section(
    request: Request,
    section: str,
    body: SectionDataRequest,
    profile: OwnedProfile,
    orchestrator: WriteOrchestrator,
):
    """Save (replace) a section payload without completing it."""
    parsed = require_section(section)
    record = await orchestrator.save_section_data(
        profile.id, parsed, _validated_payload(parsed, body.data)
    )
    return SectionRecordResponse.model_validate(record)


@router.post("/sections/{section}/complete", response_model=ProgressResponse)
@limit_writes
async def complete_section(
    request: Request,
    section: str,
    profile: OwnedProfile,
    orchestrator: WriteOrchestrator,
):
    """Mark a section complete and advance the pointer."""
    progress = await orchestrator.complete_section(profile.id, section)
    return _progress_response(profile.id, progress)


@router.post("/sections/{section}/submit", response_model=SectionSubmitResponse)
@limit_writes
async def submit_section(
    request: Request,
    section: str,
    body: SectionDataRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    profiles: Annotated[BusinessProfileService, Depends(get_business_profile_service_for_write)],
    orchestrator: WriteOrchestrator,
):
    """Save and complete a section in one request.

    Submitting the basic section creates the caller's business profile
    from its payload when none exists yet.
    """
    parsed = require_section(section)
    data = _validated_payload(parsed, body.data)
    if parsed == OnboardingSection.BASIC:
        profile = await profiles.ensure_for_basic_submission(user_id, data)
    else:
        profile = await profiles.get_owned(user_id)
    result = await orchestrator.submit_section(profile.id, parsed, data)
    return SectionSubmitResponse(
        progress=_progress_response(profile.id, result.progress),
        next_section=result.next_section,
    )


@router.get(
    "/sections/{section}/requirements", response_model=SectionRequirementsResponse
)
async def check_section_requirements(
    section: str, profile: OwnedProfile, orchestrator: ReadOrchestrator
):
    """Mandatory documents for a section against what has been uploaded."""
    result = await orchestrator.check_section_requirements(profile.id, section)
    return SectionRequirementsResponse.model_validate(result)


@router.get("/sections/{section}/navigation", response_model=NavigationResponse)
async def get_navigation(
    section: str,
    orchestrator: ReadOrchestrator,
    _: Annotated[str, Depends(get_current_user_id)],
):
    """Next and previous sections in workflow order."""
    return NavigationResponse.model_validate(orchestrator.get_navigation(section))
