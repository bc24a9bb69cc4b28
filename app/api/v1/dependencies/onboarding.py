"""Onboarding dependencies (composition root).

Builds repositories and services on the request's session. Read routes use
get_db; write routes use get_db_transactional so one request is one
transaction.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.business_profile import BusinessProfileResult
from app.application.interfaces.repositories import IRequirementCatalog
from app.application.interfaces.storage import IStorageService
from app.application.services.requirement_catalog import StaticRequirementCatalog
from app.application.use_cases.addresses import AddressService
from app.application.use_cases.agreements import AgreementService
from app.application.use_cases.business_profiles import BusinessProfileService
from app.application.use_cases.documents import OnboardingDocumentService
from app.application.use_cases.onboarding import (
    OnboardingOrchestrator,
    ProgressTracker,
    RequirementEvaluator,
    SectionDataService,
)
from app.core.config import get_settings
from app.infrastructure.external.storage import StorageFactory
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    AddressRepository,
    BusinessProfileRepository,
    OnboardingDocumentRepository,
    OnboardingProgressRepository,
    SectionRepository,
    SignedAgreementRepository,
)

from .auth import get_current_user_id

_default_catalog = StaticRequirementCatalog()


def get_storage_service(request: Request) -> IStorageService:
    """Storage backend built at startup; falls back to a fresh one outside the lifespan."""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        storage = StorageFactory.create_storage_service()
        request.app.state.storage = storage
    return storage


def get_requirement_catalog() -> IRequirementCatalog:
    return _default_catalog


def _build_orchestrator(
    db: AsyncSession,
    storage: IStorageService,
    catalog: IRequirementCatalog,
) -> OnboardingOrchestrator:
    document_repo = OnboardingDocumentRepository(db)
    return OnboardingOrchestrator(
        section_service=SectionDataService(SectionRepository(db)),
        document_service=OnboardingDocumentService(storage, document_repo),
        agreement_service=AgreementService(SignedAgreementRepository(db)),
        progress_tracker=ProgressTracker(OnboardingProgressRepository(db)),
        requirement_evaluator=RequirementEvaluator(
            catalog,
            document_repo,
            count_business_wide_documents=get_settings().requirements_count_business_wide_documents,
        ),
    )


async def get_onboarding_orchestrator(
    db: Annotated[AsyncSession, Depends(get_db)],
    storage: Annotated[IStorageService, Depends(get_storage_service)],
    catalog: Annotated[IRequirementCatalog, Depends(get_requirement_catalog)],
) -> OnboardingOrchestrator:
    """Orchestrator for read routes."""
    return _build_orchestrator(db, storage, catalog)


async def get_onboarding_orchestrator_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    storage: Annotated[IStorageService, Depends(get_storage_service)],
    catalog: Annotated[IRequirementCatalog, Depends(get_requirement_catalog)],
) -> OnboardingOrchestrator:
    """Orchestrator for write routes (single transaction per request)."""
    return _build_orchestrator(db, storage, catalog)


async def get_business_profile_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BusinessProfileService:
    return BusinessProfileService(BusinessProfileRepository(db))


async def get_business_profile_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> BusinessProfileService:
    return BusinessProfileService(BusinessProfileRepository(db))


async def get_address_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AddressService:
    return AddressService(AddressRepository(db))


async def get_address_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> AddressService:
    return AddressService(AddressRepository(db))


async def get_owned_business_profile(
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[BusinessProfileService, Depends(get_business_profile_service)],
) -> BusinessProfileResult:
    """The calling user's business profile. 404 when the user has none yet."""
    return await service.get_owned(user_id)
