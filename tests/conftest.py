"""Pytest configuration and fixtures for the onboarding engine.

API tests run app.main:app over ASGI with the service dependencies
overridden by in-memory fakes, so they need no database. Repository tests
are marked requires_db and use db_session, which skips when DATABASE_URL
is not set.
"""

import os
import tempfile
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("STORAGE_BACKEND", "local")
os.environ.setdefault("STORAGE_ROOT", tempfile.mkdtemp(prefix="onboarding-test-"))

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.address import AddressCreate, AddressResult
from app.application.dtos.agreement import SignedAgreementResult
from app.application.dtos.business_profile import (
    BusinessProfileCreate,
    BusinessProfileResult,
)
from app.application.dtos.document import (
    OnboardingDocumentCreate,
    OnboardingDocumentResult,
)
from app.application.dtos.progress import OnboardingProgressResult
from app.application.dtos.section import SectionRecordResult
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
from app.domain.enums import AgreementType, OnboardingSection
from app.infrastructure.security.jwt import create_access_token
from app.shared.utils.datetime import utc_now

get_settings.cache_clear()


# ---- In-memory fakes implementing the repository and storage ports ----


class InMemoryBusinessProfileRepository:
    def __init__(self) -> None:
        self.rows: dict[str, BusinessProfileResult] = {}

    async def get_by_id(self, profile_id: str) -> BusinessProfileResult | None:
        return self.rows.get(profile_id)

    async def get_by_user_id(self, user_id: str) -> BusinessProfileResult | None:
        return next((p for p in self.rows.values() if p.user_id == user_id), None)

    async def create_profile(
        self, profile_id: str, user_id: str, data: BusinessProfileCreate
    ) -> BusinessProfileResult:
        now = utc_now()
        row = BusinessProfileResult(
            id=profile_id,
            user_id=user_id,
            full_name=data.full_name,
            trading_name=data.trading_name,
            abn=data.abn,
            acn=data.acn,
            gst_registered=data.gst_registered,
            business_structure=data.business_structure,
            main_contact=dict(data.main_contact or {}),
            contact_emails=dict(data.contact_emails or {}),
            contact_phones=dict(data.contact_phones or {}),
            onboarding_complete_at=None,
            created_at=now,
            updated_at=now,
        )
        self.rows[profile_id] = row
        return row

    async def update_profile(
        self, profile_id: str, updates: dict[str, Any]
    ) -> BusinessProfileResult | None:
        row = self.rows.get(profile_id)
        if row is None:
            return None
        row = replace(row, **updates, updated_at=utc_now())
        self.rows[profile_id] = row
        return row

    async def set_onboarding_complete(
        self, profile_id: str, completed_at: datetime
    ) -> BusinessProfileResult | None:
        return await self.update_profile(profile_id, {"onboarding_complete_at": completed_at})


class InMemoryAddressRepository:
    def __init__(self) -> None:
        self.rows: dict[str, AddressResult] = {}

    async def create_address(self, data: AddressCreate) -> AddressResult:
        row = AddressResult(
            id=data.id,
            business_profile_id=data.business_profile_id,
            address_type=data.address_type,
            line1=data.line1,
            line2=data.line2,
            suburb=data.suburb,
            state=data.state,
            postcode=data.postcode,
            country=data.country,
            is_primary=data.is_primary,
        )
        self.rows[data.id] = row
        return row

    async def get_by_id(self, address_id: str) -> AddressResult | None:
        return self.rows.get(address_id)

    async def list_by_entity(self, business_profile_id: str) -> list[AddressResult]:
        rows = [a for a in self.rows.values() if a.business_profile_id == business_profile_id]
        return sorted(rows, key=lambda a: not a.is_primary)

    async def update_address(
        self, address_id: str, updates: dict[str, Any]
    ) -> AddressResult | None:
        row = self.rows.get(address_id)
        if row is None:
            return None
        row = replace(row, **updates)
        self.rows[address_id] = row
        return row

    async def delete_address(self, address_id: str) -> bool:
        return self.rows.pop(address_id, None) is not None


class InMemorySectionRepository:
    def __init__(self) -> None:
        self.rows: dict[tuple[str, OnboardingSection], SectionRecordResult] = {}

    async def upsert(
        self,
        business_profile_id: str,
        section: OnboardingSection,
        data: dict[str, Any],
        updated_at: datetime,
    ) -> SectionRecordResult:
        row = SectionRecordResult(
            business_profile_id=business_profile_id,
            section_name=section,
            data=dict(data),
            updated_at=updated_at,
        )
        self.rows[(business_profile_id, section)] = row
        return row

    async def get(
        self, business_profile_id: str, section: OnboardingSection
    ) -> SectionRecordResult | None:
        return self.rows.get((business_profile_id, section))

    async def list_by_entity(self, business_profile_id: str) -> list[SectionRecordResult]:
        return [r for (bp, _), r in self.rows.items() if bp == business_profile_id]


class InMemoryDocumentRepository:
    def __init__(self) -> None:
        self.rows: dict[str, OnboardingDocumentResult] = {}

    async def create_document(self, data: OnboardingDocumentCreate) -> OnboardingDocumentResult:
        row = OnboardingDocumentResult(
            id=data.id,
            business_profile_id=data.business_profile_id,
            section_name=data.section_name,
            doc_type=data.doc_type,
            storage_ref=data.storage_ref,
            file_url=data.file_url,
            expiry_date=data.expiry_date,
            uploaded_at=utc_now(),
        )
        self.rows[data.id] = row
        return row

    async def delete_document(self, document_id: str) -> bool:
        return self.rows.pop(document_id, None) is not None

    async def get_by_id(self, document_id: str) -> OnboardingDocumentResult | None:
        return self.rows.get(document_id)

    async def list_by_entity(self, business_profile_id: str) -> list[OnboardingDocumentResult]:
        return [d for d in self.rows.values() if d.business_profile_id == business_profile_id]

    async def list_by_entity_section(
        self,
        business_profile_id: str,
        section: OnboardingSection,
        include_untagged: bool = False,
    ) -> list[OnboardingDocumentResult]:
        return [
            d
            for d in self.rows.values()
            if d.business_profile_id == business_profile_id
            and (d.section_name == section or (include_untagged and d.section_name is None))
        ]


class InMemoryAgreementRepository:
    def __init__(self) -> None:
        self.rows: dict[tuple[str, AgreementType], SignedAgreementResult] = {}

    async def upsert(
        self,
        agreement_id: str,
        business_profile_id: str,
        agreement: AgreementType,
        signed_by_user: str,
        signed_at: datetime,
        file_url: str | None,
    ) -> SignedAgreementResult:
        key = (business_profile_id, agreement)
        existing = self.rows.get(key)
        row = SignedAgreementResult(
            id=existing.id if existing else agreement_id,
            business_profile_id=business_profile_id,
            agreement=agreement,
            signed_by_user=signed_by_user,
            signed_at=signed_at,
            file_url=file_url,
        )
        self.rows[key] = row
        return row

    async def get(
        self, business_profile_id: str, agreement: AgreementType
    ) -> SignedAgreementResult | None:
        return self.rows.get((business_profile_id, agreement))

    async def list_by_entity(self, business_profile_id: str) -> list[SignedAgreementResult]:
        return [a for (bp, _), a in self.rows.items() if bp == business_profile_id]


class InMemoryProgressRepository:
    def __init__(self) -> None:
        self.rows: dict[str, OnboardingProgressResult] = {}

    async def get(self, business_profile_id: str) -> OnboardingProgressResult | None:
        return self.rows.get(business_profile_id)

    async def upsert(
        self,
        business_profile_id: str,
        current_step: OnboardingSection,
        completed_steps: list[OnboardingSection],
    ) -> OnboardingProgressResult:
        row = OnboardingProgressResult(
            business_profile_id=business_profile_id,
            current_step=current_step,
            completed_steps=list(completed_steps),
        )
        self.rows[business_profile_id] = row
        return row


class InMemoryStorage:
    """File store keeping bytes in a dict; URLs look like the local backend's."""

    base_url = "http://files.test"

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.modified: dict[str, datetime] = {}

    async def upload(self, file_data: bytes, storage_ref: str, content_type: str) -> None:
        self.objects[storage_ref] = (file_data, content_type)
        self.modified[storage_ref] = utc_now()

    def backdate(self, storage_ref: str, age: timedelta) -> None:
        self.modified[storage_ref] = utc_now() - age

    async def get_modified_at(self, storage_ref: str) -> datetime | None:
        if storage_ref not in self.objects:
            return None
        return self.modified[storage_ref]

    def get_public_url(self, storage_ref: str) -> str:
        return f"{self.base_url}/files/{storage_ref}"

    async def list_refs(self, prefix: str) -> list[str]:
        return sorted(ref for ref in self.objects if ref.startswith(prefix))

    async def delete(self, storage_ref: str) -> bool:
        return self.objects.pop(storage_ref, None) is not None

    async def exists(self, storage_ref: str) -> bool:
        return storage_ref in self.objects


class FakeBackend:
    """One set of fakes shared by every service built in a test."""

    def __init__(self) -> None:
        self.profiles = InMemoryBusinessProfileRepository()
        self.addresses = InMemoryAddressRepository()
        self.sections = InMemorySectionRepository()
        self.documents = InMemoryDocumentRepository()
        self.agreements = InMemoryAgreementRepository()
        self.progress = InMemoryProgressRepository()
        self.storage = InMemoryStorage()
        self.catalog = StaticRequirementCatalog()

    def orchestrator(self, count_business_wide_documents: bool = False) -> OnboardingOrchestrator:
        return OnboardingOrchestrator(
            section_service=SectionDataService(self.sections),
            document_service=OnboardingDocumentService(self.storage, self.documents),
            agreement_service=AgreementService(self.agreements),
            progress_tracker=ProgressTracker(self.progress),
            requirement_evaluator=RequirementEvaluator(
                self.catalog,
                self.documents,
                count_business_wide_documents=count_business_wide_documents,
            ),
        )

    def profile_service(self) -> BusinessProfileService:
        return BusinessProfileService(self.profiles)

    def address_service(self) -> AddressService:
        return AddressService(self.addresses)


# ---- Fixtures ----


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def orchestrator(backend: FakeBackend) -> OnboardingOrchestrator:
    return backend.orchestrator()


@pytest.fixture
def basic_payload() -> dict[str, Any]:
    """A valid basic-section payload."""
    return {
        "full_name": "Jane Grower",
        "trading_name": "Grower Farms",
        "abn": "51 824 753 556",
        "acn": "004 085 616",
        "gst_registered": True,
        "business_structure": "company",
        "main_contact": {"name": "Jane Grower", "title": "Director"},
        "contact_emails": {"accounts": "accounts@growerfarms.com.au", "admin": "admin@growerfarms.com.au"},
        "contact_phones": {"primary": "0400 000 000"},
    }


@pytest.fixture
async def client(backend: FakeBackend) -> AsyncClient:
    """Async HTTP client against the FastAPI app with fakes behind the service dependencies."""
    from app.api.v1.dependencies import onboarding as deps
    from app.core.limiter import limiter
    from app.main import app

    async def _orchestrator() -> OnboardingOrchestrator:
        return backend.orchestrator()

    async def _profiles() -> BusinessProfileService:
        return backend.profile_service()

    async def _addresses() -> AddressService:
        return backend.address_service()

    app.dependency_overrides[deps.get_onboarding_orchestrator] = _orchestrator
    app.dependency_overrides[deps.get_onboarding_orchestrator_for_write] = _orchestrator
    app.dependency_overrides[deps.get_business_profile_service] = _profiles
    app.dependency_overrides[deps.get_business_profile_service_for_write] = _profiles
    app.dependency_overrides[deps.get_address_service] = _addresses
    app.dependency_overrides[deps.get_address_service_for_write] = _addresses
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def user_id() -> str:
    return "user-1"


@pytest.fixture
def auth_headers(user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository tests. Rolls back after the test.

    Skips when DATABASE_URL is not set. Run without a database via:
    pytest -m 'not requires_db'.
    """
    from app.domain.exceptions import SqlNotConfiguredException
    from app.infrastructure.persistence.database import get_session_factory

    try:
        session_factory = get_session_factory()
    except SqlNotConfiguredException:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with session_factory() as session:
        yield session
        await session.rollback()
