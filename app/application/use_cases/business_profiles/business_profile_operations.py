"""Business profile operations: one profile per owning user."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from app.application.dtos.business_profile import (
    BusinessProfileCreate,
    BusinessProfileResult,
)
from app.application.interfaces.repositories import IBusinessProfileRepository
from app.domain.entities.business_profile import (
    BusinessProfileEntity,
    normalize_business_number,
)
from app.domain.exceptions import (
    BusinessProfileAlreadyExistsException,
    ResourceNotFoundException,
    ValidationException,
)
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid

UPDATABLE_FIELDS = frozenset(
    {
        "full_name",
        "trading_name",
        "abn",
        "acn",
        "gst_registered",
        "business_structure",
        "main_contact",
        "contact_emails",
        "contact_phones",
    }
)
# Fields a PATCH may set to null; the rest are NOT NULL in business_profiles.
NULLABLE_FIELDS = frozenset({"acn", "business_structure"})


def _validate(profile_id: str, user_id: str, full_name: str, trading_name: str, abn: str, acn: str | None) -> None:
    BusinessProfileEntity(
        id=profile_id,
        user_id=user_id,
        full_name=full_name,
        trading_name=trading_name,
        abn=abn,
        acn=acn,
    )


def profile_create_from_basic_section(data: dict[str, Any]) -> BusinessProfileCreate:
    """Build profile input from a basic-section payload.

    Raises:
        ValidationException: A required basic field is missing.
    """
    for key in ("full_name", "trading_name", "abn"):
        if not data.get(key):
            raise ValidationException(f"{key} is required", field=key)
    return BusinessProfileCreate(
        full_name=data["full_name"],
        trading_name=data["trading_name"],
        abn=data["abn"],
        acn=data.get("acn") or None,
        gst_registered=bool(data.get("gst_registered", False)),
        business_structure=data.get("business_structure"),
        main_contact=data.get("main_contact"),
        contact_emails=data.get("contact_emails"),
        contact_phones=data.get("contact_phones"),
    )


class BusinessProfileService:
    """Creates, reads and updates the business profile owned by a user."""

    def __init__(self, profile_repo: IBusinessProfileRepository) -> None:
        self.profile_repo = profile_repo

    async def get_by_user_id(self, user_id: str) -> BusinessProfileResult | None:
        return await self.profile_repo.get_by_user_id(user_id)

    async def get_owned(self, user_id: str) -> BusinessProfileResult:
        """Return the user's profile.

        Raises:
            ResourceNotFoundException: The user has no business profile yet.
        """
        profile = await self.profile_repo.get_by_user_id(user_id)
        if profile is None:
            raise ResourceNotFoundException("business_profile", f"user:{user_id}")
        return profile

    @staticmethod
    def assert_owner(profile: BusinessProfileResult, user_id: str) -> None:
        """Raise AuthorizationException unless user_id owns profile."""
        BusinessProfileEntity(
            id=profile.id,
            user_id=profile.user_id,
            full_name=profile.full_name,
            trading_name=profile.trading_name,
            abn=profile.abn,
            acn=profile.acn,
        ).ensure_owned_by(user_id)

    async def create(self, user_id: str, data: BusinessProfileCreate) -> BusinessProfileResult:
        """Create the user's profile.

        Raises:
            ValidationException: Names missing or ABN/ACN malformed.
            BusinessProfileAlreadyExistsException: The user already owns a profile.
        """
        if await self.profile_repo.get_by_user_id(user_id) is not None:
            raise BusinessProfileAlreadyExistsException(user_id)
        profile_id = generate_cuid()
        data = replace(
            data,
            abn=normalize_business_number(data.abn),
            acn=normalize_business_number(data.acn) if data.acn else None,
        )
        _validate(profile_id, user_id, data.full_name, data.trading_name, data.abn, data.acn)
        return await self.profile_repo.create_profile(profile_id, user_id, data)

    async def ensure_for_basic_submission(
        self, user_id: str, basic_data: dict[str, Any]
    ) -> BusinessProfileResult:
        """Return the user's profile, creating it from the basic-section payload when absent."""
        existing = await self.profile_repo.get_by_user_id(user_id)
        if existing is not None:
            return existing
        return await self.create(user_id, profile_create_from_basic_section(basic_data))

    async def update(self, profile_id: str, updates: dict[str, Any]) -> BusinessProfileResult:
        """Apply a partial update of the allowed fields.

        Raises:
            ValidationException: Unknown field, null for a required field, or
                the result breaks profile rules.
            ResourceNotFoundException: Profile does not exist.
        """
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationException(
                f"Fields cannot be updated: {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )
        nulled = sorted(k for k, v in updates.items() if v is None and k not in NULLABLE_FIELDS)
        if nulled:
            raise ValidationException(f"{nulled[0]} cannot be null", field=nulled[0])
        current = await self.profile_repo.get_by_id(profile_id)
        if current is None:
            raise ResourceNotFoundException("business_profile", profile_id)
        updates = dict(updates)
        if updates.get("abn"):
            updates["abn"] = normalize_business_number(updates["abn"])
        if updates.get("acn"):
            updates["acn"] = normalize_business_number(updates["acn"])
        _validate(
            current.id,
            current.user_id,
            updates.get("full_name", current.full_name),
            updates.get("trading_name", current.trading_name),
            updates.get("abn", current.abn),
            updates.get("acn", current.acn),
        )
        updated = await self.profile_repo.update_profile(profile_id, updates)
        if updated is None:
            raise ResourceNotFoundException("business_profile", profile_id)
        return updated

    async def mark_onboarding_complete(self, profile_id: str) -> BusinessProfileResult:
        """Stamp onboarding_complete_at with the current time."""
        updated = await self.profile_repo.set_onboarding_complete(profile_id, utc_now())
        if updated is None:
            raise ResourceNotFoundException("business_profile", profile_id)
        return updated
