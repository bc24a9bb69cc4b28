"""DTOs for business profile use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class BusinessProfileCreate:
    """Input for creating a business profile. Service assigns id and owner."""

    full_name: str
    trading_name: str
    abn: str
    acn: str | None = None
    gst_registered: bool = False
    business_structure: str | None = None
    main_contact: dict[str, Any] | None = None
    contact_emails: dict[str, Any] | None = None
    contact_phones: dict[str, Any] | None = None


@dataclass(frozen=True)
class BusinessProfileResult:
    """Business profile read-model (result of get_by_id, get_by_user_id, create, update)."""

    id: str
    user_id: str
    full_name: str
    trading_name: str
    abn: str
    acn: str | None
    gst_registered: bool
    business_structure: str | None
    main_contact: dict[str, Any]
    contact_emails: dict[str, Any]
    contact_phones: dict[str, Any]
    onboarding_complete_at: datetime | None
    created_at: datetime | None = None
    updated_at: datetime | None = None
