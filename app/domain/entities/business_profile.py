"""Business profile domain entity.

The business entity being onboarded. At most one per owning user.
"""

import re
from dataclasses import dataclass

from app.domain.exceptions import AuthorizationException, ValidationException

_ABN_PATTERN = re.compile(r"^\d{11}$")
_ACN_PATTERN = re.compile(r"^\d{9}$")


def normalize_business_number(value: str) -> str:
    """Strip spaces so '51 824 753 556' and '51824753556' compare equal."""
    return value.replace(" ", "")


@dataclass
class BusinessProfileEntity:
    """Domain entity for a business profile.

    Validation runs on construction: names are required, ABN is 11 digits
    and ACN (when present) is 9 digits, after spaces are removed.
    """

    id: str
    user_id: str
    full_name: str
    trading_name: str
    abn: str
    acn: str | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate profile business rules. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Business profile ID is required", field="id")
        if not self.user_id:
            raise ValidationException("Business profile must have an owner", field="user_id")
        if not self.full_name or not self.full_name.strip():
            raise ValidationException("Full name is required", field="full_name")
        if not self.trading_name or not self.trading_name.strip():
            raise ValidationException("Trading name is required", field="trading_name")
        if not _ABN_PATTERN.match(normalize_business_number(self.abn)):
            raise ValidationException("ABN must be 11 digits", field="abn")
        if self.acn and not _ACN_PATTERN.match(normalize_business_number(self.acn)):
            raise ValidationException("ACN must be 9 digits", field="acn")

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def ensure_owned_by(self, user_id: str) -> None:
        """Raise AuthorizationException unless user_id owns this profile."""
        if not self.is_owned_by(user_id):
            raise AuthorizationException(resource="business_profile", action="access")
