"""Reference checks shared by onboarding use cases. Run before any write."""

from app.domain.enums import OnboardingSection
from app.domain.exceptions import ValidationException
from app.domain.sections import parse_section


def require_business_profile_id(business_profile_id: str | None) -> str:
    """Return business_profile_id, or raise ValidationException when it is empty."""
    if not business_profile_id or not business_profile_id.strip():
        raise ValidationException(
            "Business profile ID is required", field="business_profile_id"
        )
    return business_profile_id


def require_section(section: str | OnboardingSection | None) -> OnboardingSection:
    """Return section as an OnboardingSection, or raise ValidationException when unknown."""
    parsed = parse_section(section) if section is not None else None
    if parsed is None:
        raise ValidationException(f"Unknown section: {section}", field="section")
    return parsed
