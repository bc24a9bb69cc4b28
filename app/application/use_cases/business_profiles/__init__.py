"""Business profile use cases."""

from app.application.use_cases.business_profiles.business_profile_operations import (
    BusinessProfileService,
    profile_create_from_basic_section,
)

__all__ = [
    "BusinessProfileService",
    "profile_create_from_basic_section",
]
