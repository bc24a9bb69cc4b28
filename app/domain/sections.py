"""Section ordering for the onboarding workflow.

SECTION_ORDER is the single definition of the workflow order; every
next/previous computation goes through the helpers below.
"""

from app.domain.enums import OnboardingSection

SECTION_ORDER: tuple[OnboardingSection, ...] = (
    OnboardingSection.BASIC,
    OnboardingSection.FARM,
    OnboardingSection.FINANCIAL,
    OnboardingSection.COMPLIANCE,
    OnboardingSection.STORAGE,
    OnboardingSection.COMMUNICATIONS,
)

FIRST_SECTION = SECTION_ORDER[0]
LAST_SECTION = SECTION_ORDER[-1]


def parse_section(value: str | OnboardingSection) -> OnboardingSection | None:
    """Return the section for a raw value, or None when it is not a known section."""
    if isinstance(value, OnboardingSection):
        return value
    try:
        return OnboardingSection(value)
    except ValueError:
        return None


def section_index(section: OnboardingSection) -> int:
    """Zero-based position of section in the workflow."""
    return SECTION_ORDER.index(section)


def next_section(current: OnboardingSection) -> OnboardingSection | None:
    """Section after current, or None when current is the last section."""
    idx = section_index(current)
    if idx + 1 < len(SECTION_ORDER):
        return SECTION_ORDER[idx + 1]
    return None


def previous_section(current: OnboardingSection) -> OnboardingSection | None:
    """Section before current, or None when current is the first section."""
    idx = section_index(current)
    if idx > 0:
        return SECTION_ORDER[idx - 1]
    return None
