"""Onboarding progress domain entity.

Represents where a business entity is in the six-section workflow,
independent of persistence.
"""

from dataclasses import dataclass, field

from app.domain.enums import OnboardingSection
from app.domain.exceptions import ValidationException
from app.domain.sections import FIRST_SECTION, SECTION_ORDER, next_section


@dataclass
class OnboardingProgressEntity:
    """Domain entity for onboarding progress (one per business profile).

    completed_steps has set semantics but is kept as an ordered list in
    completion order, matching how it is persisted. current_step is a
    pointer for the UI and need not equal the first incomplete section.
    """

    business_profile_id: str
    current_step: OnboardingSection = FIRST_SECTION
    completed_steps: list[OnboardingSection] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate progress rules. Raises ValidationException if invalid."""
        if not self.business_profile_id:
            raise ValidationException(
                "Business profile ID is required", field="business_profile_id"
            )

    @classmethod
    def initial(cls, business_profile_id: str) -> "OnboardingProgressEntity":
        """Progress for an entity that has not completed any section."""
        return cls(business_profile_id=business_profile_id)

    def mark_complete(self, step: OnboardingSection) -> None:
        """Record step as completed and advance the pointer.

        The step is appended only when absent. The pointer moves to the
        section after step, or stays on step when it is the last section.
        Completing out of order is allowed.

        Args:
            step: Section the caller has finished.
        """
        if step not in self.completed_steps:
            self.completed_steps.append(step)
        self.current_step = next_section(step) or step

    def is_section_complete(self, section: OnboardingSection) -> bool:
        return section in self.completed_steps

    def is_complete(self) -> bool:
        """Return whether every section has been completed.

        Set comparison; order and duplicates in completed_steps are irrelevant.
        """
        return set(self.completed_steps) >= set(SECTION_ORDER)
