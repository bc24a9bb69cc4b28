"""Onboarding use cases: section data, progress, requirements, and the orchestrator facade."""

from app.application.use_cases.onboarding.orchestrator import OnboardingOrchestrator
from app.application.use_cases.onboarding.progress_tracker import ProgressTracker
from app.application.use_cases.onboarding.requirements import RequirementEvaluator
from app.application.use_cases.onboarding.section_data import SectionDataService

__all__ = [
    "OnboardingOrchestrator",
    "ProgressTracker",
    "RequirementEvaluator",
    "SectionDataService",
]
