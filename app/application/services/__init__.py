"""Application services: requirement catalog."""

from app.application.services.requirement_catalog import (
    DEFAULT_RULES,
    StaticRequirementCatalog,
)

__all__ = [
    "DEFAULT_RULES",
    "StaticRequirementCatalog",
]
