"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    addresses,
    agreements,
    business_profiles,
    documents,
    health,
    onboarding,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    business_profiles.router, prefix="/business-profile", tags=["business-profile"]
)
api_router.include_router(
    addresses.router, prefix="/business-profile/addresses", tags=["addresses"]
)
api_router.include_router(onboarding.router, prefix="/onboarding", tags=["onboarding"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(agreements.router, prefix="/agreements", tags=["agreements"])
