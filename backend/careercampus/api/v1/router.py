"""API v1 router aggregator.

All v1 endpoint routers are included here and mounted at /api/v1.
"""

from fastapi import APIRouter

from careercampus.api.v1 import careers, onboarding, resumes

router = APIRouter()

# =============================================================================
# Profile Form
# =============================================================================

router.include_router(onboarding.router, prefix="/onboarding", tags=["onboarding"])

# =============================================================================
# Model-backed Guidance
# =============================================================================

router.include_router(careers.router, prefix="/careers", tags=["careers"])
router.include_router(resumes.router, prefix="/resumes", tags=["resumes"])
