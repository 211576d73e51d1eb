"""Career recommendations API router.

Endpoints:
- POST /recommendations: Profile in, four career paths out.
"""

from fastapi import APIRouter, Request

from careercampus.api.deps import LLMProviderDep, service_error_to_api_error
from careercampus.core.config import settings
from careercampus.core.rate_limiting import limiter
from careercampus.core.responses import DataResponse
from careercampus.schemas.career import RecommendationResponse
from careercampus.schemas.profile import UserProfile
from careercampus.services.career_guidance import generate_career_paths
from careercampus.services.guidance_errors import ServiceError

router = APIRouter()


@router.post("/recommendations")
@limiter.limit(settings.rate_limit_llm)
async def recommend_careers(
    request: Request,  # noqa: ARG001 - required by @limiter.limit()
    profile: UserProfile,
    provider: LLMProviderDep,
) -> DataResponse[RecommendationResponse]:
    """Generate career paths for a submitted profile.

    Args:
        request: HTTP request (required by rate limiter).
        profile: The validated user profile.
        provider: LLM provider (injected).

    Returns:
        DataResponse with the analysis and career options.

    Raises:
        UpstreamModelError: If the model call or its output fails (502).
        ModelNotConfiguredError: If no API key is configured (503).
    """
    try:
        result = await generate_career_paths(profile, provider)
    except ServiceError as exc:
        raise service_error_to_api_error(exc) from exc
    return DataResponse(data=result)
