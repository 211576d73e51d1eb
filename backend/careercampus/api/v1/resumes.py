"""Resume tools API router.

Endpoints:
- POST /draft: Generate a Markdown resume from a profile.
- POST /ats-analysis: Audit pasted resume text for a target country.
- POST /pdf: Render a resume draft as a PDF download.
"""

from urllib.parse import quote

from fastapi import APIRouter, Request, Response

from careercampus.api.deps import LLMProviderDep, service_error_to_api_error
from careercampus.core.config import settings
from careercampus.core.rate_limiting import limiter
from careercampus.core.responses import DataResponse
from careercampus.schemas.career import AtsAnalysis
from careercampus.schemas.profile import UserProfile
from careercampus.schemas.resume import (
    AtsAnalysisRequest,
    ResumeDraftResponse,
    ResumePdfRequest,
)
from careercampus.services.career_guidance import (
    analyze_resume_ats,
    generate_resume_draft,
)
from careercampus.services.guidance_errors import ServiceError
from careercampus.services.resume_pdf import (
    render_resume_draft_pdf,
    resume_pdf_filename,
)

router = APIRouter()


@router.post("/draft")
@limiter.limit(settings.rate_limit_llm)
async def create_resume_draft(
    request: Request,  # noqa: ARG001 - required by @limiter.limit()
    profile: UserProfile,
    provider: LLMProviderDep,
) -> DataResponse[ResumeDraftResponse]:
    """Generate an ATS-friendly Markdown resume for a profile.

    Raises:
        UpstreamModelError: If the model call fails (502).
        ModelNotConfiguredError: If no API key is configured (503).
    """
    try:
        markdown = await generate_resume_draft(profile, provider)
    except ServiceError as exc:
        raise service_error_to_api_error(exc) from exc
    return DataResponse(data=ResumeDraftResponse(markdown=markdown))


@router.post("/ats-analysis")
@limiter.limit(settings.rate_limit_llm)
async def create_ats_analysis(
    request: Request,  # noqa: ARG001 - required by @limiter.limit()
    body: AtsAnalysisRequest,
    provider: LLMProviderDep,
) -> DataResponse[AtsAnalysis]:
    """Score resume text the way an ATS for the chosen country would.

    Raises:
        UpstreamModelError: If the model call or its output fails (502).
        ModelNotConfiguredError: If no API key is configured (503).
    """
    try:
        result = await analyze_resume_ats(body.resume_text, body.country, provider)
    except ServiceError as exc:
        raise service_error_to_api_error(exc) from exc
    return DataResponse(data=result)


@router.post("/pdf")
async def download_resume_pdf(body: ResumePdfRequest) -> Response:
    """Render a resume draft as a PDF attachment.

    Args:
        body: Resume text and the name for the title and filename.

    Returns:
        application/pdf response with a Content-Disposition filename.
    """
    pdf_bytes = render_resume_draft_pdf(body.resume_text, body.name)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": _content_disposition(body.name)},
    )


def _content_disposition(user_name: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 UTF-8 name."""
    filename = resume_pdf_filename(user_name)
    ascii_name = filename.encode("ascii", "ignore").decode().replace('"', "_")
    if ascii_name == resume_pdf_filename(""):
        ascii_name = "Resume_Draft.pdf"
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
