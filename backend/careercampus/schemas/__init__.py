"""Pydantic schemas for profiles, career records, and resume tools."""

from careercampus.schemas.career import (
    AtsAnalysis,
    CareerOption,
    RecommendationResponse,
    RoadmapStep,
    SalaryRange,
)
from careercampus.schemas.profile import (
    AuthUser,
    ProfileDraftRequest,
    UserProfile,
    UserStage,
    WorkEnvironment,
)
from careercampus.schemas.resume import (
    AtsAnalysisRequest,
    ResumeDraftResponse,
    ResumePdfRequest,
)

__all__ = [
    # Profile
    "AuthUser",
    "ProfileDraftRequest",
    "UserProfile",
    "UserStage",
    "WorkEnvironment",
    # Career records
    "AtsAnalysis",
    "CareerOption",
    "RecommendationResponse",
    "RoadmapStep",
    "SalaryRange",
    # Resume tools
    "AtsAnalysisRequest",
    "ResumeDraftResponse",
    "ResumePdfRequest",
]
