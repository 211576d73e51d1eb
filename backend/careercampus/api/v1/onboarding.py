"""Onboarding API router.

Endpoints:
- GET  /options: Suggested tags and choice lists for the profile form.
- POST /profile: Validate a posted form and return the frozen profile.
"""

import structlog
from fastapi import APIRouter

from careercampus.core.errors import ValidationError
from careercampus.core.responses import DataResponse
from careercampus.schemas.profile import (
    ProfileDraftRequest,
    UserProfile,
    UserStage,
    WorkEnvironment,
)
from careercampus.schemas.resume import ATS_COUNTRIES, DEFAULT_ATS_COUNTRY
from careercampus.services.profile_wizard import (
    FORM_STEPS,
    INTEREST_TAGS,
    SKILL_TAGS,
    ProfileWizard,
    first_invalid_step,
)

logger = structlog.get_logger()

router = APIRouter()


@router.get("/options")
async def get_onboarding_options() -> DataResponse[dict]:
    """Return the choices the profile form and resume tools offer.

    Returns:
        DataResponse with steps, stages, work environments, suggested
        interest/skill tags, and ATS target countries.
    """
    return DataResponse(
        data={
            "steps": [step.value for step in FORM_STEPS],
            "stages": [
                {"value": stage.value, "label": stage.label} for stage in UserStage
            ],
            "workEnvironments": [env.value for env in WorkEnvironment],
            "defaultWorkEnvironment": WorkEnvironment.HYBRID.value,
            "interestTags": list(INTEREST_TAGS),
            "skillTags": list(SKILL_TAGS),
            "atsCountries": list(ATS_COUNTRIES),
            "defaultAtsCountry": DEFAULT_ATS_COUNTRY,
        }
    )


@router.post("/profile")
async def validate_profile(body: ProfileDraftRequest) -> DataResponse[UserProfile]:
    """Run the wizard's step rules over a posted form.

    Args:
        body: Form values as entered.

    Returns:
        DataResponse with the validated UserProfile.

    Raises:
        ValidationError: With the first failing step and its missing fields.
    """
    wizard = ProfileWizard.from_request(body)

    invalid = first_invalid_step(wizard.draft)
    if invalid is not None:
        step, missing = invalid
        raise ValidationError(
            message=f"Step {step.value} is incomplete.",
            details=[{"step": step.value, "field": name} for name in missing],
        )

    while wizard.can_advance() and wizard.step is not FORM_STEPS[-1]:
        wizard.next_step()
    return DataResponse(data=wizard.submit())
