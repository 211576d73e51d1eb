"""User profile schemas.

Wire field names are camelCase (``academicBackground``); Python attributes
are snake_case. A built UserProfile is frozen; the wizard owns the mutable
draft until submission.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

_MAX_TEXT_LENGTH = 500
"""Upper bound on free-text profile fields sent to the model."""

_MAX_TAGS = 50
"""Upper bound on interests/skills per profile."""


class CamelModel(BaseModel):
    """Base for models exchanged with the dashboard and the model API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class UserStage(str, Enum):
    """Where the user is in their education."""

    POST_12TH = "POST_12TH"
    GRADUATE = "GRADUATE"

    @property
    def label(self) -> str:
        """Human-readable stage used in prompts and form options."""
        if self is UserStage.POST_12TH:
            return "Finished 12th Grade (High School)"
        return "Graduate / Job Seeker"


class WorkEnvironment(str, Enum):
    """Preferred working arrangement."""

    ON_SITE = "On-site"
    HYBRID = "Hybrid"
    REMOTE = "Remote"


def dedupe_tags(tags: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Trim tags and drop blanks and repeats, keeping first-seen order."""
    seen: dict[str, None] = {}
    for tag in tags:
        cleaned = tag.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return tuple(seen)


class UserProfile(CamelModel):
    """A submitted, validated user profile.

    Attributes:
        name: Display name.
        stage: Education stage.
        academic_background: Stream or degree (e.g., "PCM", "B.Tech in CS").
        grades: Free-form performance (e.g., "85%", "3.5 GPA").
        interests: Ordered, de-duplicated interest tags.
        skills: Ordered, de-duplicated skill tags. At least one of
            interests and skills is non-empty.
        preferred_work_environment: Optional working arrangement.
    """

    name: str = Field(min_length=1, max_length=_MAX_TEXT_LENGTH)
    stage: UserStage
    academic_background: str = Field(min_length=1, max_length=_MAX_TEXT_LENGTH)
    grades: str = Field(min_length=1, max_length=_MAX_TEXT_LENGTH)
    interests: tuple[str, ...] = Field(default=(), max_length=_MAX_TAGS)
    skills: tuple[str, ...] = Field(default=(), max_length=_MAX_TAGS)
    preferred_work_environment: WorkEnvironment | None = None

    @field_validator("name", "academic_background", "grades")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value.strip()

    @field_validator("interests", "skills", mode="before")
    @classmethod
    def _normalize_tags(cls, value: object) -> object:
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            return dedupe_tags(value)
        return value

    @model_validator(mode="after")
    def _require_interest_or_skill(self) -> "UserProfile":
        if not self.interests and not self.skills:
            msg = "at least one interest or skill is required"
            raise ValueError(msg)
        return self


class ProfileDraftRequest(CamelModel):
    """Unvalidated profile form contents posted by the dashboard.

    Every field has the form's initial value, so a partially filled form
    can be checked step by step.
    """

    name: str = Field(default="", max_length=_MAX_TEXT_LENGTH)
    stage: UserStage | None = UserStage.POST_12TH
    academic_background: str = Field(default="", max_length=_MAX_TEXT_LENGTH)
    grades: str = Field(default="", max_length=_MAX_TEXT_LENGTH)
    interests: list[str] = Field(default_factory=list, max_length=_MAX_TAGS)
    skills: list[str] = Field(default_factory=list, max_length=_MAX_TAGS)
    preferred_work_environment: WorkEnvironment | None = WorkEnvironment.HYBRID


class AuthUser(CamelModel):
    """The locally stored user identity (no backend auth)."""

    name: str
    email: str
