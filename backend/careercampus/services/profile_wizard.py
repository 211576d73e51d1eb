"""Profile form state machine.

Three-step wizard that collects a UserProfile:

    BASICS (1) → ACADEMICS (2) → INTERESTS (3) → SUBMITTED

Forward moves only happen when the current step validates; backward moves
are allowed from steps 2 and 3. Submission re-checks every required field
and freezes the draft into a UserProfile. No I/O.

Public API:
- ProfileWizard: mutable draft plus step transitions
- missing_fields: which required fields a step is missing
- first_invalid_step: earliest step that does not validate
"""

from dataclasses import dataclass, field
from enum import IntEnum

import pydantic
import structlog
from pydantic.alias_generators import to_camel

from careercampus.core.errors import InvalidStateError
from careercampus.schemas.profile import (
    ProfileDraftRequest,
    UserProfile,
    UserStage,
    WorkEnvironment,
    dedupe_tags,
)

logger = structlog.get_logger()

# =============================================================================
# Suggested Tags
# =============================================================================

INTEREST_TAGS: tuple[str, ...] = (
    "Technology",
    "Art & Design",
    "Medicine",
    "Finance",
    "Social Impact",
    "Writing",
    "Engineering",
    "Management",
    "Teaching",
    "Sports",
    "Gaming",
    "Environment",
    "Law",
    "Entrepreneurship",
    "Data Science",
    "Psychology",
)

SKILL_TAGS: tuple[str, ...] = (
    "Communication",
    "Coding",
    "Problem Solving",
    "Leadership",
    "Mathematics",
    "Creativity",
    "Analysis",
    "Teamwork",
    "Public Speaking",
    "Research",
    "Project Management",
    "Design",
    "Sales",
    "Critical Thinking",
)


# =============================================================================
# Steps & Draft
# =============================================================================


class WizardStep(IntEnum):
    """Wizard position. Numbered steps match the form's progress bar."""

    BASICS = 1
    ACADEMICS = 2
    INTERESTS = 3
    SUBMITTED = 4


FORM_STEPS: tuple[WizardStep, ...] = (
    WizardStep.BASICS,
    WizardStep.ACADEMICS,
    WizardStep.INTERESTS,
)

# Profile-wide rule failures (no field in loc) belong to the last step.
_FIELD_STEPS: dict[str, WizardStep] = {
    "name": WizardStep.BASICS,
    "stage": WizardStep.BASICS,
    "academic_background": WizardStep.ACADEMICS,
    "grades": WizardStep.ACADEMICS,
}


@dataclass
class ProfileDraft:
    """In-progress form values. Defaults match a fresh form."""

    name: str = ""
    stage: UserStage | None = UserStage.POST_12TH
    academic_background: str = ""
    grades: str = ""
    interests: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    preferred_work_environment: WorkEnvironment | None = WorkEnvironment.HYBRID


def _blank(value: str) -> bool:
    return not value.strip()


def missing_fields(draft: ProfileDraft, step: WizardStep) -> list[str]:
    """List the required fields a step is missing.

    Whitespace-only strings count as empty, and blank tags do not count.
    Step 3 needs at least one interest or one skill, reported as
    "interests".

    Args:
        draft: Current form values.
        step: Form step to check.

    Returns:
        camelCase field names, empty when the step validates.
    """
    missing: list[str] = []
    if step is WizardStep.BASICS:
        if _blank(draft.name):
            missing.append("name")
        if draft.stage is None:
            missing.append("stage")
    elif step is WizardStep.ACADEMICS:
        if _blank(draft.academic_background):
            missing.append("academicBackground")
        if _blank(draft.grades):
            missing.append("grades")
    elif step is WizardStep.INTERESTS:
        if not dedupe_tags(draft.interests) and not dedupe_tags(draft.skills):
            missing.append("interests")
    return missing


def first_invalid_step(draft: ProfileDraft) -> tuple[WizardStep, list[str]] | None:
    """Find the earliest form step that does not validate.

    Returns:
        (step, missing field names), or None when every step validates.
    """
    for step in FORM_STEPS:
        missing = missing_fields(draft, step)
        if missing:
            return step, missing
    return None


def _invalid_step_error(exc: pydantic.ValidationError) -> InvalidStateError:
    """Map UserProfile validation errors onto the earliest affected step."""
    fields: list[str] = []
    step = WizardStep.INTERESTS
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "interests"
        step = min(step, _FIELD_STEPS.get(name, WizardStep.INTERESTS))
        if to_camel(name) not in fields:
            fields.append(to_camel(name))
    return InvalidStateError(f"Step {step.value} is invalid: {', '.join(fields)}.")


def _toggle(tags: list[str], tag: str) -> None:
    """Add the tag if absent, remove it if present."""
    if tag in tags:
        tags.remove(tag)
    else:
        tags.append(tag)


# =============================================================================
# Wizard
# =============================================================================


class ProfileWizard:
    """Mutable profile form with validated step transitions.

    Attributes:
        draft: Current form values (edit directly or via the helpers).
        step: Current position.
        profile: The frozen profile once submitted, else None.
    """

    def __init__(self, name: str = "", draft: ProfileDraft | None = None) -> None:
        """Open a wizard at Step 1.

        Args:
            name: Pre-seeded display name (e.g., the logged-in user's).
            draft: Existing form values. Overrides ``name`` when given.
        """
        self.draft = draft if draft is not None else ProfileDraft(name=name)
        self.step = WizardStep.BASICS
        self.profile: UserProfile | None = None

    @classmethod
    def from_request(cls, request: ProfileDraftRequest) -> "ProfileWizard":
        """Build a wizard whose draft holds posted form values."""
        return cls(
            draft=ProfileDraft(
                name=request.name,
                stage=request.stage,
                academic_background=request.academic_background,
                grades=request.grades,
                interests=list(request.interests),
                skills=list(request.skills),
                preferred_work_environment=request.preferred_work_environment,
            )
        )

    # -------------------------------------------------------------------------
    # Draft editing
    # -------------------------------------------------------------------------

    def toggle_interest(self, tag: str) -> None:
        """Select or deselect an interest tag."""
        self._require_editable()
        _toggle(self.draft.interests, tag)

    def toggle_skill(self, tag: str) -> None:
        """Select or deselect a skill tag."""
        self._require_editable()
        _toggle(self.draft.skills, tag)

    def add_custom_interest(self, text: str) -> None:
        """Toggle a free-text interest. Blank input is ignored."""
        cleaned = text.strip()
        if cleaned:
            self.toggle_interest(cleaned)

    def add_custom_skill(self, text: str) -> None:
        """Toggle a free-text skill. Blank input is ignored."""
        cleaned = text.strip()
        if cleaned:
            self.toggle_skill(cleaned)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def can_advance(self) -> bool:
        """Whether the current step validates."""
        return self.step in FORM_STEPS and not missing_fields(self.draft, self.step)

    def next_step(self) -> WizardStep:
        """Advance from Step 1 or 2 when the current step validates.

        Returns:
            The new step.

        Raises:
            InvalidStateError: If the step is incomplete, or the wizard is
                on Step 3 (use submit) or already submitted.
        """
        if self.step not in (WizardStep.BASICS, WizardStep.ACADEMICS):
            raise InvalidStateError(
                f"Cannot advance from step '{self.step.name}'. "
                "Use submit on the last step."
            )
        missing = missing_fields(self.draft, self.step)
        if missing:
            raise InvalidStateError(
                f"Step {self.step.value} is incomplete: {', '.join(missing)}."
            )
        self.step = WizardStep(self.step + 1)
        return self.step

    def previous_step(self) -> WizardStep:
        """Go back one step. Values entered so far are kept.

        Raises:
            InvalidStateError: On Step 1 or after submission.
        """
        if self.step not in (WizardStep.ACADEMICS, WizardStep.INTERESTS):
            raise InvalidStateError(f"Cannot go back from step '{self.step.name}'.")
        self.step = WizardStep(self.step - 1)
        return self.step

    def submit(self) -> UserProfile:
        """Freeze the draft into a UserProfile.

        Re-checks every step so a draft edited after advancing cannot slip
        through.

        Returns:
            The validated, immutable profile.

        Raises:
            InvalidStateError: If not on Step 3, any step is incomplete, or
                a value breaks a profile limit (text length, tag count).
        """
        if self.step is not WizardStep.INTERESTS:
            raise InvalidStateError(
                f"Profile can only be submitted from step 3, not '{self.step.name}'."
            )
        invalid = first_invalid_step(self.draft)
        if invalid is not None:
            step, missing = invalid
            raise InvalidStateError(
                f"Step {step.value} is incomplete: {', '.join(missing)}."
            )

        draft = self.draft
        try:
            self.profile = UserProfile(
                name=draft.name,
                stage=draft.stage,  # type: ignore[arg-type]
                academic_background=draft.academic_background,
                grades=draft.grades,
                interests=tuple(draft.interests),
                skills=tuple(draft.skills),
                preferred_work_environment=draft.preferred_work_environment,
            )
        except pydantic.ValidationError as exc:
            raise _invalid_step_error(exc) from exc
        self.step = WizardStep.SUBMITTED

        logger.info(
            "profile_submitted",
            stage=self.profile.stage.value,
            interest_count=len(self.profile.interests),
            skill_count=len(self.profile.skills),
        )
        return self.profile

    def reopen(self) -> None:
        """Return a submitted wizard to Step 3 with its values intact."""
        if self.step is not WizardStep.SUBMITTED:
            raise InvalidStateError("Profile has not been submitted.")
        self.step = WizardStep.INTERESTS
        self.profile = None

    def _require_editable(self) -> None:
        if self.step is WizardStep.SUBMITTED:
            raise InvalidStateError("Profile has already been submitted.")
