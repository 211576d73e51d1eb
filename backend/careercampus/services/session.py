"""CareerCampus session: the top-level application state.

Ties the auth stub, the profile wizard, the recommendation request, the
dashboard, and the resume tools together for one user. Storage and the
model client are injected, so the session itself does no I/O.

State flow:

    FORM ──submit_profile──▶ LOADING ──ok──▶ DASHBOARD
                               │
                               └──fail──▶ ERROR (form kept at Step 3)
    any ──reset/logout──▶ FORM (fresh wizard, Step 1)

A result that arrives after a reset belongs to an abandoned request and is
discarded.
"""

from enum import Enum

import structlog

from careercampus.core.config import settings
from careercampus.core.errors import InvalidStateError
from careercampus.providers import factory
from careercampus.schemas.career import AtsAnalysis, RecommendationResponse
from careercampus.schemas.profile import AuthUser, UserProfile
from careercampus.schemas.resume import DEFAULT_ATS_COUNTRY
from careercampus.services.auth_store import (
    AuthStub,
    JsonFileSessionStore,
    SessionStore,
)
from careercampus.services.career_guidance import GuidanceClient
from careercampus.services.dashboard import DashboardState
from careercampus.services.guidance_errors import ServiceError
from careercampus.services.profile_wizard import ProfileWizard, WizardStep
from careercampus.services.resume_pdf import (
    render_resume_draft_pdf,
    resume_pdf_filename,
)

logger = structlog.get_logger()


class SessionView(Enum):
    """Which screen the session is showing."""

    FORM = "form"
    LOADING = "loading"
    ERROR = "error"
    DASHBOARD = "dashboard"


class CareerCampusSession:
    """State for one user of the career guidance app.

    Attributes:
        auth: Login state backed by the injected SessionStore.
        guidance: Model operations client.
        wizard: Profile form, or None once recommendations are stored.
        profile: The submitted profile, or None.
        recommendations: The model's career paths, or None.
        dashboard: Selection state over ``recommendations``, or None.
        is_loading: True while career paths are being generated.
        error: User-facing failure message from the last submission.
        resume_draft: Latest generated Markdown resume ("" if none).
        ats_result: Latest ATS analysis, or None.
        is_generating_resume: True while a resume draft is requested.
        is_checking_ats: True while an ATS analysis is requested.
    """

    def __init__(self, store: SessionStore, guidance: GuidanceClient) -> None:
        self.auth = AuthStub(store)
        self.guidance = guidance
        self.wizard: ProfileWizard | None = None
        self.profile: UserProfile | None = None
        self.recommendations: RecommendationResponse | None = None
        self.dashboard: DashboardState | None = None
        self.is_loading = False
        self.error: str | None = None
        self.resume_draft = ""
        self.ats_result: AtsAnalysis | None = None
        self.is_generating_resume = False
        self.is_checking_ats = False
        # Bumped on every reset; in-flight requests compare against it.
        self._epoch = 0

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def user(self) -> AuthUser | None:
        """The logged-in user, or None."""
        return self.auth.user

    @property
    def view(self) -> SessionView:
        """The screen implied by the current state."""
        if self.is_loading:
            return SessionView.LOADING
        if self.recommendations is not None:
            return SessionView.DASHBOARD
        if self.error is not None:
            return SessionView.ERROR
        return SessionView.FORM

    def start(self) -> None:
        """Restore the stored user and open a fresh profile form."""
        self.auth.restore()
        self._open_wizard()

    def login(self, email: str, name: str | None = None) -> AuthUser:
        """Log in (no credential check) and pre-fill an empty form name."""
        user = self.auth.login(email, name)
        self._seed_wizard_name(user)
        return user

    def signup(self, email: str, name: str | None = None) -> AuthUser:
        """Sign up (no duplicate check) and pre-fill an empty form name."""
        user = self.auth.signup(email, name)
        self._seed_wizard_name(user)
        return user

    def logout(self) -> None:
        """Forget the user and discard the profile and recommendations."""
        self.auth.logout()
        self.reset()

    def reset(self) -> None:
        """Return to the initial state with a fresh wizard at Step 1.

        Profile, recommendations and error are cleared together. Requests
        still in flight are abandoned.
        """
        self._epoch += 1
        self.profile = None
        self.recommendations = None
        self.dashboard = None
        self.error = None
        self.is_loading = False
        self.resume_draft = ""
        self.ats_result = None
        self.is_generating_resume = False
        self.is_checking_ats = False
        self._open_wizard()
        logger.info("session_reset")

    # =========================================================================
    # Recommendations
    # =========================================================================

    async def submit_profile(self) -> RecommendationResponse | None:
        """Submit the wizard and request career paths.

        Loading is always cleared when the request settles. On failure the
        operation's user-facing message is stored in ``error`` and the form
        is reopened at Step 3 with the same values, so it can be resubmitted.

        Returns:
            The recommendations, or None on failure or if a reset happened
            while the request was in flight.

        Raises:
            InvalidStateError: If a request is already loading, no form is
                open, or the form does not validate.
        """
        if self.is_loading:
            raise InvalidStateError("Career recommendations are already loading.")
        if self.wizard is None:
            raise InvalidStateError("No profile form is open.")

        wizard = self.wizard
        profile = wizard.submit()
        self.profile = profile
        self.error = None
        self.is_loading = True
        epoch = self._epoch

        try:
            result = await self.guidance.generate_career_paths(profile)
        except ServiceError as exc:
            if epoch == self._epoch:
                self.error = exc.user_message
                wizard.reopen()
            return None
        finally:
            if epoch == self._epoch:
                self.is_loading = False

        if epoch != self._epoch:
            logger.info("stale_recommendations_discarded")
            return None

        self.wizard = None
        self.recommendations = result
        self.dashboard = DashboardState(result)
        return result

    # =========================================================================
    # Resume tools
    # =========================================================================

    async def generate_resume(self) -> str | None:
        """Request a Markdown resume draft for the submitted profile.

        Failures are logged and the previous draft is kept.

        Raises:
            InvalidStateError: If no profile is submitted or a draft is
                already being generated.
        """
        profile = self._require_profile()
        if self.is_generating_resume:
            raise InvalidStateError("A resume draft is already being generated.")

        self.is_generating_resume = True
        epoch = self._epoch
        try:
            draft = await self.guidance.generate_resume_draft(profile)
        except ServiceError as exc:
            logger.warning("resume_generation_failed", error_type=exc.kind)
            return None
        finally:
            if epoch == self._epoch:
                self.is_generating_resume = False

        if epoch != self._epoch:
            return None
        self.resume_draft = draft
        return draft

    async def check_ats(
        self, resume_text: str, country: str = DEFAULT_ATS_COUNTRY
    ) -> AtsAnalysis | None:
        """Run an ATS analysis on pasted resume text.

        Blank text is ignored. The previous result is cleared when a check
        starts; on failure it stays empty and the failure is logged.

        Raises:
            InvalidStateError: If a check is already running.
        """
        if not resume_text.strip():
            return None
        if self.is_checking_ats:
            raise InvalidStateError("An ATS check is already running.")

        self.is_checking_ats = True
        self.ats_result = None
        epoch = self._epoch
        try:
            result = await self.guidance.analyze_resume_ats(resume_text, country)
        except ServiceError as exc:
            logger.warning("ats_check_failed", error_type=exc.kind)
            return None
        finally:
            if epoch == self._epoch:
                self.is_checking_ats = False

        if epoch != self._epoch:
            return None
        self.ats_result = result
        return result

    def resume_pdf(self) -> tuple[str, bytes]:
        """Render the current resume draft for download.

        Returns:
            (filename, PDF bytes).

        Raises:
            InvalidStateError: If there is no draft to render.
        """
        profile = self._require_profile()
        if not self.resume_draft:
            raise InvalidStateError("Generate a resume draft before downloading.")
        return (
            resume_pdf_filename(profile.name),
            render_resume_draft_pdf(self.resume_draft, profile.name),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _open_wizard(self) -> None:
        self.wizard = ProfileWizard(name=self.user.name if self.user else "")

    def _seed_wizard_name(self, user: AuthUser) -> None:
        if (
            self.wizard is not None
            and self.wizard.step is WizardStep.BASICS
            and not self.wizard.draft.name.strip()
        ):
            self.wizard.draft.name = user.name

    def _require_profile(self) -> UserProfile:
        if self.profile is None:
            raise InvalidStateError("Submit a profile first.")
        return self.profile


def create_session(store: SessionStore | None = None) -> CareerCampusSession:
    """Build a started session wired to the configured provider.

    Args:
        store: Storage for the auth stub. Defaults to a JSON file under
            ``settings.session_dir``.

    Returns:
        A session with the stored user restored and a form open.
    """
    session = CareerCampusSession(
        store=store or JsonFileSessionStore(settings.session_dir),
        guidance=GuidanceClient(factory.get_llm_provider()),
    )
    session.start()
    return session
