"""Local authentication stub.

There is no identity backend: logging in or signing up just stores
``{"name", "email"}`` under a fixed key in a key/value SessionStore.
Passwords are not checked and duplicate accounts are not detected.

Public API:
- SessionStore: load/save/clear capability for one stored value
- JsonFileSessionStore: one JSON file per key in a directory
- InMemorySessionStore: process-local store (tests, ephemeral sessions)
- AuthStub: restore/login/signup/logout over a SessionStore
"""

from pathlib import Path
from typing import Protocol

import pydantic
import structlog

from careercampus.schemas.profile import AuthUser

logger = structlog.get_logger()

AUTH_STORAGE_KEY = "careerCampus_user"
"""Key the authenticated user is stored under."""

DEFAULT_LOGIN_NAME = "Demo User"
DEFAULT_SIGNUP_NAME = "New User"


# =============================================================================
# Stores
# =============================================================================


class SessionStore(Protocol):
    """Storage for a single serialized value."""

    def load(self) -> str | None:
        """Return the stored value, or None if nothing is stored."""
        ...

    def save(self, value: str) -> None:
        """Replace the stored value."""
        ...

    def clear(self) -> None:
        """Remove the stored value. No-op when nothing is stored."""
        ...


class JsonFileSessionStore:
    """Stores the value in ``<directory>/<key>.json``."""

    def __init__(self, directory: str | Path, key: str = AUTH_STORAGE_KEY) -> None:
        self.path = Path(directory) / f"{key}.json"

    def load(self) -> str | None:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def save(self, value: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(value, encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class InMemorySessionStore:
    """Keeps the value in memory."""

    def __init__(self, value: str | None = None) -> None:
        self.value = value

    def load(self) -> str | None:
        return self.value

    def save(self, value: str) -> None:
        self.value = value

    def clear(self) -> None:
        self.value = None


# =============================================================================
# Auth stub
# =============================================================================


class AuthStub:
    """Simulated login state persisted in a SessionStore.

    Attributes:
        user: The logged-in user, or None.
    """

    def __init__(self, store: SessionStore) -> None:
        self.store = store
        self.user: AuthUser | None = None

    @property
    def is_authenticated(self) -> bool:
        """Whether a user is logged in."""
        return self.user is not None

    def restore(self) -> AuthUser | None:
        """Load the stored user.

        A stored value that cannot be decoded, or is not a valid
        ``{"name", "email"}`` object, is deleted and the user stays logged
        out.

        Returns:
            The restored user, or None.
        """
        try:
            raw = self.store.load()
            self.user = None if raw is None else AuthUser.model_validate_json(raw)
        except (UnicodeDecodeError, pydantic.ValidationError) as exc:
            logger.warning(
                "auth_session_corrupt",
                key=AUTH_STORAGE_KEY,
                error_type=type(exc).__name__,
            )
            self.store.clear()
            self.user = None
        return self.user

    def login(self, email: str, name: str | None = None) -> AuthUser:
        """Log in without credentials. Name defaults to "Demo User"."""
        return self._persist(email, name or DEFAULT_LOGIN_NAME)

    def signup(self, email: str, name: str | None = None) -> AuthUser:
        """Sign up without credentials. Name defaults to "New User"."""
        return self._persist(email, name or DEFAULT_SIGNUP_NAME)

    def logout(self) -> None:
        """Forget the user and delete the stored value."""
        self.user = None
        self.store.clear()
        logger.info("auth_logout")

    def _persist(self, email: str, name: str) -> AuthUser:
        self.user = AuthUser(name=name, email=email)
        self.store.save(self.user.model_dump_json(by_alias=True))
        logger.info("auth_login")
        return self.user
