"""Application configuration loaded from environment variables.

Settings for the HTTP API, the Gemini model, rate limiting, and the local
session store. Uses pydantic-settings for validation and .env file support.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API
    # 0.0.0.0 binds to all network interfaces (required for Docker containers)
    api_host: str = "0.0.0.0"  # nosec B104
    api_port: int = 8000

    # CORS (Security)
    # Default allows localhost:3000 for the dashboard dev server
    # CRITICAL: Never set to ["*"] when allow_credentials=True
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Generative model
    google_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 8192

    # ATS analysis only sends the head of the resume text
    ats_resume_max_chars: int = 5000

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    # Local session store (auth stub)
    session_dir: str = ".careercampus"

    # Rate Limiting (Security)
    # Limits model-calling endpoints to prevent abuse and cost explosion
    # Format: "count/period" (e.g., "10/minute", "100/hour")
    rate_limit_llm: str = "10/minute"
    rate_limit_enabled: bool = True  # Disable for testing

    @model_validator(mode="after")
    def check_production_security(self) -> "Settings":
        """Validate security and sanity requirements.

        Checks:
        - CORS must not use wildcard origin (incompatible with credentials)
        - Model temperature must be within the range Gemini accepts
        - ATS truncation limit must be positive
        - Log level must be a standard level name
        - Production deployments must configure the Google API key
        """
        if "*" in self.allowed_origins:
            msg = (
                "ALLOWED_ORIGINS must not contain '*' (wildcard). "
                "This application uses credentials which are "
                "incompatible with wildcard CORS origins."
            )
            raise ValueError(msg)

        if not 0.0 <= self.llm_temperature <= 2.0:
            msg = f"LLM_TEMPERATURE must be between 0 and 2. Got: {self.llm_temperature}"
            raise ValueError(msg)

        if self.ats_resume_max_chars <= 0:
            msg = (
                "ATS_RESUME_MAX_CHARS must be positive. "
                f"Got: {self.ats_resume_max_chars}"
            )
            raise ValueError(msg)

        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            msg = (
                f"LOG_LEVEL must be one of: {', '.join(sorted(_VALID_LOG_LEVELS))}. "
                f"Got: {self.log_level}"
            )
            raise ValueError(msg)

        if self.environment == "production" and not self.google_api_key:
            msg = (
                "GOOGLE_API_KEY must be set in production. "
                "Career recommendations cannot be generated without it."
            )
            raise ValueError(msg)

        return self


settings = Settings()
