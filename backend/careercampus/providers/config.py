"""Provider configuration management."""

from dataclasses import dataclass

from careercampus.core.config import Settings, settings


@dataclass
class ProviderConfig:
    """Centralized provider configuration.

    Attributes:
        llm_provider: Which LLM provider to use ("gemini", "mock").
        google_api_key: Google AI API key. Empty means unconfigured.
        gemini_model: Model used when a task has no routing override.
        gemini_model_routing: Override model routing per task value.
        default_max_tokens: Default max output tokens.
        default_temperature: Default sampling temperature.
    """

    llm_provider: str = "gemini"
    google_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_model_routing: dict[str, str] | None = None
    default_max_tokens: int = 8192
    default_temperature: float = 0.7

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "ProviderConfig":
        """Build configuration from application settings.

        Args:
            source: Settings to read. Defaults to the module-level settings,
                which are loaded from the environment and .env.

        Returns:
            ProviderConfig instance.
        """
        source = source or settings
        return cls(
            llm_provider="gemini",
            google_api_key=source.google_api_key or None,
            gemini_model=source.gemini_model,
            default_max_tokens=source.llm_max_tokens,
            default_temperature=source.llm_temperature,
        )
