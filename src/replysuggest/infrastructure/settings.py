"""Application settings using Pydantic Settings for configuration management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from replysuggest.domain.models import ProviderSpec


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Reply Suggestions"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Provider credentials (absent key disables the provider)
    default_provider: str = "groq"
    groq_api_key: SecretStr | None = None
    mistral_api_key: SecretStr | None = None
    openrouter_api_key: SecretStr | None = None
    openai_api_key: SecretStr | None = None
    anthropic_api_key: SecretStr | None = None

    # OpenAI-compatible endpoints
    mistral_base_url: str = "https://api.mistral.ai/v1"
    openrouter_base_url: str = "https://openrouter.ai/api/v1"

    # Generation
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_line_suggestions: int = Field(default=3, ge=1)
    min_suggestion_line_length: int = Field(default=10, ge=0)

    def credential_for(self, spec: ProviderSpec) -> str | None:
        """Return the plain credential for a provider, or None when unset."""
        secret: SecretStr | None = getattr(self, spec.credential_env.lower(), None)
        if secret is None:
            return None
        value = secret.get_secret_value().strip()
        return value or None

    def base_url_for(self, spec: ProviderSpec) -> str | None:
        if spec.base_url_setting is None:
            return None
        return getattr(self, spec.base_url_setting)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
