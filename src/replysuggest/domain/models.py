"""Domain models for reply suggestions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from replysuggest.domain.errors import EmailValidationError, UnsupportedProviderError


class ProviderId(str, Enum):
    """Known LLM providers, active and placeholder."""

    GROQ = "groq"
    MISTRAL = "mistral"
    QWEN = "qwen"
    OPENAI = "openai"
    CLAUDE = "claude"

    @classmethod
    def parse(cls, value: ProviderId | str) -> ProviderId:
        """Resolve a raw identifier, rejecting anything outside the known set."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedProviderError(f"Unsupported provider: {value}") from None


class ProviderKind(str, Enum):
    """How a provider is reached."""

    GROQ = "groq"
    OPENAI_COMPATIBLE = "openai_compatible"
    UNIMPLEMENTED = "unimplemented"


@dataclass(frozen=True)
class ProviderSpec:
    """Static description of one provider backend."""

    id: ProviderId
    label: str
    kind: ProviderKind
    credential_env: str
    model: str | None = None
    max_tokens: int | None = None
    base_url_setting: str | None = None  # Settings attribute holding the endpoint

    @property
    def implemented(self) -> bool:
        return self.kind is not ProviderKind.UNIMPLEMENTED


class EmailContext(BaseModel):
    """The draft being replied to. Empty strings count as absent."""

    model_config = ConfigDict(frozen=True)

    subject: str | None = None
    body: str | None = None
    thread_history: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def has_content(self) -> bool:
        return bool(self.subject) or bool(self.body)

    def ensure_content(self) -> EmailContext:
        """Raise EmailValidationError unless a subject or body is present."""
        if not self.has_content:
            raise EmailValidationError("Either subject or email body is required")
        return self


class SuggestionResult(BaseModel):
    """Suggestions for one request, tagged with the provider's display label."""

    suggestions: list[str]
    provider: str
