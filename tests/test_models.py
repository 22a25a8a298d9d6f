import pytest
from pydantic import ValidationError

from replysuggest.domain import (
    PROVIDERS,
    EmailContext,
    EmailValidationError,
    ProviderId,
    UnsupportedProviderError,
    active_providers,
    get_provider_spec,
)

from .conftest import make_settings


def test_context_requires_subject_or_body():
    with pytest.raises(EmailValidationError):
        EmailContext(subject="", body=None).ensure_content()

    assert EmailContext(body="Hello").ensure_content().body == "Hello"


def test_context_is_immutable():
    context = EmailContext(subject="Hi")

    with pytest.raises(ValidationError):
        context.subject = "Changed"


def test_provider_parse():
    assert ProviderId.parse("qwen") is ProviderId.QWEN
    assert ProviderId.parse(ProviderId.MISTRAL) is ProviderId.MISTRAL
    with pytest.raises(UnsupportedProviderError, match="Unsupported provider: bard"):
        ProviderId.parse("bard")


def test_registry_covers_every_identifier():
    assert set(PROVIDERS) == set(ProviderId)
    assert [spec.id for spec in active_providers()] == [ProviderId.GROQ, ProviderId.MISTRAL, ProviderId.QWEN]


def test_placeholder_lookup_rejected():
    with pytest.raises(UnsupportedProviderError):
        get_provider_spec("openai")


def test_label_independent_of_model():
    spec = get_provider_spec("groq")

    assert spec.label == "Groq (Llama 3.3)"
    assert spec.model == "llama-3.3-70b-versatile"


def test_settings_credential_lookup():
    settings = make_settings(openrouter_api_key="or-key")

    assert settings.credential_for(PROVIDERS[ProviderId.GROQ]) == "test-groq-key"
    assert settings.credential_for(PROVIDERS[ProviderId.QWEN]) == "or-key"
    assert settings.credential_for(PROVIDERS[ProviderId.MISTRAL]) is None
    assert settings.base_url_for(PROVIDERS[ProviderId.QWEN]) == "https://openrouter.ai/api/v1"
    assert settings.base_url_for(PROVIDERS[ProviderId.GROQ]) is None


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("MISTRAL_API_KEY", "from-env")
    monkeypatch.setenv("MIN_SUGGESTION_LINE_LENGTH", "5")

    from replysuggest.infrastructure.settings import Settings

    settings = Settings(_env_file=None)

    assert settings.credential_for(PROVIDERS[ProviderId.MISTRAL]) == "from-env"
    assert settings.min_suggestion_line_length == 5
