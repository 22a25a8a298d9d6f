"""Registry of the provider backends the service knows about."""

from replysuggest.domain.errors import UnsupportedProviderError
from replysuggest.domain.models import ProviderId, ProviderKind, ProviderSpec

PROVIDERS: dict[ProviderId, ProviderSpec] = {
    ProviderId.GROQ: ProviderSpec(
        id=ProviderId.GROQ,
        label="Groq (Llama 3.3)",
        kind=ProviderKind.GROQ,
        credential_env="GROQ_API_KEY",
        model="llama-3.3-70b-versatile",
        max_tokens=500,
    ),
    ProviderId.MISTRAL: ProviderSpec(
        id=ProviderId.MISTRAL,
        label="Mistral AI",
        kind=ProviderKind.OPENAI_COMPATIBLE,
        credential_env="MISTRAL_API_KEY",
        model="mistral-small-latest",
        max_tokens=500,
        base_url_setting="mistral_base_url",
    ),
    ProviderId.QWEN: ProviderSpec(
        id=ProviderId.QWEN,
        label="Qwen 3 (30B)",
        kind=ProviderKind.OPENAI_COMPATIBLE,
        credential_env="OPENROUTER_API_KEY",
        model="qwen/qwen3-30b-a3b:free",
        max_tokens=800,
        base_url_setting="openrouter_base_url",
    ),
    # Placeholders: listed so the identifiers are recognised, rejected on use.
    ProviderId.OPENAI: ProviderSpec(
        id=ProviderId.OPENAI,
        label="OpenAI",
        kind=ProviderKind.UNIMPLEMENTED,
        credential_env="OPENAI_API_KEY",
    ),
    ProviderId.CLAUDE: ProviderSpec(
        id=ProviderId.CLAUDE,
        label="Claude",
        kind=ProviderKind.UNIMPLEMENTED,
        credential_env="ANTHROPIC_API_KEY",
    ),
}


def get_provider_spec(provider: ProviderId | str) -> ProviderSpec:
    """Look up an implemented provider, raising UnsupportedProviderError otherwise."""
    spec = PROVIDERS[ProviderId.parse(provider)]
    if not spec.implemented:
        raise UnsupportedProviderError(f"{spec.label} integration not yet implemented")
    return spec


def active_providers() -> list[ProviderSpec]:
    return [spec for spec in PROVIDERS.values() if spec.implemented]
