"""Domain models, provider registry and errors."""

from replysuggest.domain.errors import (
    ConfigurationError,
    EmailValidationError,
    ProviderCallError,
    SuggestionError,
    UnsupportedProviderError,
)
from replysuggest.domain.models import (
    EmailContext,
    ProviderId,
    ProviderKind,
    ProviderSpec,
    SuggestionResult,
)
from replysuggest.domain.providers import PROVIDERS, active_providers, get_provider_spec

__all__ = [
    # Models
    "EmailContext",
    "ProviderId",
    "ProviderKind",
    "ProviderSpec",
    "SuggestionResult",
    # Registry
    "PROVIDERS",
    "active_providers",
    "get_provider_spec",
    # Errors
    "SuggestionError",
    "EmailValidationError",
    "ConfigurationError",
    "UnsupportedProviderError",
    "ProviderCallError",
]
