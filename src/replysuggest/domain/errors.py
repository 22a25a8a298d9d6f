"""Error taxonomy for suggestion generation."""


class SuggestionError(Exception):
    """Base class for all reply-suggestion failures."""


class EmailValidationError(SuggestionError):
    """Neither a subject nor a body was supplied."""


class ConfigurationError(SuggestionError):
    """The selected provider has no credential configured."""


class UnsupportedProviderError(SuggestionError):
    """The provider identifier is unknown or its integration is stubbed."""


class ProviderCallError(SuggestionError):
    """The outbound completion call failed."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider} request failed: {message}")
        self.provider = provider
