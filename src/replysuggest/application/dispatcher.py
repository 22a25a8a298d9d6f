"""Provider dispatch: route an email context to one LLM backend and normalize the reply."""

from __future__ import annotations

from functools import lru_cache

from langchain_core.messages import HumanMessage, SystemMessage
from loguru import logger

from replysuggest.application.normalizer import NormalizationPath, SuggestionNormalizer
from replysuggest.application.ports.chat_model import ChatModel, ChatModelFactory
from replysuggest.application.prompts import SYSTEM_PROMPT, build_prompt
from replysuggest.domain.errors import (
    ConfigurationError,
    ProviderCallError,
    UnsupportedProviderError,
)
from replysuggest.domain.models import EmailContext, ProviderId, SuggestionResult
from replysuggest.domain.providers import active_providers, get_provider_spec
from replysuggest.infrastructure.llm.factory import create_chat_model
from replysuggest.infrastructure.settings import Settings, get_settings


def _message_text(message) -> str:
    """Extract plain text from a chat model response."""
    content = getattr(message, "content", message)
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    # Content blocks: keep the text parts in order
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class SuggestionDispatcher:
    """
    Generates reply suggestions through one of the configured providers.

    Clients are created once, at construction, for every active provider
    whose credential is present. After that the dispatcher holds no mutable
    state, so concurrent requests need no coordination.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        llm_factory: ChatModelFactory = create_chat_model,
    ):
        self.settings = settings or get_settings()
        self.normalizer = SuggestionNormalizer(
            min_line_length=self.settings.min_suggestion_line_length,
            max_suggestions=self.settings.max_line_suggestions,
        )
        self._clients: dict[ProviderId, ChatModel] = {}

        for spec in active_providers():
            api_key = self.settings.credential_for(spec)
            if api_key is None:
                logger.debug(f"{spec.credential_env} not set, {spec.label} disabled")
                continue
            self._clients[spec.id] = llm_factory(spec, api_key, self.settings)

    def available_providers(self) -> list[ProviderId]:
        return list(self._clients)

    def is_available(self, provider: ProviderId | str) -> bool:
        try:
            return ProviderId.parse(provider) in self._clients
        except UnsupportedProviderError:
            return False

    async def generate(
        self,
        context: EmailContext,
        provider: ProviderId | str = ProviderId.GROQ,
    ) -> SuggestionResult:
        """
        Generate reply suggestions for an email context.

        Raises:
            UnsupportedProviderError: unknown or placeholder provider.
            ConfigurationError: the provider's credential is not set.
            ProviderCallError: the completion call failed.
        """
        spec = get_provider_spec(provider)
        client = self._clients.get(spec.id)
        if client is None:
            raise ConfigurationError(
                f"{spec.label} API key not configured. Add {spec.credential_env} to .env"
            )

        prompt = build_prompt(context)
        messages = [SystemMessage(content=SYSTEM_PROMPT), HumanMessage(content=prompt)]

        logger.info(f"Requesting suggestions from {spec.label} ({spec.model})")
        try:
            response = await client.ainvoke(messages)
        except Exception as e:
            logger.error(f"{spec.label} call failed: {e}")
            raise ProviderCallError(spec.label, str(e)) from e

        normalized = self.normalizer.normalize(_message_text(response))
        if normalized.path is NormalizationPath.STRUCTURED_ARRAY:
            logger.debug(f"{spec.label} returned a clean JSON array")
        else:
            logger.warning(f"{spec.label} response normalized via {normalized.path.value}")

        return SuggestionResult(suggestions=normalized.suggestions, provider=spec.label)


@lru_cache
def get_dispatcher() -> SuggestionDispatcher:
    """Get the process-wide dispatcher built from cached settings."""
    return SuggestionDispatcher(get_settings())
