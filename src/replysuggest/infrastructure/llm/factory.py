"""Chat model factory: one LangChain client per configured provider."""

from __future__ import annotations

from langchain_core.language_models.chat_models import BaseChatModel
from loguru import logger

from replysuggest.domain.errors import UnsupportedProviderError
from replysuggest.domain.models import ProviderKind, ProviderSpec
from replysuggest.infrastructure.settings import Settings


def create_chat_model(spec: ProviderSpec, api_key: str, settings: Settings) -> BaseChatModel:
    """Create the chat model for a provider.

    Construction does not touch the network. Client-side retries are
    disabled so a failed call surfaces immediately.
    """
    if spec.kind is ProviderKind.GROQ:
        from langchain_groq import ChatGroq

        logger.info(f"Initializing Groq LLM with model {spec.model}")
        return ChatGroq(
            api_key=api_key,
            model_name=spec.model,
            temperature=settings.temperature,
            max_tokens=spec.max_tokens,
            max_retries=0,
        )

    elif spec.kind is ProviderKind.OPENAI_COMPATIBLE:
        from langchain_openai import ChatOpenAI

        base_url = settings.base_url_for(spec)
        logger.info(f"Initializing {spec.label} at {base_url} with model {spec.model}")
        return ChatOpenAI(
            base_url=base_url,
            api_key=api_key,
            model_name=spec.model,
            temperature=settings.temperature,
            max_tokens=spec.max_tokens,
            max_retries=0,
        )

    else:
        raise UnsupportedProviderError(f"{spec.label} integration not yet implemented")
