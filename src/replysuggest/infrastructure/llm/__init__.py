"""LLM client infrastructure."""

from replysuggest.infrastructure.llm.factory import create_chat_model

__all__ = ["create_chat_model"]
