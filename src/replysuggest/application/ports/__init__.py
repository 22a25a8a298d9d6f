"""Interfaces the application layer depends on."""

from replysuggest.application.ports.chat_model import ChatModel, ChatModelFactory

__all__ = ["ChatModel", "ChatModelFactory"]
