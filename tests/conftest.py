from __future__ import annotations

import pytest
from langchain_core.messages import AIMessage

from replysuggest.application.dispatcher import SuggestionDispatcher
from replysuggest.infrastructure.settings import Settings, get_settings


class StubChatModel:
    """In-memory chat model recording every call."""

    def __init__(self, reply: str | None = None, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[list] = []

    async def ainvoke(self, messages, *args, **kwargs):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply or "")


class StubFactory:
    """Chat model factory handing out one StubChatModel per provider."""

    def __init__(self, reply: str | None = None, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.models: dict[str, StubChatModel] = {}
        self.built: list[tuple[str, str]] = []

    def __call__(self, spec, api_key, settings):
        self.built.append((spec.id.value, api_key))
        model = StubChatModel(self.reply, self.error)
        self.models[spec.id.value] = model
        return model

    @property
    def total_calls(self) -> int:
        return sum(len(m.calls) for m in self.models.values())


def make_settings(**overrides) -> Settings:
    values = {
        "groq_api_key": "test-groq-key",
        "mistral_api_key": None,
        "openrouter_api_key": None,
        "openai_api_key": None,
        "anthropic_api_key": None,
        "default_provider": "groq",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def stub_factory() -> StubFactory:
    return StubFactory(reply='["One.", "Two.", "Three."]')


@pytest.fixture
def dispatcher(settings, stub_factory) -> SuggestionDispatcher:
    return SuggestionDispatcher(settings, llm_factory=stub_factory)
