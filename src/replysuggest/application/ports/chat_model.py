from __future__ import annotations

from typing import Any, Protocol

from replysuggest.domain.models import ProviderSpec
from replysuggest.infrastructure.settings import Settings


class ChatModel(Protocol):
    async def ainvoke(self, input: Any, *args: Any, **kwargs: Any) -> Any:
        ...


class ChatModelFactory(Protocol):
    # Builds the client for one provider; must not perform network I/O
    def __call__(self, spec: ProviderSpec, api_key: str, settings: Settings) -> ChatModel:
        ...
