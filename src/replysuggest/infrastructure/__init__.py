# src/replysuggest/infrastructure/__init__.py
"""Infrastructure layer - configuration, logging and LLM clients."""

from replysuggest.infrastructure.logging_config import configure_logging
from replysuggest.infrastructure.settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
]
