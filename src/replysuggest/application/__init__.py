"""Application layer - prompt building, provider dispatch and normalization."""

from replysuggest.application.dispatcher import SuggestionDispatcher, get_dispatcher
from replysuggest.application.normalizer import (
    FALLBACK_SUGGESTION,
    NormalizationPath,
    NormalizedSuggestions,
    SuggestionNormalizer,
    normalize_suggestions,
)
from replysuggest.application.prompts import SYSTEM_PROMPT, build_prompt

__all__ = [
    # Dispatch
    "SuggestionDispatcher",
    "get_dispatcher",
    # Prompts
    "SYSTEM_PROMPT",
    "build_prompt",
    # Normalization
    "FALLBACK_SUGGESTION",
    "NormalizationPath",
    "NormalizedSuggestions",
    "SuggestionNormalizer",
    "normalize_suggestions",
]
