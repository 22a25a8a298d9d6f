"""
Normalization of raw provider output into a list of suggestions.

Providers differ in how reliably they honour "return only a JSON array", so
the text goes through a fixed chain of attempts:

1. Direct parse     - the whole text is a JSON array.
2. Embedded array   - the first ``[...]`` span (greedy, across newlines) parses.
3. Line split       - lines of at least ``min_line_length`` chars, first N kept.
4. Raw text         - the trimmed text as a single suggestion.
5. Empty fallback   - a canned message when nothing usable remains.

The chain never raises and never yields an empty list.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

FALLBACK_SUGGESTION = "Unable to generate suggestions. Please try again."

_ARRAY_PATTERN = re.compile(r"\[[\s\S]*\]")
_LINE_BREAK = re.compile(r"\r?\n")


class NormalizationPath(str, Enum):
    """Which branch of the chain produced the suggestions."""

    STRUCTURED_ARRAY = "structured_array"
    EXTRACTED_ARRAY = "extracted_array"
    LINE_SPLIT = "line_split"
    RAW_TEXT = "raw_text"
    EMPTY_FALLBACK = "empty_fallback"


@dataclass(frozen=True)
class NormalizedSuggestions:
    suggestions: list[str]
    path: NormalizationPath


def _parse_array(text: str) -> list[Any] | None:
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, list) else None


def _as_strings(items: list[Any]) -> list[str]:
    return [item if isinstance(item, str) else json.dumps(item) for item in items]


class SuggestionNormalizer:
    """Turns loosely structured completion text into suggestion strings."""

    def __init__(self, min_line_length: int = 10, max_suggestions: int = 3):
        self.min_line_length = min_line_length
        self.max_suggestions = max_suggestions

    def normalize(self, text: str | None) -> NormalizedSuggestions:
        text = text or ""

        result = self._structured(text) or self._extracted(text)
        if result is None:
            result = self._line_split(text) or self._raw(text)

        if result is None or not result.suggestions:
            return NormalizedSuggestions([FALLBACK_SUGGESTION], NormalizationPath.EMPTY_FALLBACK)
        return result

    def _structured(self, text: str) -> NormalizedSuggestions | None:
        items = _parse_array(text)
        if items is None:
            return None
        return NormalizedSuggestions(_as_strings(items), NormalizationPath.STRUCTURED_ARRAY)

    def _extracted(self, text: str) -> NormalizedSuggestions | None:
        match = _ARRAY_PATTERN.search(text)
        if match is None:
            return None
        items = _parse_array(match.group(0))
        if items is None:
            return None
        return NormalizedSuggestions(_as_strings(items), NormalizationPath.EXTRACTED_ARRAY)

    def _line_split(self, text: str) -> NormalizedSuggestions | None:
        lines = [line.strip() for line in _LINE_BREAK.split(text)]
        kept = [line for line in lines if len(line) >= self.min_line_length]
        if not kept:
            return None
        return NormalizedSuggestions(kept[: self.max_suggestions], NormalizationPath.LINE_SPLIT)

    def _raw(self, text: str) -> NormalizedSuggestions | None:
        trimmed = text.strip()
        if not trimmed:
            return None
        return NormalizedSuggestions([trimmed], NormalizationPath.RAW_TEXT)


def normalize_suggestions(text: str | None) -> list[str]:
    """Normalize with the default heuristics and return only the list."""
    return SuggestionNormalizer().normalize(text).suggestions
