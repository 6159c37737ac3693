"""Text normalization helpers shared by the classifier and summarizer."""

from __future__ import annotations

import re
from functools import lru_cache

from .constants import SENTENCE_TERMINATORS

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def combine_text(title: str, description: str) -> str:
    """Return the lowercased comparison form of a ticket's title and description."""
    return f"{title} {description}".lower()


@lru_cache(maxsize=None)
def keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(keyword.lower())}\b")


def count_keyword(text: str, keyword: str) -> int:
    """Count whole-word, non-overlapping occurrences of ``keyword`` in ``text``.

    ``text`` is expected in comparison form (see :func:`combine_text`).
    """
    return len(keyword_pattern(keyword).findall(text))


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def split_sentences(text: str) -> list[str]:
    fragments = _SENTENCE_SPLIT.split(text)
    return [fragment.strip() for fragment in fragments if fragment.strip()]


def ensure_terminal_punctuation(text: str) -> str:
    if text.endswith(SENTENCE_TERMINATORS):
        return text
    return f"{text}."


def count_words(text: str) -> int:
    # Counts whitespace-separated fields, including empty edge fields.
    return len(re.split(r"\s+", text))
