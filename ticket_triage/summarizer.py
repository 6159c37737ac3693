"""Extractive summaries of ticket descriptions."""

from __future__ import annotations

import logging

from .constants import (
    FALLBACK_ELLIPSIS,
    FALLBACK_MAX_LENGTH,
    FALLBACK_TRUNCATE_AT,
    IMPORTANT_KEYWORDS,
    SHORT_DESCRIPTION_LENGTH,
    SUMMARY_MAX_LENGTH,
)
from .text import contains_any, ensure_terminal_punctuation, split_sentences

logger = logging.getLogger(__name__)


def truncate_description(description: object) -> str:
    text = "" if description is None else str(description)
    if len(text) > FALLBACK_MAX_LENGTH:
        return text[:FALLBACK_TRUNCATE_AT] + FALLBACK_ELLIPSIS
    return text


def _build_summary(title: str, description: str) -> str:
    sentences = split_sentences(description)
    if not sentences:
        return title

    if len(description) < SHORT_DESCRIPTION_LENGTH:
        return ensure_terminal_punctuation(sentences[0])

    summary = sentences[0]
    # Only the second and third sentences are candidates.
    for sentence in sentences[1:3]:
        if contains_any(sentence, IMPORTANT_KEYWORDS) and len(summary) + len(sentence) < SUMMARY_MAX_LENGTH:
            summary = f"{summary}. {sentence}"

    return ensure_terminal_punctuation(summary)


def summarize(title: str, description: str) -> str:
    """Build a short extractive summary of a ticket.

    The first sentence of ``description`` is always kept. For descriptions of
    100 characters or more, the second and third sentences are appended when
    they mention an important keyword and the summary stays under 200
    characters. A description with no sentences yields ``title``.

    Never raises: on any internal failure the description itself is returned,
    truncated to 147 characters plus ``"..."`` when longer than 150.
    """
    try:
        return _build_summary(title, description)
    except Exception:
        logger.warning("Summary generation failed; falling back to truncated description", exc_info=True)
        return truncate_description(description)
