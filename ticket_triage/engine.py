"""Validated entry points for analyzing a single ticket."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .classifier import (
    CATEGORY_LEXICON,
    PRIORITY_LEXICON,
    ClassificationResult,
    classify_category,
    classify_priority,
    classify_with_scores,
)
from .constants import INVALID_INPUT_MESSAGE
from .summarizer import summarize


class InvalidTicketInput(ValueError):
    """Raised when a ticket is missing its title or description."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class AnalysisResult:
    category: str
    priority: str
    summary: str


def validate_ticket_input(title: Any, description: Any) -> None:
    if not title or not description:
        raise InvalidTicketInput()


def analyze_ticket(title: str, description: str) -> AnalysisResult:
    validate_ticket_input(title, description)
    return AnalysisResult(
        category=classify_category(title, description),
        priority=classify_priority(title, description),
        summary=summarize(title, description),
    )


def summarize_ticket(title: str, description: str) -> str:
    validate_ticket_input(title, description)
    return summarize(title, description)


def classify_ticket(title: str, description: str) -> ClassificationResult:
    validate_ticket_input(title, description)
    return classify_with_scores(title, description)


def describe_lexicons() -> dict[str, list[str]]:
    return {
        "categories": CATEGORY_LEXICON.labels,
        "priorities": PRIORITY_LEXICON.labels,
    }
