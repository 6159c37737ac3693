"""Lexicon-scored classification of tickets into category and priority labels."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .constants import CATEGORY_KEYWORDS, DEFAULT_CATEGORY, DEFAULT_PRIORITY, PRIORITY_KEYWORDS
from .text import combine_text, count_keyword


@dataclass(frozen=True)
class Lexicon:
    """Ordered, read-only mapping of labels to keyword phrases.

    Label order matters: it decides ties between equal scores.
    """

    name: str
    keywords: Mapping[str, tuple[str, ...]]
    default: str

    def __post_init__(self) -> None:
        if self.default not in self.keywords:
            raise ValueError(f"Default label '{self.default}' is not declared in lexicon '{self.name}'")
        frozen = MappingProxyType({label: tuple(phrases) for label, phrases in self.keywords.items()})
        object.__setattr__(self, "keywords", frozen)

    @property
    def labels(self) -> list[str]:
        return list(self.keywords)


@dataclass
class ClassificationResult:
    category: str
    priority: str
    category_scores: dict[str, int] = field(default_factory=dict)
    priority_scores: dict[str, int] = field(default_factory=dict)


CATEGORY_LEXICON = Lexicon(name="category", keywords=CATEGORY_KEYWORDS, default=DEFAULT_CATEGORY)
PRIORITY_LEXICON = Lexicon(name="priority", keywords=PRIORITY_KEYWORDS, default=DEFAULT_PRIORITY)


def _score_text(lexicon: Lexicon, text: str) -> dict[str, int]:
    scores: dict[str, int] = {}
    for label, phrases in lexicon.keywords.items():
        scores[label] = sum(count_keyword(text, phrase) for phrase in phrases)
    return scores


def _pick_label(lexicon: Lexicon, scores: dict[str, int]) -> str:
    # max() keeps the first of equal maxima, i.e. the first-declared label.
    best = max(lexicon.labels, key=lambda label: scores[label])
    if scores[best] == 0:
        return lexicon.default
    return best


def score_lexicon(lexicon: Lexicon, title: str, description: str) -> dict[str, int]:
    return _score_text(lexicon, combine_text(title, description))


def classify(lexicon: Lexicon, title: str, description: str) -> str:
    """Return the best-scoring label of ``lexicon`` for a ticket.

    Scores are sums of whole-phrase keyword matches over the lowercased
    ``"{title} {description}"``. Ties go to the label declared first; when
    nothing matches the lexicon's default label is returned.
    """
    return _pick_label(lexicon, score_lexicon(lexicon, title, description))


def classify_category(title: str, description: str) -> str:
    return classify(CATEGORY_LEXICON, title, description)


def classify_priority(title: str, description: str) -> str:
    return classify(PRIORITY_LEXICON, title, description)


def classify_with_scores(title: str, description: str) -> ClassificationResult:
    text = combine_text(title, description)
    category_scores = _score_text(CATEGORY_LEXICON, text)
    priority_scores = _score_text(PRIORITY_LEXICON, text)
    return ClassificationResult(
        category=_pick_label(CATEGORY_LEXICON, category_scores),
        priority=_pick_label(PRIORITY_LEXICON, priority_scores),
        category_scores=category_scores,
        priority_scores=priority_scores,
    )
