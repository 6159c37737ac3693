from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from ticket_triage.classifier import (
    CATEGORY_LEXICON,
    PRIORITY_LEXICON,
    Lexicon,
    classify,
    classify_category,
    classify_priority,
    classify_with_scores,
    score_lexicon,
)


def test_crash_alone_is_a_bug() -> None:
    assert classify_category("App", "It will crash.") == "bug"
    assert classify_priority("App", "It will crash.") == "high"


def test_no_keywords_fall_back_to_defaults() -> None:
    title, description = "Account", "My account page looks different today."

    assert score_lexicon(CATEGORY_LEXICON, title, description) == {"bug": 0, "feature": 0, "query": 0}
    assert classify_category(title, description) == "query"
    assert classify_priority(title, description) == "medium"


def test_partial_words_do_not_match() -> None:
    scores = score_lexicon(CATEGORY_LEXICON, "Debugging", "The bugged screen.")

    assert scores["bug"] == 0
    assert classify_category("Debugging", "The bugged screen.") == "query"


def test_multi_word_phrases_are_counted() -> None:
    scores = score_lexicon(CATEGORY_LEXICON, "Printer not working", "It is not working again.")
    assert scores["bug"] == 2

    priority_scores = score_lexicon(PRIORITY_LEXICON, "Data loss", "We had data loss.")
    assert priority_scores["high"] == 2


def test_matching_is_case_insensitive() -> None:
    assert classify_category("URGENT", "The app CRASHES and shows an ERROR") == "bug"
    assert classify_priority("URGENT", "The app CRASHES and shows an ERROR") == "high"


def test_ties_go_to_first_declared_label() -> None:
    assert classify_category("Error", "Add it.") == "bug"
    assert classify_category("Add", "error") == "bug"
    assert classify_category("New", "help") == "feature"
    assert classify_priority("Urgent", "minor") == "high"
    assert classify_priority("Minor", "should") == "medium"


def test_scores_sum_all_phrase_matches() -> None:
    scores = score_lexicon(CATEGORY_LEXICON, "Error", "error error and a new feature")

    assert scores == {"bug": 3, "feature": 2, "query": 0}
    assert list(scores) == CATEGORY_LEXICON.labels


def test_classify_with_scores_matches_single_lexicon_calls() -> None:
    title, description = "Minor cosmetic glitch", "The footer color is slightly wrong. Nice to have a fix eventually."
    result = classify_with_scores(title, description)

    assert result.category == classify(CATEGORY_LEXICON, title, description) == "bug"
    assert result.priority == classify(PRIORITY_LEXICON, title, description) == "low"
    assert result.category_scores == {"bug": 2, "feature": 0, "query": 0}
    assert result.priority_scores == {"high": 0, "medium": 0, "low": 4}


@pytest.mark.parametrize(
    ("title", "description"),
    [
        ("x", "y"),
        ("Question", "How do I reset my password?"),
        ("Outage", "Production is down, please fix ASAP!"),
        ("Idea", "Suggest a new export feature, eventually."),
        ("???", "!!!"),
    ],
)
def test_labels_are_always_declared(title: str, description: str) -> None:
    assert classify_category(title, description) in CATEGORY_LEXICON.labels
    assert classify_priority(title, description) in PRIORITY_LEXICON.labels


def test_repeated_calls_are_identical() -> None:
    first = classify_with_scores("Login fails", "Getting an error when I log in, urgent.")
    second = classify_with_scores("Login fails", "Getting an error when I log in, urgent.")

    assert first == second


def test_lexicons_are_read_only() -> None:
    with pytest.raises(TypeError):
        CATEGORY_LEXICON.keywords["bug"] = ("nothing",)  # type: ignore[index]
    with pytest.raises(FrozenInstanceError):
        CATEGORY_LEXICON.default = "bug"  # type: ignore[misc]


def test_lexicon_default_must_be_declared() -> None:
    with pytest.raises(ValueError):
        Lexicon(name="broken", keywords={"a": ("x",)}, default="b")


def test_lexicon_label_sets() -> None:
    assert CATEGORY_LEXICON.labels == ["bug", "feature", "query"]
    assert PRIORITY_LEXICON.labels == ["high", "medium", "low"]
    assert CATEGORY_LEXICON.default == "query"
    assert PRIORITY_LEXICON.default == "medium"
