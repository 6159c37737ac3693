from __future__ import annotations

from ticket_triage.text import (
    combine_text,
    contains_any,
    count_keyword,
    count_words,
    ensure_terminal_punctuation,
    split_sentences,
)


def test_combine_text_lowercases_with_single_space() -> None:
    assert combine_text("Login FAILS", "Since Monday") == "login fails since monday"


def test_count_keyword_respects_word_boundaries() -> None:
    assert count_keyword("bug report: another bug", "bug") == 2
    assert count_keyword("the app is bugged", "bug") == 0
    assert count_keyword("enable debug logging", "bug") == 0
    assert count_keyword("printer not working, still not working", "not working") == 2
    assert count_keyword("it is notworking", "not working") == 0


def test_count_keyword_is_non_overlapping() -> None:
    assert count_keyword("error error error", "error") == 3


def test_contains_any_matches_substrings_case_insensitively() -> None:
    assert contains_any("Getting ERRORS on login", ("error",))
    assert contains_any("Still Not Working", ("not working",))
    assert not contains_any("All good now", ("error", "bug"))


def test_split_sentences_handles_repeated_terminators() -> None:
    assert split_sentences("Hi!! There?? ok...") == ["Hi", "There", "ok"]
    assert split_sentences("  One. Two  ") == ["One", "Two"]
    assert split_sentences("...!!!") == []
    assert split_sentences("   ") == []


def test_ensure_terminal_punctuation() -> None:
    assert ensure_terminal_punctuation("Done") == "Done."
    assert ensure_terminal_punctuation("Done.") == "Done."
    assert ensure_terminal_punctuation("Really?") == "Really?"
    assert ensure_terminal_punctuation("Now!") == "Now!"


def test_count_words_splits_on_whitespace_runs() -> None:
    assert count_words("one  two\tthree") == 3
    assert count_words(" leading space") == 3
