"""Keyword tables, column aliases and thresholds for ticket triage."""

from __future__ import annotations

from typing import Dict, List, Tuple

CATEGORY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "bug": (
        "error",
        "bug",
        "crash",
        "broken",
        "not working",
        "issue",
        "problem",
        "fail",
        "exception",
        "null",
        "undefined",
        "timeout",
        "freeze",
        "incorrect",
        "wrong",
        "malfunction",
        "glitch",
        "defect",
    ),
    "feature": (
        "feature",
        "enhancement",
        "improvement",
        "add",
        "new",
        "request",
        "suggest",
        "proposal",
        "implement",
        "develop",
        "create",
        "build",
        "upgrade",
        "extend",
        "modify",
        "change",
        "update",
    ),
    "query": (
        "how",
        "what",
        "where",
        "when",
        "why",
        "question",
        "help",
        "support",
        "documentation",
        "guide",
        "tutorial",
        "explain",
        "clarify",
        "understand",
        "confused",
        "unclear",
        "info",
    ),
}

PRIORITY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "high": (
        "urgent",
        "critical",
        "emergency",
        "asap",
        "immediately",
        "blocker",
        "production",
        "down",
        "outage",
        "security",
        "data loss",
        "crash",
    ),
    "medium": ("important", "soon", "needed", "required", "should", "moderate"),
    "low": (
        "minor",
        "nice to have",
        "eventually",
        "low priority",
        "cosmetic",
        "suggestion",
        "enhancement",
        "improvement",
    ),
}

DEFAULT_CATEGORY = "query"
DEFAULT_PRIORITY = "medium"

IMPORTANT_KEYWORDS: Tuple[str, ...] = (
    "error",
    "problem",
    "issue",
    "need",
    "want",
    "request",
    "feature",
    "bug",
    "crash",
    "not working",
    "help",
    "support",
)

# Summarizer thresholds, in characters.
SHORT_DESCRIPTION_LENGTH = 100
SUMMARY_MAX_LENGTH = 200
FALLBACK_MAX_LENGTH = 150
FALLBACK_TRUNCATE_AT = 147
FALLBACK_ELLIPSIS = "..."

SENTENCE_TERMINATORS = (".", "!", "?")

INVALID_INPUT_MESSAGE = "Title and description are required"

COLUMN_ALIASES: Dict[str, List[str]] = {
    "ticket_id": ["ticket_id", "incident_id", "number", "id", "ticket_number", "incident_number"],
    "title": ["title", "subject", "short_description", "summary", "headline", "issue_title"],
    "description": ["description", "details", "body", "long_description", "issue_description", "comments"],
}
