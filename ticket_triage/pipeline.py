"""Batch triage of ticket dumps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import pandas as pd

from .classifier import CATEGORY_LEXICON, PRIORITY_LEXICON
from .engine import InvalidTicketInput, analyze_ticket
from .preprocessing import prepare_tickets

logger = logging.getLogger(__name__)

TRIAGE_COLUMNS = ["category_derived", "priority_derived", "summary_derived", "is_valid"]


def _triage_one(title: str | None, description: str | None) -> tuple[Any, ...]:
    try:
        result = analyze_ticket(title, description)
    except InvalidTicketInput:
        return None, None, None, False
    return result.category, result.priority, result.summary, True


def triage_tickets(raw_df: pd.DataFrame, user_mapping: dict[str, str] | None = None) -> pd.DataFrame:
    prepared = prepare_tickets(raw_df, user_mapping=user_mapping)
    rows = [_triage_one(title, description) for title, description in zip(prepared["title"], prepared["description"])]

    enriched = prepared.copy()
    for position, column in enumerate(TRIAGE_COLUMNS):
        values = [row[position] for row in rows]
        dtype = bool if column == "is_valid" else object
        enriched[column] = pd.Series(values, index=enriched.index, dtype=dtype)

    invalid = int((~enriched["is_valid"]).sum())
    if invalid:
        logger.info("Skipped %d of %d tickets missing a title or description", invalid, len(enriched))
    logger.debug("Triaged %d tickets", len(enriched))
    return enriched


def _label_counts(series: pd.Series, labels: list[str]) -> dict[str, int]:
    counts = series.dropna().value_counts()
    return {label: int(counts.get(label, 0)) for label in labels}


def build_triage_report(df: pd.DataFrame) -> dict[str, Any]:
    valid = df[df["is_valid"]] if "is_valid" in df else df.iloc[0:0]
    return {
        "total_tickets": int(len(df)),
        "invalid_tickets": int(len(df) - len(valid)),
        "categories": _label_counts(valid.get("category_derived", pd.Series(dtype=object)), CATEGORY_LEXICON.labels),
        "priorities": _label_counts(valid.get("priority_derived", pd.Series(dtype=object)), PRIORITY_LEXICON.labels),
    }


@dataclass
class TicketTriageSession:
    triaged_df: pd.DataFrame

    @classmethod
    def from_dataframe(
        cls,
        raw_df: pd.DataFrame,
        user_mapping: dict[str, str] | None = None,
    ) -> "TicketTriageSession":
        return cls(triage_tickets(raw_df, user_mapping=user_mapping))

    @classmethod
    def from_file(
        cls,
        path: str,
        user_mapping: dict[str, str] | None = None,
    ) -> "TicketTriageSession":
        file_lower = path.lower()
        if file_lower.endswith(".csv"):
            raw_df = pd.read_csv(path)
        else:
            raw_df = pd.read_excel(path)
        return cls.from_dataframe(raw_df, user_mapping=user_mapping)

    def report(self) -> dict[str, Any]:
        return build_triage_report(self.triaged_df)
