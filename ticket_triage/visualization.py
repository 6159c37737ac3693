"""Plotly figures for triage results."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
from plotly.graph_objs import Figure

from .classifier import ClassificationResult


def build_distribution_figure(df: pd.DataFrame, column: str, title: str | None = None) -> Figure | None:
    if df is None or df.empty or column not in df.columns:
        return None

    counts = df[column].dropna().astype(str).value_counts().rename("ticket_count").rename_axis(column).reset_index()
    if counts.empty:
        return None
    return px.bar(counts, x=column, y="ticket_count", title=title or f"Tickets by {column}")


def build_score_figure(result: ClassificationResult) -> Figure:
    rows = [
        {"lexicon": "category", "label": label, "score": score} for label, score in result.category_scores.items()
    ]
    rows.extend(
        {"lexicon": "priority", "label": label, "score": score} for label, score in result.priority_scores.items()
    )
    frame = pd.DataFrame(rows, columns=["lexicon", "label", "score"])
    return px.bar(frame, x="label", y="score", color="lexicon", title="Keyword Scores")
