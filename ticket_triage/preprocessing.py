"""Column normalization for ticket dumps fed to batch triage."""

from __future__ import annotations

import re

import pandas as pd

from .constants import COLUMN_ALIASES


def normalize_column_name(column: str) -> str:
    cleaned = re.sub(r"[^0-9a-zA-Z]+", "_", str(column).strip().lower())
    cleaned = re.sub(r"_+", "_", cleaned).strip("_")
    return cleaned


def _guess_canonical_column(column: str) -> str | None:
    tokens = set(column.split("_"))

    if "id" in tokens and {"ticket", "incident", "case", "request"} & tokens:
        return "ticket_id"
    if {"title", "subject", "headline"} & tokens:
        return "title"
    if {"description", "details", "body"} & tokens:
        return "description"
    return None


def _canonical_alias_map() -> dict[str, str]:
    mapping: dict[str, str] = {}
    for canonical, aliases in COLUMN_ALIASES.items():
        for alias in aliases:
            mapping[normalize_column_name(alias)] = canonical
    return mapping


def _drop_duplicate_columns(df: pd.DataFrame) -> pd.DataFrame:
    # Headers that normalize to the same name keep the first occurrence.
    return df.loc[:, ~df.columns.duplicated()].copy()


def normalize_and_alias_columns(df: pd.DataFrame, user_mapping: dict[str, str] | None = None) -> pd.DataFrame:
    result = df.copy()
    result.columns = [normalize_column_name(col) for col in result.columns]
    result = _drop_duplicate_columns(result)

    # User mapping takes priority over aliases.
    if user_mapping:
        normalized_mapping = {
            normalize_column_name(source): normalize_column_name(target) for source, target in user_mapping.items()
        }
        rename_by_user = {col: normalized_mapping[col] for col in result.columns if col in normalized_mapping}
        if rename_by_user:
            targets = set(rename_by_user.values())
            clashing = [col for col in result.columns if col in targets and col not in rename_by_user]
            result = result.drop(columns=clashing).rename(columns=rename_by_user)
            result = _drop_duplicate_columns(result)

    alias_to_canonical = _canonical_alias_map()
    renamed: dict[str, str] = {}
    existing = set(result.columns)
    for col in result.columns:
        canonical = alias_to_canonical.get(col)
        if canonical is None:
            canonical = _guess_canonical_column(col)
        if canonical is None or canonical == col:
            continue
        if canonical in existing or canonical in renamed.values():
            continue
        renamed[col] = canonical

    if renamed:
        result = result.rename(columns=renamed)

    return result


def _clean_text(value: object) -> str | None:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    text = str(value)
    return text if text else None


def prepare_tickets(raw_df: pd.DataFrame, user_mapping: dict[str, str] | None = None) -> pd.DataFrame:
    df = normalize_and_alias_columns(raw_df, user_mapping=user_mapping)

    for column in ["ticket_id", "title", "description"]:
        if column not in df:
            df[column] = None

    fallback_ids = pd.Series([f"TKT-{i + 1:06d}" for i in range(len(df))], index=df.index)
    df["ticket_id"] = df["ticket_id"].where(df["ticket_id"].notna(), fallback_ids).astype(str)

    for column in ["title", "description"]:
        df[column] = pd.Series([_clean_text(value) for value in df[column]], index=df.index, dtype=object)
    return df
