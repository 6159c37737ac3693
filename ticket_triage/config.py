"""Runtime settings and logging setup, read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    include_confidence: bool = True
    preview_limit: int = 500

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("TRIAGE_LOG_LEVEL", "INFO").upper(),
            cors_origins=_env_list("TRIAGE_CORS_ORIGINS", "*"),
            include_confidence=_env_bool("TRIAGE_INCLUDE_CONFIDENCE", True),
            preview_limit=_env_int("TRIAGE_PREVIEW_LIMIT", 500),
        )


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if not any(getattr(handler, "_ticket_triage", False) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        handler._ticket_triage = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level)
