"""Runtime settings resolved from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

DB_PATH_ENV = "NHLTRACKER_DB_PATH"
LOG_LEVEL_ENV = "NHLTRACKER_LOG_LEVEL"

DEFAULT_DB_PATH = "nhltracker.db"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TrackerSettings:
    db_path: Path | str
    log_level: str


def normalize_log_level(raw: str | None, default: str = DEFAULT_LOG_LEVEL) -> str:
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Invalid log level %s; using default %s", raw, default)
        return default
    return level


def _env_db_path(name: str, default: str) -> Path | str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return Path(default)
    raw = raw.strip()
    if raw == ":memory:":
        return raw
    return Path(raw).expanduser()


def load_settings() -> TrackerSettings:
    return TrackerSettings(
        db_path=_env_db_path(DB_PATH_ENV, DEFAULT_DB_PATH),
        log_level=normalize_log_level(os.getenv(LOG_LEVEL_ENV)),
    )
