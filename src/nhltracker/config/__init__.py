"""Configuration helpers for database location and logging."""

from .settings import (
    DB_PATH_ENV,
    DEFAULT_DB_PATH,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    LOG_LEVELS,
    TrackerSettings,
    load_settings,
    normalize_log_level,
)

__all__ = [
    "DB_PATH_ENV",
    "DEFAULT_DB_PATH",
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV",
    "LOG_LEVELS",
    "TrackerSettings",
    "load_settings",
    "normalize_log_level",
]
