"""Persist and load CLI settings profiles.

A profile is a JSON object with optional ``db_path`` and ``log_level``
strings. Anything else is rejected with ``ValueError`` so the CLI can report
it instead of failing later on a half-read profile.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


PROFILE_KEYS = ("db_path", "log_level")


def _optional_text(data: dict[str, Any], key: str, path: Path) -> Optional[str]:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"profile {path}: '{key}' must be a string, got {type(value).__name__}")


@dataclass
class TrackerProfile:
    db_path: Optional[str] = None
    log_level: Optional[str] = None

    @classmethod
    def load(cls, path: Path) -> "TrackerProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"profile {path} must contain a JSON object, got {type(data).__name__}")
        return cls(**{key: _optional_text(data, key, path) for key in PROFILE_KEYS})

    def save(self, path: Path) -> None:
        """Write the profile; raises ``OSError`` when ``path`` cannot be written."""

        payload = {key: getattr(self, key) for key in PROFILE_KEYS}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
