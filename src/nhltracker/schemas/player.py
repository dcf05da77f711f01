"""Pydantic input models validating raw player and stat text."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator

from nhltracker.models import PlayerRecord


_INTEGER_TEXT = re.compile(r"-?\d+")
_DIGITS_ONLY = re.compile(r"\d+")

_LABELS = {
    "name": "Player name",
    "team": "Team name",
    "goals": "Goals",
    "assists": "Assists",
    "plus_minus": "Plus/Minus",
}


def _clean_text(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{label} must be text.")
    text = value.strip()
    if not text:
        raise ValueError(f"{label} is required.")
    if _DIGITS_ONLY.fullmatch(text):
        raise ValueError(f"{label} cannot be numeric.")
    return text


def _parse_integer(value: Any, label: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _INTEGER_TEXT.fullmatch(value.strip()):
        return int(value.strip())
    raise ValueError(f"{label} must be an integer value.")


class StatsInput(BaseModel):
    """Raw team and stat input for an update."""

    team: str
    goals: int
    assists: int
    plus_minus: int

    @field_validator("team", mode="before")
    @classmethod
    def check_team(cls, value: Any) -> str:
        return _clean_text(value, _LABELS["team"])

    @field_validator("goals", "assists", "plus_minus", mode="before")
    @classmethod
    def check_integer(cls, value: Any, info: ValidationInfo) -> int:
        return _parse_integer(value, _LABELS[info.field_name])

    def apply_to(self, record: PlayerRecord) -> PlayerRecord:
        return record.with_stats(
            team=self.team,
            goals=self.goals,
            assists=self.assists,
            plus_minus=self.plus_minus,
        )


class PlayerInput(StatsInput):
    """Raw input for a new player."""

    name: str

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        return _clean_text(value, _LABELS["name"])

    def to_record(self) -> PlayerRecord:
        return PlayerRecord(
            name=self.name,
            team=self.team,
            goals=self.goals,
            assists=self.assists,
            plus_minus=self.plus_minus,
        )


def describe_errors(exc: ValidationError) -> list[str]:
    """Flatten a validation failure into user-facing messages."""

    messages: list[str] = []
    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, ValueError):
            messages.append(str(cause))
            continue
        field = ".".join(str(part) for part in error.get("loc", ()))
        label = _LABELS.get(field, field)
        messages.append(f"{label}: {error.get('msg', 'invalid value')}")
    return messages
