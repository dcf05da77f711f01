"""Canonical player record shared across the store and query layers."""

from __future__ import annotations

from pydantic import BaseModel, computed_field
from pydantic.config import ConfigDict


class PlayerRecord(BaseModel):
    """One player's stat line.

    ``points`` is derived from goals and assists on every read and is never
    persisted. Matching between records is by case-insensitive name; plain
    equality compares every field.
    """

    name: str
    team: str
    goals: int
    assists: int
    plus_minus: int

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def points(self) -> int:
        return self.goals + self.assists

    @property
    def name_key(self) -> str:
        return normalize_name(self.name)

    def matches_name(self, name: str) -> bool:
        return self.name_key == normalize_name(name)

    def with_stats(self, *, team: str, goals: int, assists: int, plus_minus: int) -> "PlayerRecord":
        """Return a copy carrying new stats under the same name."""

        return PlayerRecord(
            name=self.name,
            team=team,
            goals=goals,
            assists=assists,
            plus_minus=plus_minus,
        )


def normalize_name(name: str) -> str:
    return name.lower()
