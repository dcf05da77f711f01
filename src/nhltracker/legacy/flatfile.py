"""Legacy plain-text roster format.

One player per line as ``name,team,goals,assists,plusMinus``. Fields are not
escaped, so names or teams containing commas cannot round-trip; callers that
need that should keep to the database store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from nhltracker.models import PlayerRecord
from nhltracker.persistence import PlayerStore


logger = logging.getLogger(__name__)

FIELD_COUNT = 5


@dataclass
class ImportReport:
    total_players: int = 0
    added: int = 0
    duplicates: List[str] = field(default_factory=list)


def _parse_line(line: str) -> Optional[PlayerRecord]:
    parts = line.split(",")
    if len(parts) != FIELD_COUNT:
        return None
    name, team, goals, assists, plus_minus = (part.strip() for part in parts)
    try:
        return PlayerRecord(
            name=name,
            team=team,
            goals=int(goals),
            assists=int(assists),
            plus_minus=int(plus_minus),
        )
    except ValueError:
        return None


def load_players(path: Path) -> List[PlayerRecord]:
    """Read players from ``path``; a missing or unreadable file yields an empty list."""

    if not path.exists():
        logger.info("No data file found at %s; a new one will be created on save", path)
        return []
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading %s: %s", path, exc)
        return []

    players: List[PlayerRecord] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        record = _parse_line(line)
        if record is None:
            logger.warning("Skipping malformed line %d in %s: %r", line_number, path, line)
            continue
        players.append(record)
    return players


def save_players(path: Path, players: Iterable[PlayerRecord]) -> bool:
    lines = [
        f"{p.name},{p.team},{p.goals},{p.assists},{p.plus_minus}\n"
        for p in players
    ]
    try:
        path.write_text("".join(lines), encoding="utf-8")
    except OSError as exc:
        logger.error("Error writing %s: %s", path, exc)
        return False
    return True


def import_players(store: PlayerStore, players: Iterable[PlayerRecord]) -> ImportReport:
    """Add each player to ``store``; names the store rejects are reported as duplicates."""

    report = ImportReport()
    for player in players:
        report.total_players += 1
        if store.add(player):
            report.added += 1
        else:
            report.duplicates.append(player.name)
    return report


def export_players(store: PlayerStore, path: Path) -> bool:
    return save_players(path, store.get_all())


__all__ = [
    "ImportReport",
    "export_players",
    "import_players",
    "load_players",
    "save_players",
]
