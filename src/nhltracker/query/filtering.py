"""Read-only filters, lookups and sorts over the stored roster."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional, Protocol, Sequence

from nhltracker.models import PlayerRecord


SortField = Literal["goals", "assists", "points"]
SortDirection = Literal["asc", "desc"]

SORT_FIELDS: tuple[str, ...] = ("goals", "assists", "points")
SORT_DIRECTIONS: tuple[str, ...] = ("asc", "desc")


class PlayerSource(Protocol):
    """Anything that can hand back the full roster and look up by name."""

    def get_all(self) -> list[PlayerRecord]: ...

    def find_by_name(self, name: str) -> Optional[PlayerRecord]: ...


@dataclass(frozen=True)
class FilterCriteria:
    """Combined filter and ordering applied to a roster."""

    min_goals: int | None = None
    min_assists: int | None = None
    min_points: int | None = None
    team: str | None = None
    sort_by: SortField | None = None
    sort_direction: SortDirection = "desc"


def _keep(players: Sequence[PlayerRecord], predicate: Callable[[PlayerRecord], bool]) -> list[PlayerRecord]:
    return [player for player in players if predicate(player)]


def filter_by_min_goals(source: PlayerSource, minimum: int) -> list[PlayerRecord]:
    return _keep(source.get_all(), lambda p: p.goals >= minimum)


def filter_by_min_assists(source: PlayerSource, minimum: int) -> list[PlayerRecord]:
    return _keep(source.get_all(), lambda p: p.assists >= minimum)


def filter_by_min_points(source: PlayerSource, minimum: int) -> list[PlayerRecord]:
    return _keep(source.get_all(), lambda p: p.points >= minimum)


def filter_by_team(source: PlayerSource, team: str) -> list[PlayerRecord]:
    wanted = team.lower()
    return _keep(source.get_all(), lambda p: p.team.lower() == wanted)


def search_by_name(source: PlayerSource, name: str) -> list[PlayerRecord]:
    """Exact, case-insensitive lookup returning zero or one player."""

    found = source.find_by_name(name)
    return [found] if found is not None else []


def _sort_key(field: str) -> Callable[[PlayerRecord], int]:
    if field == "goals":
        return lambda p: p.goals
    if field == "assists":
        return lambda p: p.assists
    if field == "points":
        return lambda p: p.points
    raise ValueError(f"Unsupported sort field '{field}', expected one of {', '.join(SORT_FIELDS)}")


def sort_players(
    players: Sequence[PlayerRecord],
    field: SortField,
    direction: SortDirection = "desc",
) -> list[PlayerRecord]:
    """Stable sort; ties keep their incoming relative order in either direction."""

    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unsupported sort direction '{direction}', expected asc or desc")
    return sorted(players, key=_sort_key(field), reverse=direction == "desc")


def sort_by(
    source: PlayerSource,
    field: SortField,
    direction: SortDirection = "desc",
) -> list[PlayerRecord]:
    return sort_players(source.get_all(), field, direction)


def _passes_criteria(player: PlayerRecord, criteria: FilterCriteria) -> bool:
    if criteria.min_goals is not None and player.goals < criteria.min_goals:
        return False
    if criteria.min_assists is not None and player.assists < criteria.min_assists:
        return False
    if criteria.min_points is not None and player.points < criteria.min_points:
        return False
    if criteria.team is not None and player.team.lower() != criteria.team.lower():
        return False
    return True


def filter_players(
    players: Sequence[PlayerRecord],
    criteria: FilterCriteria,
) -> list[PlayerRecord]:
    """Apply every set bound in ``criteria``, then its optional sort."""

    selected = [player for player in players if _passes_criteria(player, criteria)]
    if criteria.sort_by is not None:
        selected = sort_players(selected, criteria.sort_by, criteria.sort_direction)
    return selected


def query_players(source: PlayerSource, criteria: FilterCriteria) -> list[PlayerRecord]:
    return filter_players(source.get_all(), criteria)


__all__ = [
    "FilterCriteria",
    "PlayerSource",
    "SORT_DIRECTIONS",
    "SORT_FIELDS",
    "SortDirection",
    "SortField",
    "filter_by_min_assists",
    "filter_by_min_goals",
    "filter_by_min_points",
    "filter_by_team",
    "filter_players",
    "query_players",
    "search_by_name",
    "sort_by",
    "sort_players",
]
