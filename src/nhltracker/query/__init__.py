"""Read-only query helpers (filtering, search, sorting, formatting)."""

from .filtering import (
    FilterCriteria,
    PlayerSource,
    SORT_DIRECTIONS,
    SORT_FIELDS,
    filter_by_min_assists,
    filter_by_min_goals,
    filter_by_min_points,
    filter_by_team,
    filter_players,
    query_players,
    search_by_name,
    sort_by,
    sort_players,
)
from .formatting import EMPTY_RESULT_MESSAGE, format_player, format_players

__all__ = [
    "EMPTY_RESULT_MESSAGE",
    "FilterCriteria",
    "PlayerSource",
    "SORT_DIRECTIONS",
    "SORT_FIELDS",
    "filter_by_min_assists",
    "filter_by_min_goals",
    "filter_by_min_points",
    "filter_by_team",
    "filter_players",
    "format_player",
    "format_players",
    "query_players",
    "search_by_name",
    "sort_by",
    "sort_players",
]
