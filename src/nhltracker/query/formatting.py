"""Plain-text rendering of player lists."""

from __future__ import annotations

from typing import Iterable

from nhltracker.models import PlayerRecord


EMPTY_RESULT_MESSAGE = "No players found for your criteria."


def format_player(player: PlayerRecord) -> str:
    return (
        f"{player.name:<20} {player.team:<15} "
        f"Goals: {player.goals:<3} Assists: {player.assists:<3} "
        f"Points: {player.points:<3} +/-: {player.plus_minus:<3}"
    )


def format_players(players: Iterable[PlayerRecord]) -> str:
    """Render one line per player in the given order, or the empty-result message."""

    lines = [format_player(player) for player in players]
    if not lines:
        return EMPTY_RESULT_MESSAGE
    return "".join(f"{line}\n" for line in lines)


__all__ = ["EMPTY_RESULT_MESSAGE", "format_player", "format_players"]
