"""Command-line interface for managing the player stat roster."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from nhltracker.config import LOG_LEVELS, TrackerSettings, load_settings, normalize_log_level
from nhltracker.config_loader import TrackerProfile
from nhltracker.legacy import export_players, import_players, load_players
from nhltracker.persistence import PlayerStore
from nhltracker.query import (
    SORT_DIRECTIONS,
    SORT_FIELDS,
    FilterCriteria,
    format_player,
    format_players,
    query_players,
    search_by_name,
)
from nhltracker.schemas import PlayerInput, StatsInput, describe_errors


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def _add_stat_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("team", help="Team name")
    parser.add_argument("goals", help="Goals scored")
    parser.add_argument("assists", help="Assists recorded")
    parser.add_argument("plus_minus", help="Plus/minus rating (may be negative)")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Track hockey player roster statistics")
    parser.add_argument("--db", default=None, help="SQLite database path (or :memory:)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging verbosity",
    )
    parser.add_argument("--load-profile", type=Path, help="Load settings profile JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save settings profile JSON", default=None)
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="Add a new player")
    add.add_argument("name", help="Player name")
    _add_stat_arguments(add)

    update = commands.add_parser("update", help="Replace a player's team and stats")
    update.add_argument("name", help="Name of the player to update")
    _add_stat_arguments(update)

    remove = commands.add_parser("remove", help="Remove a player by name")
    remove.add_argument("name", help="Player name")

    search = commands.add_parser("search", help="Look up a player by name")
    search.add_argument("name", help="Player name")

    listing = commands.add_parser("list", help="List players, optionally filtered and sorted")
    listing.add_argument("--min-goals", type=int, default=None, help="Minimum goals (inclusive)")
    listing.add_argument("--min-assists", type=int, default=None, help="Minimum assists (inclusive)")
    listing.add_argument("--min-points", type=int, default=None, help="Minimum points (inclusive)")
    listing.add_argument("--team", default=None, help="Only players on this team")
    listing.add_argument("--sort", choices=SORT_FIELDS, default=None, help="Sort field")
    listing.add_argument("--direction", choices=SORT_DIRECTIONS, default="desc", help="Sort direction")

    import_legacy = commands.add_parser("import-legacy", help="Add players from a legacy text file")
    import_legacy.add_argument("path", type=Path, help="Legacy players file")

    export_legacy = commands.add_parser("export-legacy", help="Write all players to a legacy text file")
    export_legacy.add_argument("path", type=Path, help="Destination file")

    return parser.parse_args(argv)


def _resolve_settings(args: argparse.Namespace) -> TrackerSettings:
    settings = load_settings()
    db_path = settings.db_path
    log_level = settings.log_level

    if args.load_profile:
        profile = TrackerProfile.load(args.load_profile)
        if profile.db_path:
            db_path = profile.db_path
        if profile.log_level:
            log_level = normalize_log_level(profile.log_level, log_level)

    if args.db:
        db_path = args.db
    if args.log_level:
        log_level = args.log_level
    return TrackerSettings(db_path=db_path, log_level=log_level)


def _validate(args: argparse.Namespace) -> PlayerInput | StatsInput | None:
    if args.command == "add":
        return PlayerInput(
            name=args.name,
            team=args.team,
            goals=args.goals,
            assists=args.assists,
            plus_minus=args.plus_minus,
        )
    if args.command == "update":
        return StatsInput(
            team=args.team,
            goals=args.goals,
            assists=args.assists,
            plus_minus=args.plus_minus,
        )
    return None


def _preview(names: Sequence[str]) -> str:
    preview = ", ".join(names[:5])
    more = len(names) - 5
    suffix = f", +{more} more" if more > 0 else ""
    return f"{preview}{suffix}"


def _cmd_add(store: PlayerStore, args: argparse.Namespace, payload) -> int:
    if store.add(payload.to_record()):
        print("Player added successfully.")
        return EXIT_OK
    print("Failed to add player, Player may already exist.")
    return EXIT_FAILED


def _cmd_update(store: PlayerStore, args: argparse.Namespace, payload) -> int:
    existing = store.find_by_name(args.name)
    if existing is None or not store.update(payload.apply_to(existing)):
        print("Player not found.")
        return EXIT_FAILED
    print("Player updated.")
    return EXIT_OK


def _cmd_remove(store: PlayerStore, args: argparse.Namespace, payload) -> int:
    if store.remove(args.name):
        print("Player removed.")
        return EXIT_OK
    print("Player not found.")
    return EXIT_FAILED


def _cmd_search(store: PlayerStore, args: argparse.Namespace, payload) -> int:
    found = search_by_name(store, args.name)
    if not found:
        print("No player found with that name.")
        return EXIT_FAILED
    print("Player has been found successfully")
    print(format_player(found[0]))
    return EXIT_OK


def _cmd_list(store: PlayerStore, args: argparse.Namespace, payload) -> int:
    criteria = FilterCriteria(
        min_goals=args.min_goals,
        min_assists=args.min_assists,
        min_points=args.min_points,
        team=args.team,
        sort_by=args.sort,
        sort_direction=args.direction,
    )
    print(format_players(query_players(store, criteria)).rstrip("\n"))
    return EXIT_OK


def _cmd_import_legacy(store: PlayerStore, args: argparse.Namespace, payload) -> int:
    report = import_players(store, load_players(args.path))
    print(f"Imported {report.added}/{report.total_players} players from {args.path}")
    if report.duplicates:
        print(f"Skipped existing players: {_preview(report.duplicates)}")
    return EXIT_OK


def _cmd_export_legacy(store: PlayerStore, args: argparse.Namespace, payload) -> int:
    if export_players(store, args.path):
        print(f"Exported players to {args.path}")
        return EXIT_OK
    print(f"Failed to write {args.path}")
    return EXIT_FAILED


_COMMANDS: dict[str, Callable[[PlayerStore, argparse.Namespace, Optional[object]], int]] = {
    "add": _cmd_add,
    "update": _cmd_update,
    "remove": _cmd_remove,
    "search": _cmd_search,
    "list": _cmd_list,
    "import-legacy": _cmd_import_legacy,
    "export-legacy": _cmd_export_legacy,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        settings = _resolve_settings(args)
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError
        print(f"Error: could not load profile {args.load_profile}: {exc}")
        return EXIT_INVALID

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.save_profile:
        profile = TrackerProfile(db_path=str(settings.db_path), log_level=settings.log_level)
        try:
            profile.save(args.save_profile)
        except OSError as exc:
            print(f"Error: could not save profile {args.save_profile}: {exc}")
            return EXIT_INVALID
        print(f"Saved settings profile to {args.save_profile}")

    try:
        payload = _validate(args)
    except ValidationError as exc:
        for message in describe_errors(exc):
            print(f"Error: {message}")
        return EXIT_INVALID

    logger.debug("Running %s against %s", args.command, settings.db_path)
    with PlayerStore(settings.db_path) as store:
        return _COMMANDS[args.command](store, args, payload)


if __name__ == "__main__":
    raise SystemExit(main())
