"""Adapters for the legacy flat-file roster format."""

from .flatfile import (
    ImportReport,
    export_players,
    import_players,
    load_players,
    save_players,
)

__all__ = [
    "ImportReport",
    "export_players",
    "import_players",
    "load_players",
    "save_players",
]
