"""Record models shared by the store, query and adapter layers."""

from .player import PlayerRecord, normalize_name

__all__ = ["PlayerRecord", "normalize_name"]
