"""Pydantic models validating raw adapter input."""

from .player import PlayerInput, StatsInput, describe_errors

__all__ = [
    "PlayerInput",
    "StatsInput",
    "describe_errors",
]
