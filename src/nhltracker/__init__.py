"""Roster statistics tracker for hockey players."""

__version__ = "0.1.0"
