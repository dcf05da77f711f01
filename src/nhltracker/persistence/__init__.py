"""Persistence layer for player stat records."""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path
from typing import List, Optional

from nhltracker.models import PlayerRecord, normalize_name


logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


class PlayerStore:
    """SQLite-backed store owning the ``players`` table.

    Storage failures never escape: they are logged and reported as the
    operation's failure value (``False``, ``None`` or an empty list). A path
    that does not exist yet is created on the first successful ``add``.
    """

    def __init__(self, db_path: Path | str):
        self._in_memory = str(db_path) == MEMORY_PATH
        self.db_path: Path | str = MEMORY_PATH if self._in_memory else Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        self._closed = False
        self._schema_ready = False
        self._lock = threading.RLock()
        if self._in_memory or Path(self.db_path).exists():
            self._conn = self._connect()

    def __enter__(self) -> "PlayerStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def _connect(self) -> Optional[sqlite3.Connection]:
        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path, check_same_thread=False)
        except (sqlite3.Error, OSError) as exc:
            logger.error("Could not open player database %s: %s", self.db_path, exc)
            return None
        conn.row_factory = sqlite3.Row
        logger.debug("Connected to player database %s", self.db_path)
        return conn

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS players (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                name_key TEXT NOT NULL UNIQUE,
                team TEXT NOT NULL,
                goals INTEGER NOT NULL,
                assists INTEGER NOT NULL,
                plus_minus INTEGER NOT NULL
            )
            """
        )
        conn.commit()
        self._schema_ready = True

    def _has_schema(self, conn: sqlite3.Connection) -> bool:
        if not self._schema_ready:
            row = conn.execute(
                "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'players'"
            ).fetchone()
            self._schema_ready = row is not None
        return self._schema_ready

    def _usable(self, operation: str) -> bool:
        if self._closed:
            logger.warning("Player store %s is closed; %s skipped", self.db_path, operation)
            return False
        return True

    def _reader(self) -> Optional[sqlite3.Connection]:
        # Raises sqlite3.Error for unreadable files; callers convert it.
        if self._conn is None and not self._in_memory and Path(self.db_path).exists():
            # Another handle may have created the file since construction.
            self._conn = self._connect()
        if self._conn is None or not self._has_schema(self._conn):
            return None
        return self._conn

    def _writer(self) -> Optional[sqlite3.Connection]:
        if self._conn is None:
            self._conn = self._connect()
            if self._conn is None:
                return None
        if not self._has_schema(self._conn):
            self._create_schema(self._conn)
        return self._conn

    def add(self, record: PlayerRecord) -> bool:
        with self._lock:
            if not self._usable("add"):
                return False
            try:
                conn = self._writer()
                if conn is None:
                    return False
                if self._find_row(conn, record.name) is not None:
                    logger.info("Player %s already exists; not added", record.name)
                    return False
                with conn:
                    conn.execute(
                        """
                        INSERT INTO players (name, name_key, team, goals, assists, plus_minus)
                        VALUES (?, ?, ?, ?, ?, ?)
                        """,
                        (
                            record.name,
                            record.name_key,
                            record.team,
                            record.goals,
                            record.assists,
                            record.plus_minus,
                        ),
                    )
            except sqlite3.IntegrityError:
                logger.info("Player %s already exists; not added", record.name)
                return False
            except sqlite3.Error as exc:
                logger.error("Error adding player %s: %s", record.name, exc)
                return False
        return True

    def find_by_name(self, name: str) -> Optional[PlayerRecord]:
        with self._lock:
            if not self._usable("find_by_name"):
                return None
            try:
                conn = self._reader()
                if conn is None:
                    return None
                row = self._find_row(conn, name)
            except sqlite3.Error as exc:
                logger.error("Error finding player %s: %s", name, exc)
                return None
        if row is None:
            logger.debug("No player named %s", name)
            return None
        return self._row_to_record(row)

    def get_all(self) -> List[PlayerRecord]:
        """Return every player ordered by name (binary collation), then insertion."""

        with self._lock:
            if not self._usable("get_all"):
                return []
            try:
                conn = self._reader()
                if conn is None:
                    return []
                rows = conn.execute("SELECT * FROM players ORDER BY name ASC, id ASC").fetchall()
            except sqlite3.Error as exc:
                logger.error("Error retrieving players: %s", exc)
                return []
        return [self._row_to_record(row) for row in rows]

    def update(self, record: PlayerRecord) -> bool:
        """Overwrite team and stats of the stored player sharing ``record``'s name."""

        with self._lock:
            if not self._usable("update"):
                return False
            try:
                conn = self._reader()
                if conn is None:
                    return False
                with conn:
                    cursor = conn.execute(
                        """
                        UPDATE players
                        SET team = ?, goals = ?, assists = ?, plus_minus = ?
                        WHERE name_key = ?
                        """,
                        (
                            record.team,
                            record.goals,
                            record.assists,
                            record.plus_minus,
                            record.name_key,
                        ),
                    )
            except sqlite3.Error as exc:
                logger.error("Error updating player %s: %s", record.name, exc)
                return False
        if cursor.rowcount == 0:
            logger.info("Player %s not found; nothing updated", record.name)
            return False
        return True

    def remove(self, name: str) -> bool:
        with self._lock:
            if not self._usable("remove"):
                return False
            try:
                conn = self._reader()
                if conn is None:
                    return False
                with conn:
                    cursor = conn.execute(
                        "DELETE FROM players WHERE name_key = ?",
                        (normalize_name(name),),
                    )
            except sqlite3.Error as exc:
                logger.error("Error removing player %s: %s", name, exc)
                return False
        if cursor.rowcount == 0:
            logger.info("Player %s not found; nothing removed", name)
            return False
        return True

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            conn, self._conn = self._conn, None
            if conn is None:
                return
            try:
                conn.close()
            except sqlite3.Error as exc:
                logger.error("Error closing player database %s: %s", self.db_path, exc)

    def _find_row(self, conn: sqlite3.Connection, name: str) -> Optional[sqlite3.Row]:
        return conn.execute(
            "SELECT * FROM players WHERE name_key = ?",
            (normalize_name(name),),
        ).fetchone()

    def _row_to_record(self, row: sqlite3.Row) -> PlayerRecord:
        return PlayerRecord(
            name=row["name"],
            team=row["team"],
            goals=row["goals"],
            assists=row["assists"],
            plus_minus=row["plus_minus"],
        )


__all__ = ["MEMORY_PATH", "PlayerStore"]
