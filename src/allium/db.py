"""SQLite-backed key-value settings store for the application."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional, Protocol

from .data_paths import db_path
from .logger import configure_logging

_LOG = configure_logging()

SCHEMA_VERSION = 1

BASE_SQL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS meta (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS settings (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class KeyValueStore(Protocol):
    """Opaque string key-value persistence used by the notes core."""

    def get_value(self, key: str) -> Optional[str]:
        ...

    def set_value(self, key: str, value: str) -> None:
        ...

    def remove_value(self, key: str) -> None:
        ...


class MemoryStore:
    """Dictionary-backed store for headless use and tests."""

    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(values or {})

    def get_value(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set_value(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove_value(self, key: str) -> None:
        self._values.pop(key, None)


class Database:
    """Lightweight SQLite settings table with schema versioning."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or db_path()
        self._connection: Optional[sqlite3.Connection] = None

    def connect(self) -> sqlite3.Connection:
        if self._connection is None:
            _LOG.info("Opening database at %s", self.path)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(self.path)
            self._connection.row_factory = sqlite3.Row
        return self._connection

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        conn = self.connect()
        cur = conn.cursor()
        try:
            yield cur
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cur.close()

    def initialise(self) -> None:
        with self.cursor() as cur:
            cur.executescript(BASE_SQL)
            cur.executescript(SCHEMA_SQL)
            cur.execute(
                "INSERT OR REPLACE INTO meta (key, value) VALUES (?, ?)",
                ("schema_version", str(SCHEMA_VERSION)),
            )

    def close(self) -> None:
        if self._connection is not None:
            _LOG.info("Closing database")
            self._connection.close()
            self._connection = None

    # ------------------------------------------------------------------
    # Key-value operations
    # ------------------------------------------------------------------
    def get_value(self, key: str) -> Optional[str]:
        with self.cursor() as cur:
            cur.execute("SELECT value FROM settings WHERE key = ?", (key,))
            row = cur.fetchone()
        if row is None:
            return None
        return row["value"]

    def set_value(self, key: str, value: str) -> None:
        with self.cursor() as cur:
            cur.execute(
                "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
                (key, value),
            )

    def remove_value(self, key: str) -> None:
        with self.cursor() as cur:
            cur.execute("DELETE FROM settings WHERE key = ?", (key,))

