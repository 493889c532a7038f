"""
poolparser/store.py
Durable key-value cache for raw remote payloads. Entries are never evicted.
"""

import sqlite3
from pathlib import Path
from typing import Optional
from poolparser.logger import create_logger

logger = create_logger()

STORE_FILE_NAME = "poolparser.sqlite"


class KeyValueStore:
    """SQLite-backed byte store, opened once for the lifetime of a run."""

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        if self.db_path.suffix == "":
            self.db_path = self.db_path / STORE_FILE_NAME
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(self.db_path)
        self._create_schema()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _create_schema(self) -> None:
        with self._conn:
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS entries (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL,
                    written_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
                )
                """
            )

    def get(self, key: str) -> Optional[bytes]:
        """Returns the stored value, or None if the key has never been written"""
        row = self._conn.execute(
            "SELECT value FROM entries WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return None
        return bytes(row[0])

    def set(self, key: str, value: bytes) -> None:
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT OR REPLACE INTO entries (key, value) VALUES (?, ?)",
                    (key, sqlite3.Binary(value)),
                )
        except sqlite3.Error as error:
            logger.error(f"Failed to set key {key}: {error}")
            raise

    def close(self) -> None:
        self._conn.close()
