"""SQLite database handle shared by the repositories."""

from __future__ import annotations

import sqlite3
from pathlib import Path


class Database:
    """A SQLite connection in autocommit mode with WAL journaling and foreign keys on."""

    def __init__(self, path):
        self.path = str(path)
        try:
            self.connection = sqlite3.connect(
                self.path, isolation_level=None, check_same_thread=False
            )
        except sqlite3.Error as exc:
            raise RuntimeError(f"Failed to open database: {self.path}") from exc
        self.execute("PRAGMA journal_mode=WAL;")
        self.execute("PRAGMA foreign_keys=ON;")

    def execute(self, sql):
        """Run one or more SQL statements, raising RuntimeError on failure."""
        try:
            self.connection.executescript(sql)
        except sqlite3.Error as exc:
            raise RuntimeError(f"SQL error: {exc}") from exc

    def execute_file(self, path):
        """Run every statement in the SQL file at ``path``."""
        try:
            sql = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(f"Cannot open SQL file: {path}") from exc
        self.execute(sql)

    def close(self):
        """Close the connection; calling it again does nothing."""
        if self.connection is not None:
            self.connection.close()
            self.connection = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()