from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generator, List, Sequence

log = logging.getLogger("jobboard.db")


SCHEMA = """
CREATE TABLE IF NOT EXISTS companies (
    handle        TEXT PRIMARY KEY CHECK (handle = lower(handle)),
    name          TEXT UNIQUE NOT NULL,
    num_employees INTEGER CHECK (num_employees >= 0),
    description   TEXT NOT NULL,
    logo_url      TEXT
);

CREATE TABLE IF NOT EXISTS jobs (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    title          TEXT UNIQUE NOT NULL,
    salary         INTEGER CHECK (salary >= 0),
    equity         TEXT,
    company_handle TEXT NOT NULL REFERENCES companies (handle) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS users (
    username   TEXT PRIMARY KEY,
    password   TEXT NOT NULL,
    first_name TEXT NOT NULL,
    last_name  TEXT NOT NULL,
    email      TEXT NOT NULL CHECK (instr(email, '@') > 1),
    is_admin   INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS applications (
    username TEXT NOT NULL REFERENCES users (username) ON DELETE CASCADE,
    job_id   INTEGER NOT NULL REFERENCES jobs (id) ON DELETE CASCADE,
    PRIMARY KEY (username, job_id)
);
"""


class Database:
    """
    Thin handle over a SQLite file.

    Every call opens its own autocommit connection, so statements are atomic
    on their own and nothing is shared between requests.
    """

    def __init__(self, path: str):
        self.path = path

    @contextmanager
    def connect(self) -> Generator[sqlite3.Connection, None, None]:
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.path, isolation_level=None)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA foreign_keys = ON;")
            yield conn
        finally:
            conn.close()

    def init_schema(self) -> None:
        with self.connect() as conn:
            conn.executescript(SCHEMA)
        log.info("database schema ready at %s", self.path)

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Run one statement and return every row as a plain dict."""
        with self.connect() as conn:
            cur = conn.execute(sql, tuple(params))
            rows = cur.fetchall()
        return [dict(r) for r in rows]

    def ping(self) -> bool:
        try:
            self.query("SELECT 1 AS ok")
            return True
        except sqlite3.Error as e:
            log.warning("database ping failed: %s", e)
            return False
