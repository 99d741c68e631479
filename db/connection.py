from __future__ import annotations

import sqlite3
from typing import Optional

from db import schema


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open the tracker database.

    Rows come back as sqlite3.Row so repos can read columns by name.
    WAL journal and NORMAL synchronous keep the CLI snappy; the busy
    timeout covers a second shell writing to the same file.
    foreign_keys is ON for every connection.
    """
    conn = sqlite3.connect(db_path, timeout=timeout or 30.0)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    conn.execute("PRAGMA foreign_keys=ON;")
    return conn


def open_tracker_db(db_path: str, table: str = "companies") -> sqlite3.Connection:
    """Connection with the companies schema in place."""
    conn = get_connection(db_path)
    schema.bootstrap(conn, table)
    return conn
