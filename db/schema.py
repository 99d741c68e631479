from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection, table: str = "companies") -> None:
    """Create the companies table and its ordering index (idempotent)."""
    cur = conn.cursor()

    # created_at is store-side only; used for newest-first ordering
    cur.execute(
        (
            f"CREATE TABLE IF NOT EXISTS {table} (\n"
            "  id TEXT PRIMARY KEY,\n"
            "  name TEXT NOT NULL,\n"
            "  website TEXT NOT NULL DEFAULT '',\n"
            "  role TEXT NOT NULL DEFAULT '',\n"
            "  linkedin TEXT NOT NULL DEFAULT '',\n"
            "  created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f', 'now'))\n"
            ")"
        )
    )
    cur.execute(f"CREATE INDEX IF NOT EXISTS idx_{table}_created_at ON {table}(created_at);")

    conn.commit()
