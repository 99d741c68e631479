from __future__ import annotations

import sqlite3
import uuid
from typing import List

from models.company_record import CompanyFields, CompanyRecord
from ports.repos import StoreError


class SqliteCompaniesStore:
    """Local implementation of the companies store on top of sqlite3."""

    def __init__(self, conn: sqlite3.Connection, table: str = "companies"):
        self.conn = conn
        self.table = table

    def _rollback(self) -> None:
        # A closed or broken connection cannot roll back; the caller still gets a StoreError
        try:
            self.conn.rollback()
        except sqlite3.Error:
            pass

    def list_all(self) -> List[CompanyRecord]:
        """Return every company, newest first.

        rowid breaks ties between rows created within the same millisecond.
        """
        sql = (
            f"SELECT id, name, website, role, linkedin FROM {self.table} "
            "ORDER BY created_at DESC, rowid DESC;"
        )
        try:
            cur = self.conn.cursor()
            cur.execute(sql)
            rows = cur.fetchall()
        except sqlite3.Error as e:
            raise StoreError("list", str(e)) from e
        return [CompanyRecord(**dict(row)) for row in rows]

    def insert(self, fields: CompanyFields) -> CompanyRecord:
        """Insert a new company and return it with its generated id."""
        record_id = uuid.uuid4().hex
        try:
            self.conn.execute(
                f"INSERT INTO {self.table} (id, name, website, role, linkedin) VALUES (?, ?, ?, ?, ?)",
                (record_id, fields.name, fields.website, fields.role, fields.linkedin),
            )
            self.conn.commit()
        except sqlite3.Error as e:
            self._rollback()
            raise StoreError("insert", str(e)) from e
        return CompanyRecord(id=record_id, **fields.model_dump())

    def update_by_id(self, record_id: str, fields: CompanyFields) -> None:
        try:
            cur = self.conn.execute(
                f"UPDATE {self.table} SET name = ?, website = ?, role = ?, linkedin = ? WHERE id = ?",
                (fields.name, fields.website, fields.role, fields.linkedin, record_id),
            )
            self.conn.commit()
        except sqlite3.Error as e:
            self._rollback()
            raise StoreError("update", str(e), record_id) from e
        if cur.rowcount == 0:
            raise StoreError("update", "no such company", record_id)

    def delete_by_id(self, record_id: str) -> None:
        try:
            cur = self.conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (record_id,))
            self.conn.commit()
        except sqlite3.Error as e:
            self._rollback()
            raise StoreError("delete", str(e), record_id) from e
        if cur.rowcount == 0:
            raise StoreError("delete", "no such company", record_id)
