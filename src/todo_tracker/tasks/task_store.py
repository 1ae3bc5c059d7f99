# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from .task_models import Todo

logger = logging.getLogger(__name__)


class TodoStore:
    """
    SQLite todo store.

    The schema is a single table created on first use; there are no migrations.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "todos.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.debug("TodoStore ready db=%s total=%s", self._db_path, self.count_todos())

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    created_at REAL NOT NULL,
                    description TEXT NOT NULL,
                    checked INTEGER NOT NULL DEFAULT 0
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_todo(row: sqlite3.Row) -> Todo:
        return Todo(
            id=int(row["id"]),
            created_at=float(row["created_at"] or 0.0),
            description=str(row["description"] or ""),
            checked=bool(row["checked"]),
        )

    # ---- public API ----

    def count_todos(self, *, unchecked_only: bool = False) -> int:
        sql = "SELECT COUNT(*) FROM todos"
        if unchecked_only:
            sql += " WHERE checked = 0"

        conn = self._get_conn()
        try:
            (n,) = conn.execute(sql).fetchone()
            return int(n)
        finally:
            conn.close()

    def add_todo(self, description: str) -> int:
        if not description or not description.strip():
            raise ValueError("description is required")

        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                "INSERT INTO todos(created_at, description, checked) VALUES (?, ?, 0)",
                (time.time(), description.strip()),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise RuntimeError("SQLite did not return lastrowid for todos insert")
            todo_id = int(rowid)
            logger.debug("Todo added id=%s", todo_id)
            return todo_id
        finally:
            conn.close()

    def list_todos(self, *, unchecked_only: bool = False) -> list[Todo]:
        """Return todos in insertion order, optionally only the unchecked ones."""
        sql = "SELECT id, created_at, description, checked FROM todos"
        if unchecked_only:
            sql += " WHERE checked = 0"
        sql += " ORDER BY id ASC"

        conn = self._get_conn()
        try:
            return [self._row_to_todo(r) for r in conn.execute(sql).fetchall()]
        finally:
            conn.close()

    def get_todo(self, todo_id: int) -> Todo | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT id, created_at, description, checked FROM todos WHERE id = ?",
                (int(todo_id),),
            ).fetchone()
            return self._row_to_todo(row) if row else None
        finally:
            conn.close()

    def toggle_todo(self, todo_id: int) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "UPDATE todos SET checked = NOT checked WHERE id = ?",
                (int(todo_id),),
            )
            conn.commit()
            logger.debug("Todo toggled id=%s", todo_id)
        finally:
            conn.close()

    def delete_todo(self, todo_id: int) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM todos WHERE id = ?", (int(todo_id),))
            conn.commit()
            logger.debug("Todo deleted id=%s", todo_id)
        finally:
            conn.close()
