"""Settings repository implementation."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Mapping

from core.models import Setting
from .database import Database


def _row_to_setting(row: sqlite3.Row) -> Setting:
    return Setting(
        key=row["key"],
        value=row["value"],
        category=row["category"],
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )


class SettingsRepository:
    """Repository for key/value settings rows."""

    def __init__(self, database: Database):
        self._db = database

    def get_by_category(self, category: str) -> list[Setting]:
        conn = self._db.get_connection()
        cursor = conn.execute(
            "SELECT key, value, category, updated_at FROM settings WHERE category = ? ORDER BY key",
            (category,),
        )
        return [_row_to_setting(row) for row in cursor.fetchall()]

    def replace_category(self, category: str, values: Mapping[str, str]) -> None:
        """Overwrite every row of ``category`` with ``values`` in one transaction."""
        conn = self._db.get_connection()
        now = datetime.now().isoformat()
        with conn:
            conn.execute("DELETE FROM settings WHERE category = ?", (category,))
            conn.executemany(
                """
                INSERT INTO settings (key, value, category, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    category = excluded.category,
                    updated_at = excluded.updated_at
                """,
                [(key, value, category, now) for key, value in values.items()],
            )

    def delete_category(self, category: str) -> int:
        conn = self._db.get_connection()
        cursor = conn.execute("DELETE FROM settings WHERE category = ?", (category,))
        conn.commit()
        return cursor.rowcount
