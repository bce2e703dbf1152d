"""Repository for roll history operations."""

import json
import sqlite3
from typing import List, Optional
from dice_roller.models.dice import DiceGroupResult, Roll
from .base_repository import BaseRepository


class RollRepository(BaseRepository):
    """Handles all roll-history database operations."""

    def create_table(self):
        cursor = self.conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS rolls (
                id TEXT PRIMARY KEY,
                timestamp INTEGER NOT NULL,
                groups_data TEXT NOT NULL DEFAULT '[]',
                modifier INTEGER NOT NULL DEFAULT 0,
                total INTEGER NOT NULL,
                expression TEXT NOT NULL DEFAULT '',
                name TEXT,
                is_custom INTEGER
            );
            """
        )
        self.conn.commit()

    def _to_roll(self, row: sqlite3.Row) -> Roll:
        data = dict(row)
        groups = [DiceGroupResult(**g) for g in json.loads(data.pop("groups_data"))]
        is_custom = data.pop("is_custom")
        return Roll(
            **data,
            groups=groups,
            is_custom=None if is_custom is None else bool(is_custom),
        )

    def add(self, roll: Roll):
        """Insert a roll. Re-adding an existing id replaces it."""
        groups_json = json.dumps([g.model_dump(mode="json") for g in roll.groups])
        self._execute(
            """INSERT OR REPLACE INTO rolls
            (id, timestamp, groups_data, modifier, total, expression, name, is_custom)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                roll.id,
                roll.timestamp,
                groups_json,
                roll.modifier,
                roll.total,
                roll.expression,
                roll.name,
                None if roll.is_custom is None else int(roll.is_custom),
            ),
        )
        self._commit()

    def get_by_id(self, roll_id: str) -> Optional[Roll]:
        row = self._fetchone("SELECT * FROM rolls WHERE id = ?", (roll_id,))
        return self._to_roll(row) if row else None

    def get_all(self) -> List[Roll]:
        """All rolls, newest first. Same-millisecond rolls keep insertion order reversed."""
        rows = self._fetchall("SELECT * FROM rolls ORDER BY timestamp DESC, rowid DESC")
        return [self._to_roll(row) for row in rows]

    def count(self) -> int:
        row = self._fetchone("SELECT COUNT(*) AS total FROM rolls")
        return row["total"]

    def clear(self):
        self._execute("DELETE FROM rolls")
        self._commit()
