import sqlite3
from typing import Optional
from dice_roller.database.repositories import RollRepository


class DBManager:
    """
    Database connection manager with repository-based access.

    Usage:
        with DBManager("dice_rolls.db") as db:
            rolls = db.rolls.get_all()
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self.conn = None

        # Repositories (initialized in __enter__)
        self.rolls: Optional[RollRepository] = None

    def __enter__(self):
        # Wait on a locked database instead of failing immediately; autocommit mode
        self.conn = sqlite3.connect(self.db_path, timeout=30.0, isolation_level=None)
        self.conn.execute("PRAGMA journal_mode=WAL;")
        self.conn.row_factory = sqlite3.Row

        self.rolls = RollRepository(self.conn)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.conn:
            self.conn.close()
            self.conn = None

    def create_tables(self):
        """Initialize all database tables."""
        if not self.conn:
            with self as db:
                db._create_all_tables_and_indexes()
        else:
            self._create_all_tables_and_indexes()

    def _create_all_tables_and_indexes(self):
        for repo in (self.rolls,):
            if repo:
                repo.create_table()

        self._create_indexes()

    def _create_indexes(self):
        cursor = self.conn.cursor()
        cursor.execute(
            "CREATE INDEX IF NOT EXISTS idx_rolls_timestamp ON rolls(timestamp);"
        )
        self.conn.commit()
