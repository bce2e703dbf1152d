from dice_roller.database.db_manager import DBManager
from dice_roller.database.roll_store import RollStore, SqliteRollStore

__all__ = ["DBManager", "RollStore", "SqliteRollStore"]
