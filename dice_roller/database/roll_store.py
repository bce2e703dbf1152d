"""
Async primary store for roll history.

sqlite work runs in a worker thread via asyncio.to_thread so the UI loop is
never blocked. Each call opens its own connection inside that thread, since
sqlite connections must stay on the thread that created them.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import List

from dice_roller.database.db_manager import DBManager
from dice_roller.models.dice import Roll

logger = logging.getLogger(__name__)


class RollStore(ABC):
    """Contract for the primary history store. Any method may raise."""

    @abstractmethod
    async def init(self):
        pass

    @abstractmethod
    async def add_roll(self, roll: Roll):
        pass

    @abstractmethod
    async def get_all_rolls(self) -> List[Roll]:
        """All stored rolls, newest first."""
        pass

    @abstractmethod
    async def clear_all_rolls(self):
        pass


class SqliteRollStore(RollStore):
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _init(self):
        with DBManager(self.db_path) as db:
            db.create_tables()

    def _add(self, roll: Roll):
        with DBManager(self.db_path) as db:
            db.rolls.add(roll)

    def _get_all(self) -> List[Roll]:
        with DBManager(self.db_path) as db:
            return db.rolls.get_all()

    def _clear(self):
        with DBManager(self.db_path) as db:
            db.rolls.clear()

    async def init(self):
        await asyncio.to_thread(self._init)
        logger.debug(f"Roll store ready at {self.db_path}")

    async def add_roll(self, roll: Roll):
        await asyncio.to_thread(self._add, roll)

    async def get_all_rolls(self) -> List[Roll]:
        return await asyncio.to_thread(self._get_all)

    async def clear_all_rolls(self):
        await asyncio.to_thread(self._clear)
