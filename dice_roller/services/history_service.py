"""
Roll history with two storage tiers.

The in-memory `rolls` list (newest first) is what the UI renders. The
primary async store and the fallback key-value snapshot are durability
mirrors of it; store failures are logged and never raised to the caller.
"""

import json
import logging
from enum import Enum
from typing import List

from pydantic import ValidationError

from dice_roller.database.roll_store import RollStore
from dice_roller.models.dice import Roll
from dice_roller.storage.key_value_store import HISTORY_KEY, KeyValueStore

logger = logging.getLogger(__name__)


class StorageTier(str, Enum):
    UNINITIALIZED = "uninitialized"
    PRIMARY = "primary"
    FALLBACK = "fallback"


def dump_rolls(rolls: List[Roll]) -> str:
    return json.dumps([roll.model_dump(mode="json") for roll in rolls])


def load_rolls(payload: str) -> List[Roll]:
    """Parse a JSON snapshot. Raises on malformed data."""
    data = json.loads(payload)
    if not isinstance(data, list):
        raise TypeError(f"Expected a list of rolls, got {type(data).__name__}")
    return [Roll(**item) for item in data]


class RollHistory:
    """
    Owns the session's roll list and keeps the stores in step with it.

    Tier is chosen once by `initialize()`. While on PRIMARY, a failed write
    mirrors the whole list into the fallback snapshot; the next `add` tries
    the primary store again unless `demote_on_write_failure` is set, in which
    case the adapter stays on FALLBACK for the rest of the session.
    """

    def __init__(
        self,
        primary: RollStore,
        fallback: KeyValueStore,
        snapshot_key: str = HISTORY_KEY,
        demote_on_write_failure: bool = False,
    ):
        self.primary = primary
        self.fallback = fallback
        self.snapshot_key = snapshot_key
        self.demote_on_write_failure = demote_on_write_failure

        self.tier = StorageTier.UNINITIALIZED
        self.rolls: List[Roll] = []

    async def initialize(self) -> List[Roll]:
        try:
            await self.primary.init()
            stored = await self.primary.get_all_rolls()
        except Exception as e:
            logger.error(f"Failed to initialize roll store or load history: {e}")
            self.tier = StorageTier.FALLBACK
            self.rolls = self._load_snapshot()
            logger.warning(
                f"Using fallback storage for history ({len(self.rolls)} rolls loaded)"
            )
            return self.rolls

        self.tier = StorageTier.PRIMARY
        # sorted() is stable, so equal timestamps keep the store's order
        self.rolls = sorted(stored, key=lambda r: r.timestamp, reverse=True)
        logger.info(f"Loaded {len(self.rolls)} rolls from primary store")
        return self.rolls

    async def add(self, roll: Roll):
        # Visible immediately; persistence happens behind it
        self.rolls = [roll] + self.rolls

        if self.tier != StorageTier.PRIMARY:
            self._save_snapshot()
            return

        try:
            await self.primary.add_roll(roll)
        except Exception as e:
            logger.error(f"Failed to save roll {roll.id} to primary store: {e}")
            self._save_snapshot()
            if self.demote_on_write_failure:
                self.tier = StorageTier.FALLBACK
                logger.warning("Primary store disabled for this session")

    async def clear(self):
        self.rolls = []

        if self.tier == StorageTier.PRIMARY:
            try:
                await self.primary.clear_all_rolls()
            except Exception as e:
                logger.error(f"Failed to clear primary store: {e}")

        # A snapshot may exist from an earlier outage; drop it in every tier
        try:
            self.fallback.remove(self.snapshot_key)
        except OSError as e:
            logger.error(f"Failed to remove history snapshot: {e}")

    def _load_snapshot(self) -> List[Roll]:
        try:
            payload = self.fallback.get(self.snapshot_key)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read history snapshot: {e}")
            return []

        if not payload:
            return []

        try:
            return load_rolls(payload)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.error(f"Failed to load roll history from snapshot: {e}")
            return []

    def _save_snapshot(self):
        try:
            self.fallback.set(self.snapshot_key, dump_rolls(self.rolls))
        except OSError as e:
            logger.error(f"Failed to write history snapshot: {e}")
