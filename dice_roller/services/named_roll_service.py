"""
User-saved roll presets.

Every operation reads the whole list, changes it, and writes it back. Names
are not unique: saving twice keeps both entries, and delete removes all
entries with that name.
"""

import json
import logging
from typing import List

from pydantic import ValidationError

from dice_roller.models.preset import NamedRollPreset
from dice_roller.storage.key_value_store import CUSTOM_ROLLS_KEY, KeyValueStore

logger = logging.getLogger(__name__)


class NamedRollStore:
    def __init__(self, store: KeyValueStore, key: str = CUSTOM_ROLLS_KEY):
        self.store = store
        self.key = key

    def list(self) -> List[NamedRollPreset]:
        try:
            saved = self.store.get(self.key)
            if not saved:
                return []
            data = json.loads(saved)
            if not isinstance(data, list):
                raise TypeError(f"Expected a list, got {type(data).__name__}")
            return [NamedRollPreset(**item) for item in data]
        except (
            OSError,
            UnicodeDecodeError,
            json.JSONDecodeError,
            ValidationError,
            TypeError,
        ) as e:
            logger.error(f"Failed to load custom rolls: {e}")
            return []

    def save(self, preset: NamedRollPreset) -> bool:
        return self._write(self.list() + [preset])

    def delete(self, name: str) -> bool:
        return self._write([p for p in self.list() if p.name != name])

    def clear(self) -> bool:
        try:
            self.store.remove(self.key)
            return True
        except OSError as e:
            logger.error(f"Failed to clear custom rolls: {e}")
            return False

    def _write(self, presets: List[NamedRollPreset]) -> bool:
        try:
            self.store.set(
                self.key, json.dumps([p.model_dump(mode="json") for p in presets])
            )
            logger.debug(f"Saved {len(presets)} custom rolls")
            return True
        except OSError as e:
            logger.error(f"Failed to save custom rolls: {e}")
            return False
