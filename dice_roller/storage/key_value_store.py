"""
Synchronous local key-value storage used as the fallback tier.

Each key is kept as one text file `<key>.json` under a root directory.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

HISTORY_KEY = "diceRollHistory"
CUSTOM_ROLLS_KEY = "customDiceRolls"


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str):
        pass

    @abstractmethod
    def remove(self, key: str):
        pass


class LocalKeyValueStore(KeyValueStore):
    def __init__(self, root_dir: Union[str, Path]):
        self.root_dir = Path(root_dir)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str):
        path = self._path(key)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        # Write-then-rename so a crash never leaves half a snapshot behind
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        os.replace(tmp_path, path)

    def remove(self, key: str):
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.debug(f"Removed stored key {key}")


class MemoryKeyValueStore(KeyValueStore):
    """Process-local store; nothing survives a restart."""

    def __init__(self):
        self.data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str):
        self.data[key] = value

    def remove(self, key: str):
        self.data.pop(key, None)
