from dice_roller.storage.key_value_store import (
    CUSTOM_ROLLS_KEY,
    HISTORY_KEY,
    KeyValueStore,
    LocalKeyValueStore,
    MemoryKeyValueStore,
)

__all__ = [
    "CUSTOM_ROLLS_KEY",
    "HISTORY_KEY",
    "KeyValueStore",
    "LocalKeyValueStore",
    "MemoryKeyValueStore",
]
