from .base_repository import BaseRepository
from .roll_repository import RollRepository

__all__ = [
    "BaseRepository",
    "RollRepository",
]
