from dice_roller.services.dice_service import DiceService
from dice_roller.services.history_service import RollHistory, StorageTier
from dice_roller.services.named_roll_service import NamedRollStore

__all__ = ["DiceService", "RollHistory", "StorageTier", "NamedRollStore"]
