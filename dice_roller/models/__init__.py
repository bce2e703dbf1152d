from dice_roller.models.dice import (
    DICE_SIDES,
    DiceKind,
    DiceGroupSpec,
    DiceGroupResult,
    Roll,
)
from dice_roller.models.preset import NamedRollPreset, RollCategory

__all__ = [
    "DICE_SIDES",
    "DiceKind",
    "DiceGroupSpec",
    "DiceGroupResult",
    "Roll",
    "NamedRollPreset",
    "RollCategory",
]
