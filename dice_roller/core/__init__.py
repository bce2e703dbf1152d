from dice_roller.core.dice import (
    RandomSource,
    roll_single,
    roll_multiple,
    reroll,
    roll_preset,
)
from dice_roller.core.formatting import format_expression, format_results
from dice_roller.core.matcher import find_matching_preset, is_predefined
from dice_roller.core.selection import DiceSelection, parse_count, parse_modifier

__all__ = [
    "RandomSource",
    "roll_single",
    "roll_multiple",
    "reroll",
    "roll_preset",
    "format_expression",
    "format_results",
    "find_matching_preset",
    "is_predefined",
    "DiceSelection",
    "parse_count",
    "parse_modifier",
]
