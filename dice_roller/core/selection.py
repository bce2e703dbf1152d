"""
Input-side helpers for the multi-dice picker.

Raw field values are coerced here so that only clamped integers ever reach
the roll generator.
"""

from typing import Any, Dict, List

from dice_roller.core.formatting import format_expression
from dice_roller.models.dice import DiceGroupSpec, DiceKind

MAX_DICE_PER_KIND = 20


def _to_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def parse_count(value: Any) -> int:
    """Coerce a count field to an int in [0, MAX_DICE_PER_KIND]."""
    return min(MAX_DICE_PER_KIND, max(0, _to_int(value)))


def parse_modifier(value: Any) -> int:
    """Coerce a modifier field to an int; anything non-numeric becomes 0."""
    return _to_int(value)


class DiceSelection:
    """One count per die kind, in DiceKind order."""

    def __init__(self):
        self.counts: Dict[DiceKind, int] = {kind: 0 for kind in DiceKind}

    def set_count(self, kind: DiceKind, value: Any) -> int:
        count = parse_count(value)
        self.counts[DiceKind(kind)] = count
        return count

    def get_count(self, kind: DiceKind) -> int:
        return self.counts[DiceKind(kind)]

    def clear(self):
        for kind in self.counts:
            self.counts[kind] = 0

    def active_specs(self) -> List[DiceGroupSpec]:
        return [
            DiceGroupSpec(kind=kind, count=count)
            for kind, count in self.counts.items()
            if count > 0
        ]

    @property
    def has_active_dice(self) -> bool:
        return any(count > 0 for count in self.counts.values())

    def expression(self, modifier: int = 0) -> str:
        return format_expression(self.active_specs(), modifier)

    def button_label(self, modifier: int = 0) -> str:
        if not self.has_active_dice:
            return "Select Dice"
        return f"Roll {self.expression(modifier)}"
