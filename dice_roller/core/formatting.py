"""
Text rendering for rolls.

`format_expression` produces the canonical expression stored on every Roll
("2d6 + 1d4 + 3"); `format_results` produces the per-die breakdown shown
under it in the history list.
"""

from typing import Iterable, Tuple, Union

from dice_roller.models.dice import DiceGroupResult, DiceGroupSpec, DiceKind, Roll

GroupLike = Union[DiceGroupSpec, DiceGroupResult, Tuple[DiceKind, int]]


def _kind_and_count(group: GroupLike) -> Tuple[DiceKind, int]:
    if isinstance(group, (DiceGroupSpec, DiceGroupResult)):
        return group.kind, group.count
    kind, count = group
    return DiceKind(kind), count


def format_modifier(modifier: int) -> str:
    """' + 3' / ' - 2' / '' for a trailing modifier clause."""
    if modifier == 0:
        return ""
    if modifier > 0:
        return f" + {modifier}"
    return f" - {abs(modifier)}"


def format_expression(groups: Iterable[GroupLike], modifier: int = 0) -> str:
    parts = []
    for group in groups:
        kind, count = _kind_and_count(group)
        parts.append(f"{count}{kind.value}")

    if not parts:
        # A bare modifier stands alone, without the joining " + "
        return str(modifier) if modifier != 0 else ""

    return " + ".join(parts) + format_modifier(modifier)


def format_results(roll: Roll) -> str:
    """
    Breakdown line for a roll, e.g. 'D6: [3, 5] + D4: [2] +3'.
    """
    text = " + ".join(
        f"{group.kind.value.upper()}: [{', '.join(str(r) for r in group.results)}]"
        for group in roll.groups
    )
    if roll.modifier != 0:
        text += f" {roll.modifier:+d}"
    return text.strip()
