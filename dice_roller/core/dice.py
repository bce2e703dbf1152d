"""
Roll generation.

Every roll goes through `roll_multiple` or `roll_single`, which stamp the
result with a fresh id, the current time and the canonical expression.
"""

import logging
import random
import time
import uuid
from typing import Iterable, List, Optional, Union

from dice_roller.core.formatting import format_expression
from dice_roller.models.dice import DiceGroupResult, DiceGroupSpec, DiceKind, Roll
from dice_roller.models.preset import NamedRollPreset

logger = logging.getLogger(__name__)


class RandomSource:
    """Uniform die source. Not suitable for anything security related."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next(self, sides: int) -> int:
        if sides < 1:
            raise ValueError(f"Invalid die size: {sides}")
        return self._random.randint(1, sides)


_default_source = RandomSource()


def _now_ms() -> int:
    return int(time.time() * 1000)


def _roll_group(kind: DiceKind, count: int, rng: RandomSource) -> DiceGroupResult:
    results = [rng.next(kind.sides) for _ in range(count)]
    return DiceGroupResult(kind=kind, count=count, results=results)


def _build_roll(
    groups: List[DiceGroupResult],
    modifier: int,
    is_custom: Optional[bool] = None,
    name: Optional[str] = None,
) -> Roll:
    total = sum(group.subtotal for group in groups) + modifier
    return Roll(
        id=uuid.uuid4().hex,
        timestamp=_now_ms(),
        groups=groups,
        modifier=modifier,
        total=total,
        expression=format_expression(groups, modifier),
        name=name,
        is_custom=is_custom,
    )


def roll_single(
    kind: Union[DiceKind, str],
    count: int = 1,
    modifier: int = 0,
    rng: Optional[RandomSource] = None,
) -> Roll:
    """Roll `count` dice of a single kind. Always produces exactly one group."""
    kind = DiceKind(kind)
    group = _roll_group(kind, max(0, count), rng or _default_source)
    return _build_roll([group], modifier)


def roll_multiple(
    specs: Iterable[DiceGroupSpec],
    modifier: int = 0,
    is_custom: bool = False,
    rng: Optional[RandomSource] = None,
    name: Optional[str] = None,
) -> Roll:
    """
    Roll every spec with a positive count, in the order given.

    Specs with count <= 0 are dropped. An empty selection still returns a
    valid roll whose total is just the modifier.
    """
    rng = rng or _default_source
    groups = [
        _roll_group(spec.kind, spec.count, rng) for spec in specs if spec.count > 0
    ]
    if not groups and modifier == 0:
        logger.debug("roll_multiple called with no dice and no modifier")
    return _build_roll(groups, modifier, is_custom=is_custom, name=name)


def reroll(roll: Roll, rng: Optional[RandomSource] = None) -> Roll:
    """Roll the same dice and modifier again as a brand new roll."""
    if len(roll.groups) == 1:
        group = roll.groups[0]
        new_roll = roll_single(group.kind, group.count, roll.modifier, rng=rng)
        return new_roll.model_copy(
            update={"name": roll.name, "is_custom": roll.is_custom}
        )
    return roll_multiple(
        roll.to_specs(),
        roll.modifier,
        is_custom=bool(roll.is_custom),
        rng=rng,
        name=roll.name,
    )


def roll_preset(preset: NamedRollPreset, rng: Optional[RandomSource] = None) -> Roll:
    return roll_multiple(
        preset.dice, preset.modifier, is_custom=False, rng=rng, name=preset.name
    )
