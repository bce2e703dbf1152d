"""
Predefined-roll matching.

A candidate (dice specs + modifier) matches a catalog entry when:
  1. the modifiers are equal,
  2. both dice lists have the same length,
  3. every candidate spec finds at least one entry die with the same kind
     and count.

Rule 3 is an existence check per candidate spec, not a one-to-one pairing,
so a single entry die may satisfy several identical candidate specs.
Catalogs are small; this is a plain linear scan in catalog order.
"""

from typing import Iterable, Optional, Sequence

from dice_roller.models.dice import DiceGroupSpec
from dice_roller.models.preset import NamedRollPreset


def matches_preset(
    specs: Sequence[DiceGroupSpec], modifier: int, preset: NamedRollPreset
) -> bool:
    if preset.modifier != modifier:
        return False
    if len(preset.dice) != len(specs):
        return False
    return all(
        any(die.kind == spec.kind and die.count == spec.count for die in preset.dice)
        for spec in specs
    )


def find_matching_preset(
    specs: Sequence[DiceGroupSpec],
    modifier: int,
    catalogs: Iterable[Iterable[NamedRollPreset]],
) -> Optional[NamedRollPreset]:
    """First matching entry across `catalogs`, searched in the order given."""
    specs = list(specs)
    for catalog in catalogs:
        for preset in catalog:
            if matches_preset(specs, modifier, preset):
                return preset
    return None


def is_predefined(
    specs: Sequence[DiceGroupSpec],
    modifier: int,
    catalogs: Iterable[Iterable[NamedRollPreset]],
) -> bool:
    return find_matching_preset(specs, modifier, catalogs) is not None
