"""
Session-level entry point used by the GUI.

Bundles one randomness source, the roll history and the user preset store,
and tags each roll as custom or predefined before it reaches history.
"""

import logging
from typing import Iterable, List, Optional

from dice_roller.core.dice import (
    RandomSource,
    reroll,
    roll_multiple,
    roll_preset,
    roll_single,
)
from dice_roller.core.matcher import is_predefined
from dice_roller.data.common_rolls import iter_common_rolls
from dice_roller.models.dice import DiceGroupSpec, DiceKind, Roll
from dice_roller.models.preset import NamedRollPreset
from dice_roller.services.history_service import RollHistory
from dice_roller.services.named_roll_service import NamedRollStore

logger = logging.getLogger(__name__)


class DiceService:
    def __init__(
        self,
        history: RollHistory,
        named_rolls: NamedRollStore,
        rng: Optional[RandomSource] = None,
    ):
        self.history = history
        self.named_rolls = named_rolls
        self.rng = rng or RandomSource()

    @property
    def rolls(self) -> List[Roll]:
        return self.history.rolls

    def catalogs(self) -> List[List[NamedRollPreset]]:
        """Static catalog first, then the user's presets."""
        return [list(iter_common_rolls()), self.named_rolls.list()]

    def is_predefined(self, specs: Iterable[DiceGroupSpec], modifier: int) -> bool:
        return is_predefined(list(specs), modifier, self.catalogs())

    async def quick_roll(
        self, kind: DiceKind, count: int = 1, modifier: int = 0
    ) -> Roll:
        roll = roll_single(kind, count, modifier, rng=self.rng)
        await self.history.add(roll)
        return roll

    async def roll_selection(
        self, specs: Iterable[DiceGroupSpec], modifier: int = 0
    ) -> Optional[Roll]:
        """Roll the active dice of a picker. Nothing happens if no dice are chosen."""
        active = [spec for spec in specs if spec.count > 0]
        if not active:
            return None
        is_custom = not self.is_predefined(active, modifier)
        roll = roll_multiple(active, modifier, is_custom=is_custom, rng=self.rng)
        await self.history.add(roll)
        return roll

    async def roll_preset(self, preset: NamedRollPreset) -> Roll:
        roll = roll_preset(preset, rng=self.rng)
        await self.history.add(roll)
        return roll

    async def reroll(self, roll: Roll) -> Roll:
        new_roll = reroll(roll, rng=self.rng)
        await self.history.add(new_roll)
        return new_roll

    async def clear_history(self):
        await self.history.clear()

    def save_as_preset(
        self, roll: Roll, name: str, description: Optional[str] = None
    ) -> Optional[NamedRollPreset]:
        name = name.strip()
        if not name:
            logger.warning("Refusing to save a preset without a name")
            return None
        preset = NamedRollPreset(
            name=name,
            dice=roll.to_specs(),
            modifier=roll.modifier,
            description=description or None,
        )
        if not self.named_rolls.save(preset):
            return None
        return preset

    def delete_preset(self, name: str) -> bool:
        return self.named_rolls.delete(name)
