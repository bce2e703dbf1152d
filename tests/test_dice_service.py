import asyncio

import pytest
from dice_roller.core.dice import RandomSource
from dice_roller.database.roll_store import RollStore
from dice_roller.data.common_rolls import get_category
from dice_roller.models.dice import DiceGroupSpec, DiceKind
from dice_roller.services.dice_service import DiceService
from dice_roller.services.history_service import RollHistory
from dice_roller.services.named_roll_service import NamedRollStore
from dice_roller.storage.key_value_store import MemoryKeyValueStore


class ListRollStore(RollStore):
    def __init__(self):
        self.rolls = []

    async def init(self):
        pass

    async def add_roll(self, roll):
        self.rolls.insert(0, roll)

    async def get_all_rolls(self):
        return list(self.rolls)

    async def clear_all_rolls(self):
        self.rolls = []


@pytest.fixture
def service():
    kv = MemoryKeyValueStore()
    history = RollHistory(ListRollStore(), kv)
    asyncio.run(history.initialize())
    return DiceService(history, NamedRollStore(kv), rng=RandomSource(seed=42))


def spec(kind, count):
    return DiceGroupSpec(kind=kind, count=count)


def test_quick_roll_goes_to_history(service):
    roll = asyncio.run(service.quick_roll(DiceKind.D20))
    assert service.rolls == [roll]
    assert roll.expression == "1d20"


def test_roll_selection_tags_predefined_and_custom(service):
    greatsword = asyncio.run(service.roll_selection([spec(DiceKind.D6, 2)], 0))
    odd = asyncio.run(service.roll_selection([spec(DiceKind.D6, 2)], 1))

    assert greatsword.is_custom is False
    assert odd.is_custom is True
    assert service.rolls == [odd, greatsword]


def test_roll_selection_ignores_inactive_dice(service):
    assert asyncio.run(service.roll_selection([spec(DiceKind.D6, 0)], 3)) is None
    assert service.rolls == []

    roll = asyncio.run(
        service.roll_selection([spec(DiceKind.D4, 0), spec(DiceKind.D8, 1)], 0)
    )
    assert [g.kind for g in roll.groups] == [DiceKind.D8]


def test_saved_preset_makes_roll_predefined(service):
    custom = asyncio.run(
        service.roll_selection([spec(DiceKind.D10, 2), spec(DiceKind.D4, 1)], 2)
    )
    assert custom.is_custom is True

    saved = service.save_as_preset(custom, "  Spirit Guardians  ", "WIS save")
    assert saved.name == "Spirit Guardians"
    assert saved.dice == [spec(DiceKind.D10, 2), spec(DiceKind.D4, 1)]
    assert saved.modifier == 2

    again = asyncio.run(
        service.roll_selection([spec(DiceKind.D4, 1), spec(DiceKind.D10, 2)], 2)
    )
    assert again.is_custom is False

    assert service.delete_preset("Spirit Guardians")
    assert service.named_rolls.list() == []


def test_save_as_preset_requires_name(service):
    roll = asyncio.run(service.quick_roll(DiceKind.D6))
    assert service.save_as_preset(roll, "   ") is None
    assert service.named_rolls.list() == []


def test_roll_preset_and_reroll(service):
    fireball = get_category("Spells").rolls[0]
    roll = asyncio.run(service.roll_preset(fireball))
    again = asyncio.run(service.reroll(roll))

    assert roll.name == "Fireball (3rd)"
    assert again.name == "Fireball (3rd)"
    assert again.id != roll.id
    assert again.expression == "8d6"
    assert service.rolls == [again, roll]


def test_clear_history(service):
    asyncio.run(service.quick_roll(DiceKind.D4))
    asyncio.run(service.clear_history())
    assert service.rolls == []
