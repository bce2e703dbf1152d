import pytest
from dice_roller.core.dice import (
    RandomSource,
    reroll,
    roll_multiple,
    roll_preset,
    roll_single,
)
from dice_roller.core.formatting import format_expression
from dice_roller.models.dice import DiceGroupSpec, DiceKind
from dice_roller.models.preset import NamedRollPreset


class FixedSource:
    """Returns the given values in order, repeating the last one."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def next(self, sides):
        self.calls.append(sides)
        value = self.values.pop(0) if len(self.values) > 1 else self.values[0]
        return min(value, sides)


@pytest.fixture
def rng():
    return RandomSource(seed=1234)


@pytest.mark.parametrize("kind", list(DiceKind))
@pytest.mark.parametrize("count", [0, 1, 5])
@pytest.mark.parametrize("modifier", [-3, 0, 7])
def test_roll_single_totals_and_ranges(rng, kind, count, modifier):
    roll = roll_single(kind, count, modifier, rng=rng)

    assert len(roll.groups) == 1
    group = roll.groups[0]
    assert group.kind == kind
    assert len(group.results) == count
    assert all(1 <= r <= kind.sides for r in group.results)
    assert roll.total == modifier + sum(group.results)
    assert roll.expression == format_expression(roll.to_specs(), modifier)


def test_roll_single_zero_dice_is_just_the_modifier(rng):
    roll = roll_single(DiceKind.D20, 0, 4, rng=rng)
    assert roll.groups[0].results == []
    assert roll.total == 4


def test_roll_single_clamps_negative_count(rng):
    roll = roll_single(DiceKind.D6, -2, rng=rng)
    assert roll.groups[0].count == 0
    assert roll.total == 0


def test_roll_single_accepts_label_string():
    roll = roll_single("d8", 2, rng=FixedSource(3, 5))
    assert roll.groups[0].kind == DiceKind.D8
    assert roll.groups[0].results == [3, 5]
    assert roll.total == 8
    assert roll.expression == "2d8"


def test_roll_single_rejects_unknown_kind():
    with pytest.raises(ValueError):
        roll_single("d7", 1)


def test_roll_multiple_filters_and_keeps_order():
    specs = [
        DiceGroupSpec(kind=DiceKind.D6, count=2),
        DiceGroupSpec(kind=DiceKind.D20, count=0),
        DiceGroupSpec(kind=DiceKind.D4, count=1),
        DiceGroupSpec(kind=DiceKind.D10, count=-1),
    ]
    roll = roll_multiple(specs, 3, rng=FixedSource(6, 2, 4))

    assert [g.kind for g in roll.groups] == [DiceKind.D6, DiceKind.D4]
    assert roll.groups[0].results == [6, 2]
    assert roll.groups[1].results == [4]
    assert roll.total == 6 + 2 + 4 + 3
    assert roll.expression == "2d6 + 1d4 + 3"
    assert roll.is_custom is False


def test_roll_multiple_total_matches_results(rng):
    specs = [DiceGroupSpec(kind=kind, count=3) for kind in DiceKind]
    roll = roll_multiple(specs, -5, is_custom=True, rng=rng)

    assert roll.total == -5 + sum(sum(g.results) for g in roll.groups)
    assert roll.is_custom is True
    for group in roll.groups:
        assert all(1 <= r <= group.kind.sides for r in group.results)


def test_roll_multiple_with_nothing_to_roll(rng):
    roll = roll_multiple([DiceGroupSpec(kind=DiceKind.D6, count=0)], 2, rng=rng)
    assert roll.groups == []
    assert roll.total == 2
    assert roll.expression == "2"


def test_rolls_get_unique_ids(rng):
    ids = {roll_single(DiceKind.D6, rng=rng).id for _ in range(200)}
    assert len(ids) == 200


def test_timestamp_is_milliseconds(rng):
    roll = roll_single(DiceKind.D6, rng=rng)
    # Anything after 2001 in ms is > 1e12
    assert roll.timestamp > 1_000_000_000_000


def test_random_source_rejects_bad_sides(rng):
    with pytest.raises(ValueError):
        rng.next(0)


def test_random_source_covers_range():
    source = RandomSource(seed=7)
    seen = {source.next(4) for _ in range(500)}
    assert seen == {1, 2, 3, 4}


def test_reroll_single_group_keeps_shape():
    original = roll_single(DiceKind.D12, 2, 1, rng=FixedSource(1))
    again = reroll(original, rng=FixedSource(12))

    assert again.id != original.id
    assert again.expression == original.expression
    assert again.total == 12 + 12 + 1


def test_reroll_multiple_groups_carries_name_and_flag():
    original = roll_multiple(
        [
            DiceGroupSpec(kind=DiceKind.D8, count=1),
            DiceGroupSpec(kind=DiceKind.D6, count=2),
        ],
        -1,
        is_custom=True,
        rng=FixedSource(2),
        name="Flame Blade",
    )
    again = reroll(original, rng=FixedSource(5))

    assert [g.to_spec() for g in again.groups] == original.to_specs()
    assert again.modifier == -1
    assert again.name == "Flame Blade"
    assert again.is_custom is True


def test_roll_preset_names_the_roll():
    preset = NamedRollPreset(
        name="Troll Claw", dice=[DiceGroupSpec(kind=DiceKind.D6, count=1)], modifier=4
    )
    roll = roll_preset(preset, rng=FixedSource(3))

    assert roll.name == "Troll Claw"
    assert roll.is_custom is False
    assert roll.total == 7
    assert roll.expression == "1d6 + 4"
