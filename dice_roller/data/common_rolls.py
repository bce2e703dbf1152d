"""
Common Rolls
============
Built-in D&D 5e presets grouped by category. Read-only at runtime.
"""

from typing import Iterator, List, Optional, Tuple

from dice_roller.models.dice import DiceGroupSpec, DiceKind
from dice_roller.models.preset import NamedRollPreset, RollCategory

D4, D6, D8, D10, D12 = DiceKind.D4, DiceKind.D6, DiceKind.D8, DiceKind.D10, DiceKind.D12


def _preset(
    name: str,
    dice: List[Tuple[DiceKind, int]],
    modifier: int = 0,
    description: Optional[str] = None,
) -> NamedRollPreset:
    return NamedRollPreset(
        name=name,
        dice=[DiceGroupSpec(kind=kind, count=count) for kind, count in dice],
        modifier=modifier,
        description=description,
    )


# =============================================================================
# CATALOG
# =============================================================================

COMMON_ROLLS: Tuple[RollCategory, ...] = (
    RollCategory(
        name="Weapons",
        rolls=[
            _preset("Dagger", [(D4, 1)]),
            _preset("Shortsword", [(D6, 1)]),
            _preset("Longsword", [(D8, 1)]),
            _preset("Greatsword", [(D6, 2)]),
            _preset("Rapier", [(D8, 1)]),
            _preset("Greataxe", [(D12, 1)]),
            _preset("Light Crossbow", [(D8, 1)]),
            _preset("Heavy Crossbow", [(D10, 1)]),
            _preset("Longbow", [(D8, 1)]),
            _preset("Maul", [(D6, 2)]),
        ],
    ),
    RollCategory(
        name="Spells",
        rolls=[
            _preset("Fireball (3rd)", [(D6, 8)], description="DEX save for half"),
            _preset("Lightning Bolt (3rd)", [(D6, 8)], description="DEX save for half"),
            _preset(
                "Magic Missile (1st)",
                [(D4, 3)],
                modifier=3,
                description="3 missiles, 1d4+1 each",
            ),
            _preset("Scorching Ray (2nd)", [(D6, 2)], description="Per ray (3 rays)"),
            _preset("Eldritch Blast", [(D10, 1)], description="Per beam"),
            _preset("Guiding Bolt (1st)", [(D6, 4)]),
            _preset("Inflict Wounds (1st)", [(D10, 3)]),
            _preset("Spiritual Weapon (2nd)", [(D8, 1)]),
            _preset("Disintegrate (6th)", [(D6, 10)], modifier=40),
        ],
    ),
    RollCategory(
        name="Healing Spells",
        rolls=[
            _preset("Cure Wounds (1st)", [(D8, 1)], description="+spell mod"),
            _preset("Cure Wounds (2nd)", [(D8, 2)], description="+spell mod"),
            _preset("Cure Wounds (3rd)", [(D8, 3)], description="+spell mod"),
            _preset("Healing Word (1st)", [(D4, 1)], description="+spell mod"),
            _preset("Healing Word (2nd)", [(D4, 2)], description="+spell mod"),
            _preset("Heal (6th)", [(D8, 7)]),
            _preset("Mass Cure Wounds (5th)", [(D8, 3)], description="+spell mod each"),
        ],
    ),
    RollCategory(
        name="Class Features",
        rolls=[
            _preset("Sneak Attack (1st-2nd)", [(D6, 1)]),
            _preset("Sneak Attack (3rd-4th)", [(D6, 2)]),
            _preset("Sneak Attack (5th-6th)", [(D6, 3)]),
            _preset("Sneak Attack (7th-8th)", [(D6, 4)]),
            _preset("Divine Smite (1st)", [(D8, 2)], description="+1d8 vs undead/fiend"),
            _preset("Divine Smite (2nd)", [(D8, 3)], description="+1d8 vs undead/fiend"),
            _preset("Divine Smite (3rd)", [(D8, 4)], description="+1d8 vs undead/fiend"),
            _preset("Rage Damage (+2)", [], modifier=2),
            _preset("Bardic Inspiration (d6)", [(D6, 1)]),
            _preset("Bardic Inspiration (d8)", [(D8, 1)]),
        ],
    ),
    RollCategory(
        name="Monster Abilities",
        rolls=[
            _preset("Bite (Medium Beast)", [(D6, 1)]),
            _preset("Bite (Large Beast)", [(D8, 1)]),
            _preset("Claw Attack", [(D4, 1)]),
            _preset("Young Dragon Breath", [(D6, 8)], description="DEX save for half"),
            _preset("Adult Dragon Breath", [(D6, 12)], description="DEX save for half"),
            _preset("Troll Claw", [(D6, 1)], modifier=4),
            _preset("Owlbear Claw", [(D8, 2)]),
            _preset("Giant Slam", [(D6, 3)]),
        ],
    ),
)


def iter_common_rolls() -> Iterator[NamedRollPreset]:
    """All built-in presets, category by category."""
    for category in COMMON_ROLLS:
        yield from category.rolls


def get_category(name: str) -> Optional[RollCategory]:
    for category in COMMON_ROLLS:
        if category.name == name:
            return category
    return None
