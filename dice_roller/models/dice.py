"""
Dice models: die kinds, requested dice groups, and produced rolls.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiceKind(str, Enum):
    """A die shape. The value is the display label, e.g. 'd6'."""

    D4 = "d4"
    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"
    D20 = "d20"
    D100 = "d100"

    @property
    def sides(self) -> int:
        return DICE_SIDES[self]


DICE_SIDES = {
    DiceKind.D4: 4,
    DiceKind.D6: 6,
    DiceKind.D8: 8,
    DiceKind.D10: 10,
    DiceKind.D12: 12,
    DiceKind.D20: 20,
    DiceKind.D100: 100,
}


class DiceGroupSpec(BaseModel):
    """A request to roll `count` dice of one kind."""

    kind: DiceKind = Field(..., description="Die shape to roll.")
    count: int = Field(0, description="Number of dice. Negative values clamp to 0.")

    @field_validator("count")
    @classmethod
    def clamp_count(cls, v: int) -> int:
        return max(0, v)


class DiceGroupResult(BaseModel):
    """The rolled values for one dice group. Immutable once produced."""

    model_config = ConfigDict(frozen=True)

    kind: DiceKind
    count: int
    results: List[int] = Field(default_factory=list)

    @property
    def subtotal(self) -> int:
        return sum(self.results)

    def to_spec(self) -> DiceGroupSpec:
        return DiceGroupSpec(kind=self.kind, count=self.count)


class Roll(BaseModel):
    """
    A completed roll as shown in history.

    `total` is always `modifier` plus every die in `groups`, and `expression`
    is the formatter's rendering of the groups and modifier.
    """

    id: str
    timestamp: int = Field(..., description="Milliseconds since the epoch.")
    groups: List[DiceGroupResult] = Field(default_factory=list)
    modifier: int = 0
    total: int
    expression: str
    name: Optional[str] = Field(
        None, description="Preset name when the roll came from a named preset."
    )
    is_custom: Optional[bool] = Field(
        None, description="True when the dice/modifier match no catalog entry."
    )

    def to_specs(self) -> List[DiceGroupSpec]:
        return [group.to_spec() for group in self.groups]
