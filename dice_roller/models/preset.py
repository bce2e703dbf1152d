from typing import List, Optional
from pydantic import BaseModel, Field

from dice_roller.models.dice import DiceGroupSpec


class NamedRollPreset(BaseModel):
    """A named dice combination, either built-in or saved by the user."""

    name: str = Field(..., description="Display name, e.g. 'Longsword'.")
    dice: List[DiceGroupSpec] = Field(default_factory=list)
    modifier: int = 0
    description: Optional[str] = Field(
        None, description="Short rules reminder shown next to the name."
    )


class RollCategory(BaseModel):
    name: str
    rolls: List[NamedRollPreset] = Field(default_factory=list)
