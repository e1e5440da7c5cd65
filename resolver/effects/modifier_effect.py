"""
Modifier effect module for the resolver.

Defines the timed stat buffs (attack-up, defense-up) applied by support
spells, and how they count down at the end of each turn.
"""

from typing import Any

from core.constants import BUFF_DURATION, BuffStat
from pydantic import BaseModel, Field


class BuffState(BaseModel):
    """
    A timed bonus to one statistic.

    A buff is never stacked: applying a new one of the same stat replaces the
    old one and restarts its duration.
    """

    stat: BuffStat = Field(description="The statistic raised by the buff.")
    amount: int = Field(ge=0, description="The bonus added to the statistic.")
    remaining_turns: int = Field(
        default=BUFF_DURATION,
        ge=0,
        description="Number of turn-end decays left before the buff expires.",
    )
    fresh: bool = Field(
        default=True,
        description="True during the turn the buff was applied, which does not decay it.",
    )

    def model_post_init(self, _: Any) -> None:
        if self.remaining_turns == 0:
            raise ValueError("A buff must last at least one turn.")

    def turn_update(self) -> bool:
        """
        Counts the buff down by one turn.

        Returns:
            bool:
                True if the buff has expired and must be removed.

        """
        if self.fresh:
            self.fresh = False
            return False
        self.remaining_turns -= 1
        return self.remaining_turns <= 0

    def __str__(self) -> str:
        return f"{self.stat.display_name} +{self.amount} ({self.remaining_turns} turns)"
