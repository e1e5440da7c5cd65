"""
Random factor bundle for the resolver.

The resolver never draws random numbers itself. Every value a turn consumes
is generated beforehand by the caller and handed over in a
`TurnRandomFactors` bundle, which makes a turn a pure function of the battle
state, the commands and the bundle.
"""

import random
from typing import Annotated

from core.constants import DAMAGE_RANDOM_MAX, DAMAGE_RANDOM_MIN
from pydantic import BaseModel, Field

DamageRandom = Annotated[float, Field(ge=DAMAGE_RANDOM_MIN, le=DAMAGE_RANDOM_MAX)]
UnitRandom = Annotated[float, Field(ge=0.0, le=1.0)]


class TurnRandomFactors(BaseModel):
    """
    Pre-generated random values for one turn.

    Attributes:
        damage_randoms (list[float]):
            One factor per acting slot, in [0.8, 1.2]. On a failed flee the
            living enemies take one factor each, in roster order.
        flee_random (float):
            Compared against the flee threshold, in [0, 1].
        spell_randoms (list[float]):
            One value per enemy roster position, in [0, 1], deciding whether
            the enemy tries to cast.
        ailment_randoms (list[float] | None):
            Optional per-slot values in [0, 1] for ailment rolls.

    """

    damage_randoms: list[DamageRandom] = Field(
        default_factory=list,
        description="Per-slot damage factors, in [0.8, 1.2].",
    )
    flee_random: UnitRandom = Field(
        default=1.0,
        description="Random value for the flee check, in [0, 1].",
    )
    spell_randoms: list[UnitRandom] = Field(
        default_factory=list,
        description="Per-enemy random values deciding spell use, in [0, 1].",
    )
    ailment_randoms: list[UnitRandom] | None = Field(
        default=None,
        description=(
            "Per-slot ailment rolls, in [0, 1]. When omitted the slot's damage "
            "factor is rescaled from [0.8, 1.2] to [0, 1]."
        ),
    )

    def ailment_random(self, slot: int) -> float:
        """
        Returns the ailment roll of a slot.

        Args:
            slot (int): The slot index.

        Returns:
            float: A value in [0, 1].

        """
        if self.ailment_randoms is not None:
            return self.ailment_randoms[slot]
        span = DAMAGE_RANDOM_MAX - DAMAGE_RANDOM_MIN
        return (self.damage_randoms[slot] - DAMAGE_RANDOM_MIN) / span

    @classmethod
    def roll(
        cls,
        party_size: int,
        enemy_count: int,
        rng: random.Random,
    ) -> "TurnRandomFactors":
        """
        Draws a bundle large enough for any turn of the given rosters.

        Args:
            party_size (int): Number of party members.
            enemy_count (int): Number of enemies.
            rng (random.Random): The generator to draw from.

        Returns:
            TurnRandomFactors: The drawn bundle.

        """
        slots = party_size + enemy_count
        return cls(
            damage_randoms=[
                rng.uniform(DAMAGE_RANDOM_MIN, DAMAGE_RANDOM_MAX) for _ in range(slots)
            ],
            flee_random=rng.random(),
            spell_randoms=[rng.random() for _ in range(enemy_count)],
            ailment_randoms=[rng.random() for _ in range(slots)],
        )
