"""
Spell catalog module for the resolver.

Defines every spell known to the game together with its static data: MP
cost, power, target shape, effect category and, for ailment spells, the
ailment it inflicts.
"""

from typing import Any

from core.constants import Ailment, NiceEnum, SpellEffect, TargetShape
from pydantic import BaseModel, Field


class SpellKind(NiceEnum):
    """Identifies a spell."""

    FIRE1 = "FIRE1"
    FIRE2 = "FIRE2"
    BLAZE1 = "BLAZE1"
    BLAZE2 = "BLAZE2"
    HEAL1 = "HEAL1"
    HEAL2 = "HEAL2"
    HEALALL1 = "HEALALL1"
    HEALALL2 = "HEALALL2"
    SHIELD1 = "SHIELD1"
    SHIELD2 = "SHIELD2"
    BARRIER1 = "BARRIER1"
    BARRIER2 = "BARRIER2"
    BOOST1 = "BOOST1"
    BOOST2 = "BOOST2"
    RALLY1 = "RALLY1"
    RALLY2 = "RALLY2"
    DRAIN1 = "DRAIN1"
    DRAIN2 = "DRAIN2"
    SIPHON1 = "SIPHON1"
    SIPHON2 = "SIPHON2"
    SLEEP1 = "SLEEP1"
    SLEEPALL1 = "SLEEPALL1"
    POISON1 = "POISON1"
    POISONALL1 = "POISONALL1"

    @property
    def data(self) -> "SpellData":
        return SPELL_TABLE[self]

    @property
    def mp_cost(self) -> int:
        return self.data.mp_cost

    @property
    def power(self) -> int:
        return self.data.power

    @property
    def target_shape(self) -> TargetShape:
        return self.data.target_shape

    @property
    def effect(self) -> SpellEffect:
        return self.data.effect

    @property
    def ailment(self) -> Ailment | None:
        return self.data.ailment

    def is_offensive(self) -> bool:
        """Checks if the spell is aimed at the caster's opponents."""
        return self.target_shape.is_offensive()

    def is_usable_in_field(self) -> bool:
        """Only healing spells can be cast outside of battle."""
        return self.effect == SpellEffect.HEAL

    def is_ailment(self) -> bool:
        return self.effect == SpellEffect.AILMENT


class SpellData(BaseModel):
    """Static data describing how a spell resolves."""

    mp_cost: int = Field(ge=0, description="MP spent to cast the spell.")
    power: int = Field(
        ge=0,
        description=(
            "Strength of the spell. For ailment spells this is the success "
            "rate, between 0 and 100."
        ),
    )
    target_shape: TargetShape = Field(description="Who the spell lands on.")
    effect: SpellEffect = Field(description="What the spell does to its targets.")
    ailment: Ailment | None = Field(
        default=None,
        description="The ailment inflicted, only for ailment spells.",
    )

    def model_post_init(self, _: Any) -> None:
        if (self.effect == SpellEffect.AILMENT) != (self.ailment is not None):
            raise ValueError("Only ailment spells must declare an ailment.")
        if self.effect == SpellEffect.AILMENT and self.power > 100:
            raise ValueError("Ailment success rate must be between 0 and 100.")


def _spell(
    mp_cost: int,
    power: int,
    target_shape: TargetShape,
    effect: SpellEffect,
    ailment: Ailment | None = None,
) -> SpellData:
    return SpellData(
        mp_cost=mp_cost,
        power=power,
        target_shape=target_shape,
        effect=effect,
        ailment=ailment,
    )


SPELL_TABLE: dict[SpellKind, SpellData] = {
    # Damage.
    SpellKind.FIRE1: _spell(3, 12, TargetShape.SINGLE_ENEMY, SpellEffect.DAMAGE),
    SpellKind.FIRE2: _spell(7, 25, TargetShape.SINGLE_ENEMY, SpellEffect.DAMAGE),
    SpellKind.BLAZE1: _spell(5, 8, TargetShape.ALL_ENEMIES, SpellEffect.DAMAGE),
    SpellKind.BLAZE2: _spell(10, 18, TargetShape.ALL_ENEMIES, SpellEffect.DAMAGE),
    # Healing.
    SpellKind.HEAL1: _spell(3, 15, TargetShape.SINGLE_ALLY, SpellEffect.HEAL),
    SpellKind.HEAL2: _spell(7, 40, TargetShape.SINGLE_ALLY, SpellEffect.HEAL),
    SpellKind.HEALALL1: _spell(6, 10, TargetShape.ALL_ALLIES, SpellEffect.HEAL),
    SpellKind.HEALALL2: _spell(12, 25, TargetShape.ALL_ALLIES, SpellEffect.HEAL),
    # Defense buffs.
    SpellKind.SHIELD1: _spell(3, 10, TargetShape.SINGLE_ALLY, SpellEffect.DEFENSE_BUFF),
    SpellKind.SHIELD2: _spell(6, 20, TargetShape.SINGLE_ALLY, SpellEffect.DEFENSE_BUFF),
    SpellKind.BARRIER1: _spell(6, 6, TargetShape.ALL_ALLIES, SpellEffect.DEFENSE_BUFF),
    SpellKind.BARRIER2: _spell(10, 12, TargetShape.ALL_ALLIES, SpellEffect.DEFENSE_BUFF),
    # Attack buffs.
    SpellKind.BOOST1: _spell(3, 3, TargetShape.SINGLE_ALLY, SpellEffect.ATTACK_BUFF),
    SpellKind.BOOST2: _spell(6, 6, TargetShape.SINGLE_ALLY, SpellEffect.ATTACK_BUFF),
    SpellKind.RALLY1: _spell(6, 2, TargetShape.ALL_ALLIES, SpellEffect.ATTACK_BUFF),
    SpellKind.RALLY2: _spell(10, 4, TargetShape.ALL_ALLIES, SpellEffect.ATTACK_BUFF),
    # MP drain.
    SpellKind.DRAIN1: _spell(4, 8, TargetShape.SINGLE_ENEMY, SpellEffect.MP_DRAIN),
    SpellKind.DRAIN2: _spell(8, 18, TargetShape.SINGLE_ENEMY, SpellEffect.MP_DRAIN),
    SpellKind.SIPHON1: _spell(6, 5, TargetShape.ALL_ENEMIES, SpellEffect.MP_DRAIN),
    SpellKind.SIPHON2: _spell(10, 12, TargetShape.ALL_ENEMIES, SpellEffect.MP_DRAIN),
    # Ailments, power is the success rate.
    SpellKind.SLEEP1: _spell(
        4, 70, TargetShape.SINGLE_ENEMY, SpellEffect.AILMENT, Ailment.SLEEP
    ),
    SpellKind.SLEEPALL1: _spell(
        8, 50, TargetShape.ALL_ENEMIES, SpellEffect.AILMENT, Ailment.SLEEP
    ),
    SpellKind.POISON1: _spell(
        3, 80, TargetShape.SINGLE_ENEMY, SpellEffect.AILMENT, Ailment.POISON
    ),
    SpellKind.POISONALL1: _spell(
        6, 60, TargetShape.ALL_ENEMIES, SpellEffect.AILMENT, Ailment.POISON
    ),
}


def all_spells() -> list[SpellKind]:
    """Returns every spell, in catalog order."""
    return list(SpellKind)
