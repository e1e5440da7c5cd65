"""
Enemy module for the resolver.

Defines the enemy kinds with their base stats, spell tables and rewards, the
tier scaling applied to deeper encounters, and the generator that builds an
encounter group from two random values.
"""

from actions.spells.base_spell import SpellKind
from core.constants import NiceEnum
from pydantic import BaseModel, Field

from .character_stats import CombatStats

# Stats added per tier above the first. Linear and additive so that the
# scaled values stay predictable.
HP_PER_TIER = 6
ATTACK_PER_TIER = 2
DEFENSE_PER_TIER = 1
SPEED_PER_TIER = 1
# Only granted to kinds that have a spell table.
MP_PER_TIER = 3


class EnemyData(BaseModel):
    """Static data describing an enemy kind at tier 1."""

    base_stats: CombatStats = Field(description="Stats at tier 1.")
    exp_reward: int = Field(ge=0, description="Experience granted when defeated.")
    gold_reward: int = Field(ge=0, description="Gold granted when defeated.")
    spells: list[SpellKind] = Field(
        default_factory=list,
        description="Spells the enemy may cast, in priority order.",
    )


class EnemyKind(NiceEnum):
    """Identifies an enemy."""

    SLIME = "SLIME"
    BAT = "BAT"
    GOBLIN = "GOBLIN"
    WOLF = "WOLF"
    GHOST = "GHOST"
    DARK_LORD = "DARK_LORD"

    @property
    def data(self) -> EnemyData:
        return ENEMY_TABLE[self]

    @property
    def exp_reward(self) -> int:
        return self.data.exp_reward

    @property
    def gold_reward(self) -> int:
        return self.data.gold_reward

    def spells(self) -> list[SpellKind]:
        """The spell table of the kind, in priority order."""
        return list(self.data.spells)


ENEMY_TABLE: dict[EnemyKind, EnemyData] = {
    EnemyKind.SLIME: EnemyData(
        base_stats=CombatStats.new(10, 3, 1, 3, 0),
        exp_reward=3,
        gold_reward=2,
    ),
    EnemyKind.BAT: EnemyData(
        base_stats=CombatStats.new(8, 4, 0, 6, 0),
        exp_reward=4,
        gold_reward=3,
    ),
    EnemyKind.GOBLIN: EnemyData(
        base_stats=CombatStats.new(15, 5, 2, 3, 0),
        exp_reward=6,
        gold_reward=5,
        spells=[SpellKind.BOOST1],
    ),
    EnemyKind.WOLF: EnemyData(
        base_stats=CombatStats.new(12, 7, 1, 5, 0),
        exp_reward=8,
        gold_reward=6,
    ),
    EnemyKind.GHOST: EnemyData(
        base_stats=CombatStats.new(20, 4, 3, 2, 8),
        exp_reward=10,
        gold_reward=8,
        spells=[SpellKind.SLEEP1, SpellKind.DRAIN1],
    ),
    EnemyKind.DARK_LORD: EnemyData(
        base_stats=CombatStats.new(200, 25, 15, 8, 50),
        exp_reward=100,
        gold_reward=0,
        spells=[SpellKind.BLAZE2, SpellKind.HEAL2, SpellKind.POISONALL1],
    ),
}

# Kinds that appear in random encounters, in generator order.
ENCOUNTER_KINDS: list[EnemyKind] = [
    EnemyKind.SLIME,
    EnemyKind.BAT,
    EnemyKind.GOBLIN,
    EnemyKind.WOLF,
    EnemyKind.GHOST,
]


def scale_enemy_stats(kind: EnemyKind, tier: int) -> CombatStats:
    """
    Computes the fully restored stats of an enemy at a tier.

    Args:
        kind (EnemyKind): The enemy kind.
        tier (int): The encounter tier, 1 for the base stats.

    Returns:
        CombatStats: The scaled stats.

    """
    base = kind.data.base_stats
    extra = max(0, tier - 1)
    max_mp = base.max_mp + (MP_PER_TIER * extra if kind.spells() else 0)
    return CombatStats.new(
        max_hp=base.max_hp + HP_PER_TIER * extra,
        attack=base.attack + ATTACK_PER_TIER * extra,
        defense=base.defense + DEFENSE_PER_TIER * extra,
        speed=base.speed + SPEED_PER_TIER * extra,
        max_mp=max_mp,
    )


class Enemy(BaseModel):
    """
    An enemy in an encounter.

    Attributes:
        kind (EnemyKind): The enemy kind.
        tier (int): The encounter tier the stats and rewards were scaled to.
        stats (CombatStats): The current combat stats.

    """

    kind: EnemyKind = Field(description="The enemy kind.")
    tier: int = Field(default=1, ge=1, description="The encounter tier.")
    stats: CombatStats = Field(description="The current combat stats.")

    @classmethod
    def from_kind(cls, kind: EnemyKind, tier: int = 1) -> "Enemy":
        return cls(kind=kind, tier=tier, stats=scale_enemy_stats(kind, tier))

    @property
    def name(self) -> str:
        return self.kind.display_name

    def is_alive(self) -> bool:
        return self.stats.is_alive()

    def exp_reward(self) -> int:
        return self.kind.exp_reward * self.tier

    def gold_reward(self) -> int:
        return self.kind.gold_reward * self.tier


def generate_enemy_group(
    count_random: float,
    kind_random: float,
    tier: int = 1,
) -> list[Enemy]:
    """
    Builds a random encounter of one to four enemies of the same kind.

    Args:
        count_random (float):
            Random value in [0, 1) selecting the group size.
        kind_random (float):
            Random value in [0, 1) selecting the enemy kind.
        tier (int):
            The encounter tier. Defaults to 1.

    Returns:
        list[Enemy]: The generated group.

    """
    if count_random < 0.3:
        count = 1
    elif count_random < 0.6:
        count = 2
    elif count_random < 0.85:
        count = 3
    else:
        count = 4
    index = min(int(kind_random * len(ENCOUNTER_KINDS)), len(ENCOUNTER_KINDS) - 1)
    kind = ENCOUNTER_KINDS[index]
    return [Enemy.from_kind(kind, tier) for _ in range(count)]
