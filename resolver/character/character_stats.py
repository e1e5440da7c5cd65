"""
Character stats module for the resolver.

Holds the numeric combat attributes shared by party members and enemies,
along with the clamped primitives that mutate them during a battle.
"""

from typing import Any

from pydantic import BaseModel, Field


class StatGrowth(BaseModel):
    """The amount every statistic grows when a party member levels up."""

    hp: int = Field(default=0, ge=0, description="Maximum HP gained.")
    mp: int = Field(default=0, ge=0, description="Maximum MP gained.")
    attack: int = Field(default=0, ge=0, description="Attack gained.")
    defense: int = Field(default=0, ge=0, description="Defense gained.")
    speed: int = Field(default=0, ge=0, description="Speed gained.")


class CombatStats(BaseModel):
    """
    Numeric combat attributes of a single combatant.

    Liveness is derived from the current HP, there is no separate flag for
    defeated combatants.

    Attributes:
        hp (int): Current hit points, between 0 and max_hp.
        max_hp (int): Maximum hit points.
        mp (int): Current magic points, between 0 and max_mp.
        max_mp (int): Maximum magic points.
        attack (int): Base attack, before equipment and buffs.
        defense (int): Base defense, before buffs.
        speed (int): Speed, used to order actors within a turn.

    """

    hp: int = Field(ge=0, description="Current hit points.")
    max_hp: int = Field(ge=0, description="Maximum hit points.")
    mp: int = Field(ge=0, description="Current magic points.")
    max_mp: int = Field(ge=0, description="Maximum magic points.")
    attack: int = Field(ge=0, description="Base attack.")
    defense: int = Field(ge=0, description="Base defense.")
    speed: int = Field(ge=0, description="Speed used for the action order.")

    def model_post_init(self, _: Any) -> None:
        if self.hp > self.max_hp:
            raise ValueError(f"hp ({self.hp}) cannot exceed max_hp ({self.max_hp})")
        if self.mp > self.max_mp:
            raise ValueError(f"mp ({self.mp}) cannot exceed max_mp ({self.max_mp})")

    @classmethod
    def new(
        cls,
        max_hp: int,
        attack: int,
        defense: int,
        speed: int,
        max_mp: int,
    ) -> "CombatStats":
        """
        Creates a fully restored set of stats.

        Args:
            max_hp (int): Maximum hit points.
            attack (int): Base attack.
            defense (int): Base defense.
            speed (int): Speed.
            max_mp (int): Maximum magic points.

        Returns:
            CombatStats: Stats with HP and MP at their maximum.

        """
        return cls(
            hp=max_hp,
            max_hp=max_hp,
            mp=max_mp,
            max_mp=max_mp,
            attack=attack,
            defense=defense,
            speed=speed,
        )

    def is_alive(self) -> bool:
        return self.hp > 0

    def take_damage(self, amount: int) -> None:
        """Removes HP, never going below zero."""
        self.hp = max(self.hp - amount, 0)

    def heal(self, amount: int) -> None:
        """Restores HP, never going above the maximum."""
        self.hp = min(self.hp + amount, self.max_hp)

    def use_mp(self, cost: int) -> bool:
        """
        Spends MP if enough is available.

        Args:
            cost (int): The MP to spend.

        Returns:
            bool:
                True if the MP was spent, False if the pool was too small, in
                which case nothing changes.

        """
        if self.mp < cost:
            return False
        self.mp -= cost
        return True

    def drain_mp(self, amount: int) -> None:
        """Removes MP unconditionally, never going below zero."""
        self.mp = max(self.mp - amount, 0)

    def apply_growth(self, growth: StatGrowth) -> None:
        """
        Applies a level-up growth and fully restores HP and MP.

        Args:
            growth (StatGrowth): The growth to apply.

        """
        self.max_hp += growth.hp
        self.hp = self.max_hp
        self.max_mp += growth.mp
        self.mp = self.max_mp
        self.attack += growth.attack
        self.defense += growth.defense
        self.speed += growth.speed
