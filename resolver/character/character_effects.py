"""
Character effects module for the resolver.

Tracks the transient status of a single combatant during a battle: the
attack-up and defense-up buffs and the sleep and poison ailments.
"""

from core.constants import Ailment, BuffStat
from core.logging import log_debug
from effects.modifier_effect import BuffState
from pydantic import BaseModel, Field


class CharacterEffects(BaseModel):
    """
    Buffs and ailments of one combatant.

    Attributes:
        buffs (dict[BuffStat, BuffState]):
            The active buff for each statistic.
        ailments (set[Ailment]):
            The ailments currently afflicting the combatant.

    """

    buffs: dict[BuffStat, BuffState] = Field(
        default_factory=dict,
        description="The active buff for each statistic.",
    )
    ailments: set[Ailment] = Field(
        default_factory=set,
        description="The ailments currently afflicting the combatant.",
    )

    # === Buffs ===

    def apply_buff(self, stat: BuffStat, amount: int) -> None:
        """
        Applies a buff, replacing any buff on the same statistic.

        Args:
            stat (BuffStat):
                The statistic to raise.
            amount (int):
                The bonus to grant.

        """
        self.buffs[stat] = BuffState(stat=stat, amount=amount)

    def buff_amount(self, stat: BuffStat) -> int:
        buff = self.buffs.get(stat)
        return buff.amount if buff else 0

    def decay_buffs(self) -> list[BuffStat]:
        """
        Counts every buff down by one turn and removes the expired ones.

        Returns:
            list[BuffStat]:
                The statistics whose buff expired, attack before defense.

        """
        expired: list[BuffStat] = []
        for stat in BuffStat:
            buff = self.buffs.get(stat)
            if buff and buff.turn_update():
                del self.buffs[stat]
                expired.append(stat)
        return expired

    # === Ailments ===

    def inflict(self, ailment: Ailment) -> None:
        self.ailments.add(ailment)

    def has_ailment(self, ailment: Ailment) -> bool:
        return ailment in self.ailments

    def is_incapacitated(self) -> bool:
        """Checks if an ailment makes the combatant lose its turn."""
        return any(ailment.prevents_actions() for ailment in self.ailments)

    def cure(self, ailment: Ailment) -> bool:
        """
        Removes an ailment.

        Returns:
            bool:
                True if the ailment was present.

        """
        if ailment not in self.ailments:
            return False
        self.ailments.discard(ailment)
        return True

    def on_damage(self) -> list[Ailment]:
        """
        Cures the ailments that break when the combatant is hit.

        Returns:
            list[Ailment]:
                The cured ailments.

        """
        cured = [a for a in Ailment if a in self.ailments and a.breaks_on_damage()]
        for ailment in cured:
            self.ailments.discard(ailment)
        return cured

    def clear(self) -> None:
        """Removes every buff and ailment, used when the combatant falls."""
        if self.buffs or self.ailments:
            log_debug(
                "Clearing status of a defeated combatant",
                {"buffs": list(self.buffs), "ailments": sorted(a.name for a in self.ailments)},
            )
        self.buffs.clear()
        self.ailments.clear()
