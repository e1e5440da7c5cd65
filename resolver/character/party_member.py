"""
Party member module for the resolver.

A party member owns its stats, inventory and equipment. Battles mutate the
stats and the inventory in place; equipment is only read.
"""

from actions.spells.base_spell import SpellKind
from core.logging import log_debug
from pydantic import BaseModel, Field

from .character_class import PartyMemberKind, available_spells, spells_learned_at_level
from .character_inventory import Equipment, Inventory
from .character_stats import CombatStats


class PartyMember(BaseModel):
    """
    A member of the player's party.

    Attributes:
        kind (PartyMemberKind): The class of the member.
        level (int): The current level.
        stats (CombatStats): The current combat stats.
        inventory (Inventory): The carried items.
        equipment (Equipment): The equipped weapon.

    """

    kind: PartyMemberKind = Field(description="The class of the member.")
    level: int = Field(default=1, ge=1, description="The current level.")
    stats: CombatStats = Field(description="The current combat stats.")
    inventory: Inventory = Field(
        default_factory=Inventory,
        description="The items carried by the member.",
    )
    equipment: Equipment = Field(
        default_factory=Equipment,
        description="The equipment worn by the member.",
    )

    @classmethod
    def from_kind(cls, kind: PartyMemberKind, level: int = 1) -> "PartyMember":
        """
        Creates a fully restored member of the given class and level.

        Args:
            kind (PartyMemberKind): The class of the member.
            level (int): The level of the member. Defaults to 1.

        Returns:
            PartyMember: The new member.

        """
        member = cls(kind=kind, stats=kind.character_class.base_stats.model_copy())
        while member.level < level:
            member.level_up()
        return member

    @property
    def name(self) -> str:
        return self.kind.display_name

    def is_alive(self) -> bool:
        return self.stats.is_alive()

    def effective_attack(self) -> int:
        """Base attack plus the bonus of the equipped weapon."""
        return self.stats.attack + self.equipment.attack_bonus()

    def known_spells(self) -> list[SpellKind]:
        return available_spells(self.kind, self.level)

    def level_up(self) -> list[SpellKind]:
        """
        Raises the level by one, growing and fully restoring the stats.

        Returns:
            list[SpellKind]: The spells learned at the new level.

        """
        self.level += 1
        self.stats.apply_growth(self.kind.character_class.growth)
        learned = spells_learned_at_level(self.kind, self.level)
        log_debug(
            "Party member leveled up",
            {"member": self.name, "level": self.level, "learned": learned},
        )
        return learned


def default_party() -> list[PartyMember]:
    """The three-member party used when no roster is supplied."""
    return [
        PartyMember.from_kind(PartyMemberKind.LAIOS),
        PartyMember.from_kind(PartyMemberKind.MARCILLE),
        PartyMember.from_kind(PartyMemberKind.FALIN),
    ]
