"""
Character class module for the resolver.

Defines the party member classes with their starting stats, level-up growth
and the level at which each spell is learned.
"""

from actions.spells.base_spell import SpellKind
from core.constants import NiceEnum
from pydantic import BaseModel, Field

from .character_stats import CombatStats, StatGrowth


class PartyMemberKind(NiceEnum):
    """Identifies the class of a party member."""

    LAIOS = "LAIOS"
    MARCILLE = "MARCILLE"
    FALIN = "FALIN"
    CHILCHUCK = "CHILCHUCK"
    SENSHI = "SENSHI"
    IZUTSUMI = "IZUTSUMI"
    SHURO = "SHURO"
    NAMARI = "NAMARI"
    KABRU = "KABRU"
    RINSHA = "RINSHA"

    @property
    def character_class(self) -> "CharacterClass":
        return CLASS_TABLE[self]


class CharacterClass(BaseModel):
    """
    Represents a character class with its base stats, growth and the spells
    it learns per level.
    """

    base_stats: CombatStats = Field(
        description="Stats of a level 1 member of this class.",
    )
    growth: StatGrowth = Field(
        description="Stats gained at every level-up.",
    )
    spells_by_level: dict[int, list[SpellKind]] = Field(
        default_factory=dict,
        description="A dictionary mapping levels to the spells learned at that level.",
    )

    def get_spells_at_level(self, level: int) -> list[SpellKind]:
        """
        Get the spells that are learned at a specific level for this class.

        Args:
            level (int): The level to check for spells.

        Returns:
            list[SpellKind]: The spells learned when reaching the level.

        """
        return list(self.spells_by_level.get(level, []))

    def get_all_spells_up_to_level(self, level: int) -> list[SpellKind]:
        """
        Get all spells known up to and including a specific level.

        Args:
            level (int): The maximum level to check for spells.

        Returns:
            list[SpellKind]: All spells known at the level, in learn order.

        """
        all_spells: list[SpellKind] = []
        for lvl in sorted(self.spells_by_level):
            if lvl > level:
                break
            all_spells.extend(self.spells_by_level[lvl])
        return all_spells


CLASS_TABLE: dict[PartyMemberKind, CharacterClass] = {
    PartyMemberKind.LAIOS: CharacterClass(
        base_stats=CombatStats.new(30, 8, 3, 5, 5),
        growth=StatGrowth(hp=5, mp=1, attack=2, defense=1, speed=1),
        spells_by_level={
            1: [
                SpellKind.HEAL1,
                SpellKind.BOOST1,
                SpellKind.FIRE1,
                SpellKind.FIRE2,
                SpellKind.BLAZE1,
                SpellKind.BLAZE2,
                SpellKind.HEAL2,
                SpellKind.HEALALL1,
                SpellKind.HEALALL2,
                SpellKind.SHIELD1,
                SpellKind.SHIELD2,
                SpellKind.BARRIER1,
                SpellKind.BARRIER2,
                SpellKind.BOOST2,
                SpellKind.RALLY1,
                SpellKind.RALLY2,
                SpellKind.DRAIN1,
                SpellKind.DRAIN2,
                SpellKind.SIPHON1,
                SpellKind.SIPHON2,
            ],
        },
    ),
    PartyMemberKind.MARCILLE: CharacterClass(
        base_stats=CombatStats.new(20, 10, 2, 7, 15),
        growth=StatGrowth(hp=3, mp=3, attack=1, defense=1, speed=1),
        spells_by_level={
            1: [SpellKind.FIRE1],
            3: [SpellKind.BLAZE1],
            5: [SpellKind.FIRE2],
            7: [SpellKind.BLAZE2],
            9: [SpellKind.DRAIN1],
        },
    ),
    PartyMemberKind.FALIN: CharacterClass(
        base_stats=CombatStats.new(25, 5, 4, 4, 12),
        growth=StatGrowth(hp=4, mp=3, attack=1, defense=1, speed=1),
        spells_by_level={
            1: [SpellKind.HEAL1],
            3: [SpellKind.HEALALL1],
            5: [SpellKind.HEAL2],
            7: [SpellKind.SHIELD2],
            9: [SpellKind.HEALALL2],
            10: [SpellKind.BARRIER2],
        },
    ),
    PartyMemberKind.CHILCHUCK: CharacterClass(
        base_stats=CombatStats.new(22, 6, 2, 9, 0),
        growth=StatGrowth(hp=3, attack=1, defense=1, speed=2),
    ),
    PartyMemberKind.SENSHI: CharacterClass(
        base_stats=CombatStats.new(34, 9, 5, 3, 4),
        growth=StatGrowth(hp=6, mp=1, attack=2, defense=2),
        spells_by_level={4: [SpellKind.SHIELD1]},
    ),
    PartyMemberKind.IZUTSUMI: CharacterClass(
        base_stats=CombatStats.new(24, 9, 2, 10, 6),
        growth=StatGrowth(hp=4, mp=1, attack=2, speed=2),
        spells_by_level={
            5: [SpellKind.FIRE1],
            8: [SpellKind.BOOST1],
        },
    ),
    PartyMemberKind.SHURO: CharacterClass(
        base_stats=CombatStats.new(28, 11, 3, 7, 0),
        growth=StatGrowth(hp=5, attack=3, defense=1, speed=1),
    ),
    PartyMemberKind.NAMARI: CharacterClass(
        base_stats=CombatStats.new(32, 10, 5, 3, 0),
        growth=StatGrowth(hp=6, attack=2, defense=2),
    ),
    PartyMemberKind.KABRU: CharacterClass(
        base_stats=CombatStats.new(26, 8, 3, 6, 8),
        growth=StatGrowth(hp=4, mp=2, attack=2, defense=1, speed=1),
        spells_by_level={
            3: [SpellKind.HEAL1],
            5: [SpellKind.SHIELD1],
            6: [SpellKind.SIPHON1],
            7: [SpellKind.BARRIER1],
            9: [SpellKind.RALLY1],
        },
    ),
    PartyMemberKind.RINSHA: CharacterClass(
        base_stats=CombatStats.new(24, 8, 3, 6, 10),
        growth=StatGrowth(hp=4, mp=2, attack=2, defense=1, speed=1),
        spells_by_level={
            1: [SpellKind.FIRE1],
            3: [SpellKind.HEAL1],
            5: [SpellKind.BOOST1],
            6: [SpellKind.DRAIN1],
            7: [SpellKind.BOOST2],
            9: [SpellKind.RALLY2],
        },
    ),
}


def available_spells(kind: PartyMemberKind, level: int) -> list[SpellKind]:
    """
    Returns the spells a member of the given class knows at a level.

    Args:
        kind (PartyMemberKind): The class of the member.
        level (int): The level of the member.

    Returns:
        list[SpellKind]: The known spells, in learn order.

    """
    return kind.character_class.get_all_spells_up_to_level(level)


def spells_learned_at_level(kind: PartyMemberKind, level: int) -> list[SpellKind]:
    """Returns the spells newly learned when reaching a level."""
    return kind.character_class.get_spells_at_level(level)
