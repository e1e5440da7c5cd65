"""
Constants and enumerations for the resolver.

Defines the tunable battle constants and the enumerations for sides, target
shapes, spell effects, ailments, buffed statistics and item categories used
throughout the resolver.
"""

from enum import Enum

# Number of turn-end decays a freshly applied buff survives.
BUFF_DURATION = 5

# Fixed damage dealt by poison at every turn end.
POISON_DAMAGE = 3

# A flee attempt succeeds when the flee random is strictly below this value.
FLEE_SUCCESS_THRESHOLD = 0.5

# An enemy with spells casts when its spell random is strictly below this value.
ENEMY_SPELL_THRESHOLD = 0.5

# Accepted range of the per-slot damage random factors.
DAMAGE_RANDOM_MIN = 0.8
DAMAGE_RANDOM_MAX = 1.2


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class Side(NiceEnum):
    """Defines the side of the battle a combatant belongs to."""

    PARTY = "PARTY"
    ENEMY = "ENEMY"

    @property
    def opposite(self) -> "Side":
        """Returns the opposing side."""
        return Side.ENEMY if self == Side.PARTY else Side.PARTY

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this side."""
        return {
            Side.PARTY: "👤",
            Side.ENEMY: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this side."""
        return {
            Side.PARTY: "bold blue",
            Side.ENEMY: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies side color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class TargetShape(NiceEnum):
    """Defines who a spell lands on, relative to its caster."""

    SINGLE_ENEMY = "SINGLE_ENEMY"
    ALL_ENEMIES = "ALL_ENEMIES"
    SINGLE_ALLY = "SINGLE_ALLY"
    ALL_ALLIES = "ALL_ALLIES"

    def is_single(self) -> bool:
        return self in (TargetShape.SINGLE_ENEMY, TargetShape.SINGLE_ALLY)

    def is_offensive(self) -> bool:
        """Checks if the shape points at the caster's opponents."""
        return self in (TargetShape.SINGLE_ENEMY, TargetShape.ALL_ENEMIES)

    def target_side(self, caster_side: Side) -> Side:
        """
        Resolves the roster a spell of this shape affects.

        Args:
            caster_side (Side):
                The side of the caster.

        Returns:
            Side:
                The side whose members are targeted.

        """
        return caster_side.opposite if self.is_offensive() else caster_side


class SpellEffect(NiceEnum):
    """Defines the effect category a spell resolves to."""

    DAMAGE = "DAMAGE"
    HEAL = "HEAL"
    ATTACK_BUFF = "ATTACK_BUFF"
    DEFENSE_BUFF = "DEFENSE_BUFF"
    MP_DRAIN = "MP_DRAIN"
    AILMENT = "AILMENT"

    @property
    def color(self) -> str:
        return {
            SpellEffect.DAMAGE: "bold red",
            SpellEffect.HEAL: "bold green",
            SpellEffect.ATTACK_BUFF: "bold yellow",
            SpellEffect.DEFENSE_BUFF: "bold cyan",
            SpellEffect.MP_DRAIN: "bold blue",
            SpellEffect.AILMENT: "bold magenta",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies effect color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class BuffStat(NiceEnum):
    """Defines the statistics a buff can raise."""

    ATTACK = "ATTACK"
    DEFENSE = "DEFENSE"


class Ailment(NiceEnum):
    """Defines the persistent negative statuses an actor can suffer."""

    SLEEP = "SLEEP"
    POISON = "POISON"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this ailment."""
        return {
            Ailment.SLEEP: "💤",
            Ailment.POISON: "☠️",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this ailment."""
        return {
            Ailment.SLEEP: "bold blue",
            Ailment.POISON: "bold green",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies ailment color formatting to a message."""
        return f"[{self.color}]{message}[/]"

    def prevents_actions(self) -> bool:
        """
        Check if this ailment prevents the actor from acting.

        Returns:
            bool:
                True if the afflicted actor loses its turn, False otherwise.

        """
        return self == Ailment.SLEEP

    def breaks_on_damage(self) -> bool:
        """
        Check if an attack or a damaging spell cures this ailment.

        Returns:
            bool:
                True if direct damage cures the ailment, False otherwise.

        """
        return self == Ailment.SLEEP


class ItemCategory(NiceEnum):
    """Defines what an inventory item is used for."""

    HEAL = "HEAL"
    KEY_ITEM = "KEY_ITEM"
    MATERIAL = "MATERIAL"
    EQUIPMENT = "EQUIPMENT"

    def is_usable_in_battle(self) -> bool:
        return self == ItemCategory.HEAL
