"""
Enemy action selection for the resolver.

Enemies follow a fixed heuristic: when their spell roll allows it they cast
the first spell of their table they can afford, otherwise they attack the
first living party member.
"""

from actions.spells.base_spell import SpellKind
from character.enemy import Enemy
from core.constants import ENEMY_SPELL_THRESHOLD
from pydantic import BaseModel, Field


class EnemySelection(BaseModel):
    """The action an enemy picked for its slot."""

    spell: SpellKind | None = Field(
        default=None,
        description="The spell to cast, or None for a physical attack.",
    )

    def is_attack(self) -> bool:
        return self.spell is None


def first_affordable_spell(enemy: Enemy) -> SpellKind | None:
    """
    Returns the first spell of the enemy's table it has enough MP for.

    Args:
        enemy (Enemy): The enemy.

    Returns:
        SpellKind | None: The spell, or None if nothing is affordable.

    """
    for spell in enemy.kind.spells():
        if spell.mp_cost <= enemy.stats.mp:
            return spell
    return None


def choose_enemy_action(enemy: Enemy, spell_random: float) -> EnemySelection:
    """
    Picks the action of an enemy for the current slot.

    Args:
        enemy (Enemy):
            The acting enemy.
        spell_random (float):
            The enemy's own spell roll, in [0, 1].

    Returns:
        EnemySelection:
            A spell selection when the enemy has a spell table, the roll is
            below the threshold and a spell is affordable, an attack otherwise.

    """
    if not enemy.kind.spells() or spell_random >= ENEMY_SPELL_THRESHOLD:
        return EnemySelection()
    return EnemySelection(spell=first_affordable_spell(enemy))
