"""
Tests for the enemy action heuristic.
"""

import pytest
from actions.spells.base_spell import SpellKind
from character.character_stats import CombatStats
from character.enemy import Enemy, EnemyKind
from combat.npc_ai import EnemySelection, choose_enemy_action, first_affordable_spell


def with_mp(kind, mp):
    return Enemy(kind=kind, stats=CombatStats.new(20, 5, 2, 3, mp))


@pytest.fixture
def ghost():
    """A ghost at full MP."""
    return Enemy.from_kind(EnemyKind.GHOST)


def test_enemy_without_spells_always_attacks():
    """Test that a kind with no spell table attacks whatever the roll."""
    slime = Enemy.from_kind(EnemyKind.SLIME)
    assert choose_enemy_action(slime, 0.0).is_attack()
    assert choose_enemy_action(slime, 0.9).is_attack()


def test_low_roll_casts_first_spell(ghost):
    """Test that a roll below one half selects the first affordable spell."""
    selection = choose_enemy_action(ghost, 0.2)
    assert selection == EnemySelection(spell=SpellKind.SLEEP1)
    assert not selection.is_attack()


def test_high_roll_attacks(ghost):
    """Test that a roll of one half or more selects an attack."""
    assert choose_enemy_action(ghost, 0.5).is_attack()
    assert choose_enemy_action(ghost, 0.99).is_attack()


def test_first_affordable_skips_expensive_spells():
    """Test that spells the enemy cannot pay for are skipped."""
    lord = with_mp(EnemyKind.DARK_LORD, 8)
    assert first_affordable_spell(lord) == SpellKind.HEAL2
    lord = with_mp(EnemyKind.DARK_LORD, 6)
    assert first_affordable_spell(lord) == SpellKind.POISONALL1


def test_no_affordable_spell_falls_back_to_attack():
    """Test that an enemy out of MP attacks even with a low roll."""
    ghost = with_mp(EnemyKind.GHOST, 3)
    assert first_affordable_spell(ghost) is None
    assert choose_enemy_action(ghost, 0.1).is_attack()
