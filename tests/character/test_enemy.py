"""
Tests for the enemy kinds, tier scaling and encounter generation.
"""

import pytest
from actions.spells.base_spell import SpellKind
from character.enemy import (
    ATTACK_PER_TIER,
    HP_PER_TIER,
    Enemy,
    EnemyKind,
    generate_enemy_group,
    scale_enemy_stats,
)


def test_slime_base_stats():
    """Test the tier 1 stats and rewards of a slime."""
    slime = Enemy.from_kind(EnemyKind.SLIME)
    assert slime.stats.max_hp == 10
    assert slime.stats.attack == 3
    assert slime.exp_reward() == 3
    assert slime.kind.spells() == []


def test_tier_scaling_is_linear():
    """Test that each tier adds a fixed amount to every statistic."""
    base = scale_enemy_stats(EnemyKind.WOLF, 1)
    scaled = scale_enemy_stats(EnemyKind.WOLF, 3)
    assert scaled.max_hp == base.max_hp + 2 * HP_PER_TIER
    assert scaled.attack == base.attack + 2 * ATTACK_PER_TIER
    assert scaled.hp == scaled.max_hp
    assert scaled.max_mp == 0


def test_tier_scales_rewards():
    """Test that rewards are multiplied by the tier."""
    goblin = Enemy.from_kind(EnemyKind.GOBLIN, tier=2)
    assert goblin.exp_reward() == 2 * EnemyKind.GOBLIN.exp_reward
    assert goblin.gold_reward() == 2 * EnemyKind.GOBLIN.gold_reward


def test_spell_casters_gain_mp_with_tier():
    """Test that only kinds with a spell table gain MP from tiers."""
    assert scale_enemy_stats(EnemyKind.GHOST, 2).max_mp > scale_enemy_stats(
        EnemyKind.GHOST, 1
    ).max_mp
    assert EnemyKind.GHOST.spells() == [SpellKind.SLEEP1, SpellKind.DRAIN1]


@pytest.mark.parametrize(
    "count_random, expected",
    [(0.0, 1), (0.29, 1), (0.3, 2), (0.59, 2), (0.6, 3), (0.84, 3), (0.85, 4), (0.99, 4)],
)
def test_group_size(count_random, expected):
    """Test the group size thresholds."""
    assert len(generate_enemy_group(count_random, 0.0)) == expected


@pytest.mark.parametrize(
    "kind_random, expected",
    [
        (0.0, EnemyKind.SLIME),
        (0.2, EnemyKind.BAT),
        (0.5, EnemyKind.GOBLIN),
        (0.7, EnemyKind.WOLF),
        (0.99, EnemyKind.GHOST),
        (1.0, EnemyKind.GHOST),
    ],
)
def test_group_kind(kind_random, expected):
    """Test that every enemy of a group shares the selected kind."""
    group = generate_enemy_group(0.9, kind_random)
    assert all(enemy.kind == expected for enemy in group)


def test_group_members_are_independent():
    """Test that damaging one generated enemy leaves the others untouched."""
    group = generate_enemy_group(0.5, 0.0)
    group[0].stats.take_damage(5)
    assert group[1].stats.hp == group[1].stats.max_hp
