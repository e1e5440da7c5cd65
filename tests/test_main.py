"""
Tests for the sample battle driver.
"""

from actions.base_action import AttackAction, SpellAction, UseItemAction
from actions.spells.base_spell import SpellKind
from character.character_class import PartyMemberKind
from character.enemy import Enemy, EnemyKind
from character.party_member import PartyMember
from combat.combat_manager import BattleState
from core.actor import ActorId
from items.item import ItemKind
from main import choose_command, run


def test_run_is_reproducible():
    """Test that the same seed replays the same battle."""
    first = run(seed=3, max_turns=10, tier=1)
    second = run(seed=3, max_turns=10, tier=1)
    assert [e.model_dump() for e in first.turn_log] == [
        e.model_dump() for e in second.turn_log
    ]
    assert first.turn_number <= 10


def test_fighter_attacks_first_enemy():
    """Test that a member without spells attacks the first living enemy."""
    battle = BattleState(
        [PartyMember.from_kind(PartyMemberKind.CHILCHUCK)],
        [Enemy.from_kind(EnemyKind.SLIME)],
    )
    assert choose_command(battle, 0) == AttackAction(target=ActorId.enemy(0))


def test_caster_uses_strongest_damage_spell():
    """Test that a caster picks the strongest affordable damage spell."""
    battle = BattleState(
        [PartyMember.from_kind(PartyMemberKind.MARCILLE, level=5)],
        [Enemy.from_kind(EnemyKind.SLIME)],
    )
    command = choose_command(battle, 0)
    assert command == SpellAction(spell=SpellKind.FIRE2, target=ActorId.enemy(0))


def test_hurt_ally_is_healed_first():
    """Test that a badly hurt ally is healed before anything else."""
    healer = PartyMember.from_kind(PartyMemberKind.CHILCHUCK)
    healer.inventory.add(ItemKind.HERB)
    hurt = PartyMember.from_kind(PartyMemberKind.SENSHI)
    hurt.stats.take_damage(30)
    battle = BattleState([healer, hurt], [Enemy.from_kind(EnemyKind.SLIME)])
    assert choose_command(battle, 0) == UseItemAction(
        item=ItemKind.HERB, target=ActorId.party(1)
    )
