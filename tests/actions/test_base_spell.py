"""
Tests for the spell catalog and the party commands.
"""

import pytest
from actions.base_action import (
    AttackAction,
    BattleAction,
    FleeAction,
    SpellAction,
    UseItemAction,
)
from actions.spells.base_spell import SPELL_TABLE, SpellData, SpellKind, all_spells
from core.actor import ActorId
from core.constants import Ailment, SpellEffect, TargetShape
from items.item import ItemKind
from pydantic import TypeAdapter


def test_every_spell_has_data():
    """Test that the catalog covers every spell."""
    assert set(SPELL_TABLE) == set(SpellKind)
    assert len(all_spells()) == 24


@pytest.mark.parametrize(
    "spell, cost, power, shape, effect",
    [
        (SpellKind.FIRE1, 3, 12, TargetShape.SINGLE_ENEMY, SpellEffect.DAMAGE),
        (SpellKind.BLAZE2, 10, 18, TargetShape.ALL_ENEMIES, SpellEffect.DAMAGE),
        (SpellKind.HEAL2, 7, 40, TargetShape.SINGLE_ALLY, SpellEffect.HEAL),
        (SpellKind.BARRIER1, 6, 6, TargetShape.ALL_ALLIES, SpellEffect.DEFENSE_BUFF),
        (SpellKind.RALLY2, 10, 4, TargetShape.ALL_ALLIES, SpellEffect.ATTACK_BUFF),
        (SpellKind.SIPHON1, 6, 5, TargetShape.ALL_ENEMIES, SpellEffect.MP_DRAIN),
    ],
)
def test_spell_data(spell, cost, power, shape, effect):
    """Test a sample of the catalog values."""
    assert spell.mp_cost == cost
    assert spell.power == power
    assert spell.target_shape == shape
    assert spell.effect == effect


def test_ailment_spells():
    """Test that ailment spells carry their ailment and success rate."""
    assert SpellKind.SLEEP1.ailment == Ailment.SLEEP
    assert SpellKind.POISONALL1.ailment == Ailment.POISON
    assert SpellKind.SLEEP1.power == 70
    assert SpellKind.FIRE1.ailment is None
    assert [s for s in SpellKind if s.is_ailment()] == [
        SpellKind.SLEEP1,
        SpellKind.SLEEPALL1,
        SpellKind.POISON1,
        SpellKind.POISONALL1,
    ]


def test_field_spells_are_heals():
    """Test that only healing spells can be cast outside of battle."""
    assert SpellKind.HEALALL1.is_usable_in_field()
    assert not SpellKind.SHIELD1.is_usable_in_field()
    assert SpellKind.DRAIN1.is_offensive()
    assert not SpellKind.BOOST1.is_offensive()


def test_spell_data_rejects_inconsistent_ailment():
    """Test that only ailment spells may declare an ailment."""
    with pytest.raises(ValueError):
        SpellData(
            mp_cost=1,
            power=5,
            target_shape=TargetShape.SINGLE_ENEMY,
            effect=SpellEffect.DAMAGE,
            ailment=Ailment.SLEEP,
        )
    with pytest.raises(ValueError):
        SpellData(
            mp_cost=1,
            power=150,
            target_shape=TargetShape.SINGLE_ENEMY,
            effect=SpellEffect.AILMENT,
            ailment=Ailment.POISON,
        )


def test_commands_round_trip_through_discriminator():
    """Test that dumped commands are rebuilt with their concrete type."""
    adapter = TypeAdapter(BattleAction)
    commands = [
        AttackAction(target=ActorId.enemy(0)),
        SpellAction(spell=SpellKind.HEAL1, target=ActorId.party(1)),
        UseItemAction(item=ItemKind.HERB, target=ActorId.party(0)),
        FleeAction(),
    ]
    for command in commands:
        assert adapter.validate_python(command.model_dump()) == command


def test_command_str():
    """Test the readable form of commands."""
    assert str(AttackAction(target=ActorId.enemy(1))) == "Attack Enemy(1)"
    assert str(SpellAction(spell=SpellKind.FIRE1, target=ActorId.enemy(0))) == (
        "Cast Fire1 on Enemy(0)"
    )
    assert str(FleeAction()) == "Flee"
