"""
Tests for the turn events.
"""

from typing import get_args

import pytest
from actions.spells.base_spell import SpellKind
from core.actor import ActorId
from core.constants import Ailment, BuffStat
from effects.event_system import (
    _RESULT_TYPES,
    AilmentCuredEvent,
    AnyTurnResult,
    AttackEvent,
    BuffedEvent,
    DefeatedEvent,
    FledEvent,
    ItemUsedEvent,
    SpellDamageEvent,
    deserialize_turn_result,
)
from items.item import ItemKind
from pydantic import ValidationError


@pytest.fixture
def attack():
    return AttackEvent(attacker=ActorId.party(0), target=ActorId.enemy(1), damage=7)


def test_involves(attack):
    """
    Test that an event involves both its source and its target.
    """
    assert attack.involves(ActorId.party(0))
    assert attack.involves(ActorId.enemy(1))
    assert not attack.involves(ActorId.enemy(0))
    assert not FledEvent().involves(ActorId.party(0))


def test_attack_damage_is_at_least_one():
    """
    Test that an attack event cannot report zero damage.
    """
    with pytest.raises(ValidationError):
        AttackEvent(attacker=ActorId.party(0), target=ActorId.enemy(0), damage=0)


@pytest.mark.parametrize(
    "event",
    [
        SpellDamageEvent(
            caster=ActorId.enemy(0),
            spell=SpellKind.BLAZE2,
            target=ActorId.party(2),
            damage=18,
        ),
        BuffedEvent(
            caster=ActorId.party(1),
            spell=SpellKind.SHIELD1,
            target=ActorId.party(0),
            stat=BuffStat.DEFENSE,
            amount=10,
        ),
        ItemUsedEvent(
            user=ActorId.party(0),
            item=ItemKind.HERB,
            target=ActorId.party(1),
            amount=25,
        ),
        AilmentCuredEvent(target=ActorId.enemy(0), ailment=Ailment.SLEEP),
        DefeatedEvent(target=ActorId.enemy(3)),
        FledEvent(),
    ],
)
def test_deserialize_rebuilds_the_event(event):
    """
    Test that a dumped event is rebuilt with its concrete type.
    """
    rebuilt = deserialize_turn_result(event.model_dump(mode="json"))
    assert type(rebuilt) is type(event)
    assert rebuilt == event


def test_deserialize_unknown_type_returns_none():
    """
    Test that an unknown result type is reported and ignored.
    """
    assert deserialize_turn_result({"result_type": "Teleported"}) is None
    assert deserialize_turn_result({}) is None


def test_str_mentions_actors(attack):
    """
    Test that the readable form names both combatants and the damage.
    """
    text = str(attack)
    assert "Party(0)" in text
    assert "Enemy(1)" in text
    assert "7" in text


def test_every_union_member_is_known():
    """
    Test that the known result types are exactly the tags of the event union.
    """
    members = get_args(get_args(AnyTurnResult)[0])
    tags = {cls.model_fields["result_type"].default for cls in members}
    assert len(tags) == 15
    assert tags == _RESULT_TYPES
