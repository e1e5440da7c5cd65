"""
Tests for the battle enumerations and the actor reference.
"""

import pytest
from core.actor import ActorId
from core.constants import Ailment, ItemCategory, Side, TargetShape
from core.error_handling import BattleInputError, GameException
from pydantic import ValidationError


def test_side_opposite():
    """Test that each side is the opposite of the other."""
    assert Side.PARTY.opposite == Side.ENEMY
    assert Side.ENEMY.opposite == Side.PARTY


@pytest.mark.parametrize(
    "shape, caster, expected",
    [
        (TargetShape.SINGLE_ENEMY, Side.PARTY, Side.ENEMY),
        (TargetShape.ALL_ENEMIES, Side.ENEMY, Side.PARTY),
        (TargetShape.SINGLE_ALLY, Side.PARTY, Side.PARTY),
        (TargetShape.ALL_ALLIES, Side.ENEMY, Side.ENEMY),
    ],
)
def test_target_side_is_relative_to_caster(shape, caster, expected):
    """Test that target shapes resolve relative to the caster's side."""
    assert shape.target_side(caster) == expected


def test_only_sleep_blocks_actions():
    """Test which ailments cost a turn and which break on damage."""
    assert Ailment.SLEEP.prevents_actions()
    assert Ailment.SLEEP.breaks_on_damage()
    assert not Ailment.POISON.prevents_actions()
    assert not Ailment.POISON.breaks_on_damage()


def test_only_healing_items_work_in_battle():
    """Test that only the heal category is usable in battle."""
    usable = [category for category in ItemCategory if category.is_usable_in_battle()]
    assert usable == [ItemCategory.HEAL]


def test_display_name():
    """Test the readable name of an enum value."""
    assert str(TargetShape.SINGLE_ENEMY) == "SINGLE_ENEMY"
    assert TargetShape.SINGLE_ENEMY.display_name == "Single enemy"
    assert Side.PARTY.colorize("x") == "[bold blue]x[/]"


def test_actor_id():
    """Test actor construction, equality and readable form."""
    actor = ActorId.enemy(2)
    assert actor == ActorId(side=Side.ENEMY, index=2)
    assert actor.is_enemy()
    assert not actor.is_party()
    assert str(ActorId.party(0)) == "Party(0)"
    assert len({ActorId.party(1), ActorId.party(1)}) == 1


def test_actor_id_rejects_negative_index():
    """Test that roster indices are never negative."""
    with pytest.raises(ValidationError):
        ActorId.party(-1)


def test_exception_context_in_message():
    """Test that the context is appended to the message."""
    error = BattleInputError("Bad input", {"slots": 3})
    assert isinstance(error, GameException)
    assert isinstance(error, ValueError)
    assert str(error) == "Bad input (slots=3)"
    assert str(GameException("Plain")) == "Plain"
