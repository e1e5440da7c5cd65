"""
Tests for timed stat buffs.
"""

import pytest
from core.constants import BUFF_DURATION, BuffStat
from effects.modifier_effect import BuffState


@pytest.fixture
def buff():
    return BuffState(stat=BuffStat.ATTACK, amount=3)


def test_new_buff_is_fresh(buff):
    """
    Test that a new buff starts fresh with the full duration.
    """
    assert buff.fresh
    assert buff.remaining_turns == BUFF_DURATION


def test_first_update_only_clears_fresh_flag(buff):
    """
    Test that the update of the application turn does not count down.
    """
    assert not buff.turn_update()
    assert not buff.fresh
    assert buff.remaining_turns == BUFF_DURATION


def test_buff_expires_after_its_duration(buff):
    """
    Test that the buff expires on the last countdown.
    """
    buff.turn_update()
    results = [buff.turn_update() for _ in range(BUFF_DURATION)]
    assert results == [False] * (BUFF_DURATION - 1) + [True]
    assert buff.remaining_turns == 0


def test_zero_duration_is_rejected():
    """
    Test that a buff cannot be built already expired.
    """
    with pytest.raises(ValueError):
        BuffState(stat=BuffStat.DEFENSE, amount=10, remaining_turns=0)


def test_str(buff):
    """
    Test the readable form of a buff.
    """
    assert str(buff) == "Attack +3 (5 turns)"
