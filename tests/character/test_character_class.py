"""
Tests for the party member classes and their spell tables.
"""

from actions.spells.base_spell import SpellKind
from character.character_class import (
    CLASS_TABLE,
    PartyMemberKind,
    available_spells,
    spells_learned_at_level,
)


def test_every_class_has_a_table_entry():
    """Test that every class has base stats defined."""
    assert set(CLASS_TABLE) == set(PartyMemberKind)
    for kind in PartyMemberKind:
        stats = kind.character_class.base_stats
        assert stats.hp == stats.max_hp > 0


def test_marcille_learns_spells_by_level():
    """Test that spells become available at their learn level."""
    kind = PartyMemberKind.MARCILLE
    assert available_spells(kind, 1) == [SpellKind.FIRE1]
    assert available_spells(kind, 4) == [SpellKind.FIRE1, SpellKind.BLAZE1]
    assert available_spells(kind, 99) == [
        SpellKind.FIRE1,
        SpellKind.BLAZE1,
        SpellKind.FIRE2,
        SpellKind.BLAZE2,
        SpellKind.DRAIN1,
    ]


def test_spells_learned_at_exact_level():
    """Test that only the spells of the reached level are returned."""
    assert spells_learned_at_level(PartyMemberKind.FALIN, 5) == [SpellKind.HEAL2]
    assert spells_learned_at_level(PartyMemberKind.FALIN, 4) == []


def test_laios_knows_every_non_ailment_spell():
    """Test that Laios starts with every spell except the ailment ones."""
    known = available_spells(PartyMemberKind.LAIOS, 1)
    assert len(known) == 20
    assert not any(spell.is_ailment() for spell in known)


def test_class_without_spells():
    """Test that a pure fighter never learns a spell."""
    assert available_spells(PartyMemberKind.CHILCHUCK, 50) == []
