"""
Tests for party members.
"""

from actions.spells.base_spell import SpellKind
from character.character_class import PartyMemberKind
from character.party_member import PartyMember, default_party
from items.weapon import WeaponKind


def test_from_kind_copies_class_stats():
    """Test that a new member does not share stats with its class table."""
    member = PartyMember.from_kind(PartyMemberKind.MARCILLE)
    member.stats.take_damage(5)
    assert PartyMemberKind.MARCILLE.character_class.base_stats.hp == 20
    assert member.stats.hp == 15


def test_level_up_grows_and_learns():
    """Test that reaching level 3 grows the stats and teaches Blaze1."""
    member = PartyMember.from_kind(PartyMemberKind.MARCILLE, level=2)
    learned = member.level_up()
    assert member.level == 3
    assert learned == [SpellKind.BLAZE1]
    assert member.stats.max_hp == 26
    assert member.stats.hp == member.stats.max_hp
    assert SpellKind.BLAZE1 in member.known_spells()


def test_effective_attack_includes_weapon():
    """Test that the weapon bonus adds to the base attack."""
    member = PartyMember.from_kind(PartyMemberKind.LAIOS)
    assert member.effective_attack() == 8
    member.equipment.equip_weapon(WeaponKind.IRON_SWORD)
    assert member.effective_attack() == 13


def test_default_party():
    """Test the composition of the default party."""
    party = default_party()
    assert [member.kind for member in party] == [
        PartyMemberKind.LAIOS,
        PartyMemberKind.MARCILLE,
        PartyMemberKind.FALIN,
    ]
    assert all(member.is_alive() for member in party)
    assert party[0].name == "Laios"
