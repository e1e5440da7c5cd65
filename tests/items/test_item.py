"""
Tests for the item and weapon catalogs.
"""

from core.constants import ItemCategory
from items.item import ItemKind, all_items, shop_items
from items.weapon import WeaponKind, shop_weapons


def test_herb_is_the_only_battle_item():
    """Test that only the herb has an effect in battle."""
    usable = [item for item in all_items() if item.is_usable_in_battle()]
    assert usable == [ItemKind.HERB]
    assert ItemKind.HERB.heal_power == 25
    assert ItemKind.HERB.category == ItemCategory.HEAL


def test_inert_items_have_no_heal_power():
    """Test that key items and materials restore nothing."""
    for item in all_items():
        if item != ItemKind.HERB:
            assert item.heal_power == 0


def test_shop_sells_priced_items():
    """Test that shops only list items that have a price."""
    assert shop_items() == [ItemKind.HERB]
    assert ItemKind.HERB.price == 8


def test_weapon_catalog():
    """Test the attack bonuses and the shop selection of weapons."""
    assert WeaponKind.WOODEN_SWORD.attack_bonus == 2
    assert WeaponKind.STEEL_SWORD.attack_bonus == 10
    assert shop_weapons() == [
        WeaponKind.WOODEN_SWORD,
        WeaponKind.IRON_SWORD,
        WeaponKind.MAGE_STAFF,
    ]
    assert all(weapon.price > 0 for weapon in WeaponKind)
