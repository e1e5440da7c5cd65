"""
Items system module for the turn resolver.

This module contains the item and weapon catalogs. Healing items are the only
ones that act in battle, weapons only add to the wielder's attack.
"""

from .item import ITEM_TABLE, ItemData, ItemKind, all_items, shop_items
from .weapon import WEAPON_TABLE, WeaponData, WeaponKind, shop_weapons

__all__ = [
    # Import from item.py
    "ITEM_TABLE",
    "ItemData",
    "ItemKind",
    "all_items",
    "shop_items",
    # Import from weapon.py
    "WEAPON_TABLE",
    "WeaponData",
    "WeaponKind",
    "shop_weapons",
]
