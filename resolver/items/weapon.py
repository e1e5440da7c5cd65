"""
Weapon catalog module for the resolver.

Weapons are the only equipment slot and only contribute an attack bonus.
"""

from core.constants import NiceEnum
from pydantic import BaseModel, Field


class WeaponData(BaseModel):
    """Static data describing a weapon."""

    attack_bonus: int = Field(ge=0, description="Attack added while equipped.")
    price: int = Field(ge=0, description="Shop price in gold.")


class WeaponKind(NiceEnum):
    """Identifies a weapon."""

    WOODEN_SWORD = "WOODEN_SWORD"
    IRON_SWORD = "IRON_SWORD"
    STEEL_SWORD = "STEEL_SWORD"
    MAGE_STAFF = "MAGE_STAFF"
    HOLY_STAFF = "HOLY_STAFF"

    @property
    def attack_bonus(self) -> int:
        return WEAPON_TABLE[self].attack_bonus

    @property
    def price(self) -> int:
        return WEAPON_TABLE[self].price


WEAPON_TABLE: dict[WeaponKind, WeaponData] = {
    WeaponKind.WOODEN_SWORD: WeaponData(attack_bonus=2, price=10),
    WeaponKind.IRON_SWORD: WeaponData(attack_bonus=5, price=50),
    WeaponKind.STEEL_SWORD: WeaponData(attack_bonus=10, price=150),
    WeaponKind.MAGE_STAFF: WeaponData(attack_bonus=3, price=30),
    WeaponKind.HOLY_STAFF: WeaponData(attack_bonus=4, price=80),
}


def shop_weapons() -> list[WeaponKind]:
    """Weapons sold in the first shops."""
    return [
        WeaponKind.WOODEN_SWORD,
        WeaponKind.IRON_SWORD,
        WeaponKind.MAGE_STAFF,
    ]
