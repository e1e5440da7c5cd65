"""
Character inventory management module for the resolver.

Handles the items carried by a party member and the weapon they wield. The
resolver consumes items from the inventory but never changes equipment.
"""

from core.logging import log_debug
from items.item import ItemKind
from items.weapon import WeaponKind
from pydantic import BaseModel, Field


class Inventory(BaseModel):
    """
    Item counts carried by a party member.

    Attributes:
        items (dict[ItemKind, int]):
            How many units of each item are carried.

    """

    items: dict[ItemKind, int] = Field(
        default_factory=dict,
        description="Number of units carried, per item.",
    )

    def add(self, item: ItemKind, count: int = 1) -> None:
        """
        Add units of an item.

        Args:
            item (ItemKind):
                The item to add.
            count (int):
                How many units to add.

        """
        if count < 0:
            raise ValueError(f"Cannot add a negative amount of {item}.")
        self.items[item] = self.items.get(item, 0) + count

    def use_item(self, item: ItemKind) -> bool:
        """
        Consume one unit of an item.

        Args:
            item (ItemKind):
                The item to consume.

        Returns:
            bool:
                True if a unit was consumed, False if none was carried.

        """
        if self.items.get(item, 0) <= 0:
            log_debug("No unit left to use", {"item": item})
            return False
        self.items[item] -= 1
        return True

    def count(self, item: ItemKind) -> int:
        return self.items.get(item, 0)

    def owned_items(self) -> list[ItemKind]:
        """Returns the items with at least one unit, in catalog order."""
        return [item for item in ItemKind if self.count(item) > 0]

    def is_empty(self) -> bool:
        return all(count == 0 for count in self.items.values())


class Equipment(BaseModel):
    """The equipment slots of a party member."""

    weapon: WeaponKind | None = Field(
        default=None,
        description="The wielded weapon, if any.",
    )

    def equip_weapon(self, weapon: WeaponKind) -> WeaponKind | None:
        """
        Wield a weapon.

        Args:
            weapon (WeaponKind):
                The weapon to wield.

        Returns:
            WeaponKind | None:
                The previously wielded weapon, if any.

        """
        previous = self.weapon
        self.weapon = weapon
        return previous

    def attack_bonus(self) -> int:
        return self.weapon.attack_bonus if self.weapon else 0
