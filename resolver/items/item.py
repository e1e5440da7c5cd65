"""
Item catalog module for the resolver.

Defines the items a party member can carry. Only healing items have an
effect in battle; key items and materials are inert there.
"""

from core.constants import ItemCategory, NiceEnum
from pydantic import BaseModel, Field


class ItemData(BaseModel):
    """Static data describing an item."""

    category: ItemCategory = Field(description="What the item is used for.")
    heal_power: int = Field(
        default=0,
        ge=0,
        description="HP restored by healing items, 0 for every other category.",
    )
    price: int = Field(
        default=0,
        ge=0,
        description="Shop price in gold, 0 if the item cannot be bought.",
    )


class ItemKind(NiceEnum):
    """Identifies an item."""

    HERB = "HERB"
    COPPER_KEY = "COPPER_KEY"
    MOON_FRAGMENT = "MOON_FRAGMENT"
    MAGIC_STONE = "MAGIC_STONE"
    SILVER_ORE = "SILVER_ORE"
    ANCIENT_COIN = "ANCIENT_COIN"
    DRAGON_SCALE = "DRAGON_SCALE"

    @property
    def data(self) -> ItemData:
        return ITEM_TABLE[self]

    @property
    def category(self) -> ItemCategory:
        return self.data.category

    @property
    def heal_power(self) -> int:
        return self.data.heal_power

    @property
    def price(self) -> int:
        return self.data.price

    def is_usable_in_battle(self) -> bool:
        return self.category.is_usable_in_battle()


ITEM_TABLE: dict[ItemKind, ItemData] = {
    ItemKind.HERB: ItemData(category=ItemCategory.HEAL, heal_power=25, price=8),
    ItemKind.COPPER_KEY: ItemData(category=ItemCategory.KEY_ITEM),
    ItemKind.MOON_FRAGMENT: ItemData(category=ItemCategory.KEY_ITEM),
    ItemKind.MAGIC_STONE: ItemData(category=ItemCategory.MATERIAL),
    ItemKind.SILVER_ORE: ItemData(category=ItemCategory.MATERIAL),
    ItemKind.ANCIENT_COIN: ItemData(category=ItemCategory.MATERIAL),
    ItemKind.DRAGON_SCALE: ItemData(category=ItemCategory.MATERIAL),
}


def all_items() -> list[ItemKind]:
    return list(ItemKind)


def shop_items() -> list[ItemKind]:
    """Items sold in shops."""
    return [item for item in ItemKind if item.price > 0]
