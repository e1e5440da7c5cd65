"""
Base action module for the resolver.

Defines the commands a party member can be given for one turn. Enemies never
receive commands, they pick their own action when their slot comes up.
"""

from typing import Annotated, Literal, TypeAlias

from core.actor import ActorId
from items.item import ItemKind
from pydantic import BaseModel, Field

from .spells.base_spell import SpellKind


class BaseAction(BaseModel):
    """Base class for all party commands."""

    action_type: str = Field(description="The type of the command.")


class AttackAction(BaseAction):
    """Strike a single enemy with the member's weapon."""

    action_type: Literal["Attack"] = "Attack"
    target: ActorId = Field(description="The intended target.")

    def __str__(self) -> str:
        return f"Attack {self.target}"


class SpellAction(BaseAction):
    """
    Cast a spell. For single-target spells `target` is the intended target;
    area spells ignore it and land on every living member of their side.
    """

    action_type: Literal["Spell"] = "Spell"
    spell: SpellKind = Field(description="The spell to cast.")
    target: ActorId = Field(description="The intended target.")

    def __str__(self) -> str:
        return f"Cast {self.spell.display_name} on {self.target}"


class UseItemAction(BaseAction):
    """Use an item from the member's own inventory."""

    action_type: Literal["UseItem"] = "UseItem"
    item: ItemKind = Field(description="The item to use.")
    target: ActorId = Field(description="The intended target.")

    def __str__(self) -> str:
        return f"Use {self.item.display_name} on {self.target}"


class FleeAction(BaseAction):
    """Try to escape from the battle."""

    action_type: Literal["Flee"] = "Flee"

    def __str__(self) -> str:
        return "Flee"


BattleAction: TypeAlias = Annotated[
    AttackAction | SpellAction | UseItemAction | FleeAction,
    Field(discriminator="action_type"),
]
