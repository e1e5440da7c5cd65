"""
Event system module for the resolver.

Defines the closed set of events a turn produces. Events are the only way the
outcome of a turn is reported: presentation layers replay them in order, and
every dumped event can be rebuilt with `deserialize_turn_result`.
"""

from typing import Annotated, Any, Literal, TypeAlias

from actions.spells.base_spell import SpellKind
from catchery import log_warning
from core.actor import ActorId
from core.constants import Ailment, BuffStat
from items.item import ItemKind
from pydantic import BaseModel, Field, TypeAdapter


class TurnResult(BaseModel):
    """Base class for all turn events."""

    result_type: str = Field(description="The type of the event.")

    def involves(self, actor: ActorId) -> bool:
        """
        Checks if the actor is the source or the target of the event.

        Args:
            actor (ActorId):
                The actor to look for.

        Returns:
            bool:
                True if the actor appears in the event.

        """
        return actor in (
            getattr(self, name, None)
            for name in ("attacker", "caster", "user", "actor", "target")
        )


class AttackEvent(TurnResult):
    """A physical attack landed."""

    result_type: Literal["Attack"] = "Attack"
    attacker: ActorId = Field(description="The attacking combatant.")
    target: ActorId = Field(description="The combatant hit.")
    damage: int = Field(ge=1, description="HP removed from the target.")

    def __str__(self) -> str:
        return f"{self.attacker} attacks {self.target} for {self.damage} damage"


class SpellDamageEvent(TurnResult):
    """A damaging spell landed on one target."""

    result_type: Literal["SpellDamage"] = "SpellDamage"
    caster: ActorId = Field(description="The casting combatant.")
    spell: SpellKind = Field(description="The spell cast.")
    target: ActorId = Field(description="The combatant hit.")
    damage: int = Field(ge=1, description="HP removed from the target.")

    def __str__(self) -> str:
        return (
            f"{self.caster} casts {self.spell.display_name} on {self.target} "
            f"for {self.damage} damage"
        )


class HealedEvent(TurnResult):
    """A healing spell restored HP to one target."""

    result_type: Literal["Healed"] = "Healed"
    caster: ActorId = Field(description="The casting combatant.")
    spell: SpellKind = Field(description="The spell cast.")
    target: ActorId = Field(description="The combatant healed.")
    amount: int = Field(ge=1, description="The computed heal amount.")

    def __str__(self) -> str:
        return (
            f"{self.caster} casts {self.spell.display_name} on {self.target}, "
            f"healing {self.amount} HP"
        )


class BuffedEvent(TurnResult):
    """A support spell applied a buff to one target."""

    result_type: Literal["Buffed"] = "Buffed"
    caster: ActorId = Field(description="The casting combatant.")
    spell: SpellKind = Field(description="The spell cast.")
    target: ActorId = Field(description="The combatant buffed.")
    stat: BuffStat = Field(description="The statistic raised.")
    amount: int = Field(ge=0, description="The bonus granted.")

    def __str__(self) -> str:
        return (
            f"{self.caster} casts {self.spell.display_name} on {self.target}, "
            f"{self.stat.display_name.lower()} +{self.amount}"
        )


class BuffExpiredEvent(TurnResult):
    """A buff ran out at the end of the turn."""

    result_type: Literal["BuffExpired"] = "BuffExpired"
    target: ActorId = Field(description="The combatant that lost the buff.")
    stat: BuffStat = Field(description="The statistic no longer raised.")

    def __str__(self) -> str:
        return f"{self.target}'s {self.stat.display_name.lower()} buff wore off"


class ItemUsedEvent(TurnResult):
    """A healing item was consumed."""

    result_type: Literal["ItemUsed"] = "ItemUsed"
    user: ActorId = Field(description="The combatant using the item.")
    item: ItemKind = Field(description="The item consumed.")
    target: ActorId = Field(description="The combatant receiving the effect.")
    amount: int = Field(ge=1, description="The computed heal amount.")

    def __str__(self) -> str:
        return (
            f"{self.user} uses {self.item.display_name} on {self.target}, "
            f"healing {self.amount} HP"
        )


class MpDrainedEvent(TurnResult):
    """A drain spell removed MP from one target."""

    result_type: Literal["MpDrained"] = "MpDrained"
    caster: ActorId = Field(description="The casting combatant.")
    spell: SpellKind = Field(description="The spell cast.")
    target: ActorId = Field(description="The combatant drained.")
    amount: int = Field(ge=1, description="The computed drain amount.")

    def __str__(self) -> str:
        return (
            f"{self.caster} casts {self.spell.display_name} on {self.target}, "
            f"draining {self.amount} MP"
        )


class DefeatedEvent(TurnResult):
    """A combatant fell to 0 HP."""

    result_type: Literal["Defeated"] = "Defeated"
    target: ActorId = Field(description="The fallen combatant.")

    def __str__(self) -> str:
        return f"{self.target} is defeated"


class AilmentInflictedEvent(TurnResult):
    """An ailment spell took hold on one target."""

    result_type: Literal["AilmentInflicted"] = "AilmentInflicted"
    caster: ActorId = Field(description="The casting combatant.")
    spell: SpellKind = Field(description="The spell cast.")
    target: ActorId = Field(description="The afflicted combatant.")
    ailment: Ailment = Field(description="The ailment inflicted.")

    def __str__(self) -> str:
        return (
            f"{self.caster} casts {self.spell.display_name}, "
            f"{self.target} suffers {self.ailment.display_name.lower()}"
        )


class AilmentResistedEvent(TurnResult):
    """An ailment spell failed against one target."""

    result_type: Literal["AilmentResisted"] = "AilmentResisted"
    caster: ActorId = Field(description="The casting combatant.")
    spell: SpellKind = Field(description="The spell cast.")
    target: ActorId = Field(description="The combatant that resisted.")

    def __str__(self) -> str:
        return f"{self.caster} casts {self.spell.display_name}, {self.target} resists"


class SleepingEvent(TurnResult):
    """A sleeping combatant lost its turn."""

    result_type: Literal["Sleeping"] = "Sleeping"
    actor: ActorId = Field(description="The sleeping combatant.")

    def __str__(self) -> str:
        return f"{self.actor} is fast asleep"


class PoisonDamageEvent(TurnResult):
    """Poison hurt a combatant at the end of the turn."""

    result_type: Literal["PoisonDamage"] = "PoisonDamage"
    target: ActorId = Field(description="The poisoned combatant.")
    damage: int = Field(ge=1, description="HP removed by the poison.")

    def __str__(self) -> str:
        return f"{self.target} takes {self.damage} poison damage"


class AilmentCuredEvent(TurnResult):
    """An ailment was removed from a combatant."""

    result_type: Literal["AilmentCured"] = "AilmentCured"
    target: ActorId = Field(description="The cured combatant.")
    ailment: Ailment = Field(description="The ailment removed.")

    def __str__(self) -> str:
        return f"{self.target} is no longer affected by {self.ailment.display_name.lower()}"


class FledEvent(TurnResult):
    """The party escaped, ending the battle."""

    result_type: Literal["Fled"] = "Fled"

    def __str__(self) -> str:
        return "The party fled"


class FleeFailedEvent(TurnResult):
    """The party failed to escape."""

    result_type: Literal["FleeFailed"] = "FleeFailed"

    def __str__(self) -> str:
        return "The party could not escape"


AnyTurnResult: TypeAlias = Annotated[
    AttackEvent
    | SpellDamageEvent
    | HealedEvent
    | BuffedEvent
    | BuffExpiredEvent
    | ItemUsedEvent
    | MpDrainedEvent
    | DefeatedEvent
    | AilmentInflictedEvent
    | AilmentResistedEvent
    | SleepingEvent
    | PoisonDamageEvent
    | AilmentCuredEvent
    | FledEvent
    | FleeFailedEvent,
    Field(discriminator="result_type"),
]

_turn_result_adapter: TypeAdapter[Any] = TypeAdapter(AnyTurnResult)


def deserialize_turn_result(data: dict[str, Any]) -> TurnResult | None:
    """
    Deserialize a turn event from a dictionary.

    Args:
        data (dict[str, Any]):
            The dictionary produced by `model_dump` on an event.

    Returns:
        TurnResult | None:
            The rebuilt event, or None if the result type is unknown.

    """
    result_type = data.get("result_type")
    if result_type not in _RESULT_TYPES:
        log_warning(
            "Unknown turn result type",
            {"result_type": result_type},
        )
        return None
    return _turn_result_adapter.validate_python(data)


_RESULT_TYPES: set[str] = {
    cls.model_fields["result_type"].default for cls in TurnResult.__subclasses__()
}
