"""
Effects system module for the turn resolver.

This module contains the timed buffs applied by support spells and the event
types through which every outcome of a turn is reported.
"""

# Import modifier-based effects
from .modifier_effect import BuffState

# Import the event system.
from .event_system import (
    AilmentCuredEvent,
    AilmentInflictedEvent,
    AilmentResistedEvent,
    AnyTurnResult,
    AttackEvent,
    BuffedEvent,
    BuffExpiredEvent,
    DefeatedEvent,
    FledEvent,
    FleeFailedEvent,
    HealedEvent,
    ItemUsedEvent,
    MpDrainedEvent,
    PoisonDamageEvent,
    SleepingEvent,
    SpellDamageEvent,
    TurnResult,
    deserialize_turn_result,
)

__all__ = [
    # Modifier-based effects
    "BuffState",
    # Event system
    "AilmentCuredEvent",
    "AilmentInflictedEvent",
    "AilmentResistedEvent",
    "AnyTurnResult",
    "AttackEvent",
    "BuffedEvent",
    "BuffExpiredEvent",
    "DefeatedEvent",
    "FledEvent",
    "FleeFailedEvent",
    "HealedEvent",
    "ItemUsedEvent",
    "MpDrainedEvent",
    "PoisonDamageEvent",
    "SleepingEvent",
    "SpellDamageEvent",
    "TurnResult",
    "deserialize_turn_result",
]
