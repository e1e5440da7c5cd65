"""
Actions module for the turn resolver.

This module contains the commands a party member can be given for a turn and
the spell catalog they draw from.
"""

from .base_action import (
    AttackAction,
    BaseAction,
    BattleAction,
    FleeAction,
    SpellAction,
    UseItemAction,
)
from .spells import SPELL_TABLE, SpellData, SpellKind, all_spells

__all__ = [
    # Import from base_action.py
    "AttackAction",
    "BaseAction",
    "BattleAction",
    "FleeAction",
    "SpellAction",
    "UseItemAction",
    # Import from spells
    "SPELL_TABLE",
    "SpellData",
    "SpellKind",
    "all_spells",
]
