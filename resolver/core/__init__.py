"""
Core system module for the turn resolver.

This module contains the fundamental components shared by every other
package: battle constants and enumerations, error types, logging setup and
console display utilities.
"""

from .actor import ActorId
from .constants import (
    BUFF_DURATION,
    DAMAGE_RANDOM_MAX,
    DAMAGE_RANDOM_MIN,
    ENEMY_SPELL_THRESHOLD,
    FLEE_SUCCESS_THRESHOLD,
    POISON_DAMAGE,
    Ailment,
    BuffStat,
    ItemCategory,
    NiceEnum,
    Side,
    SpellEffect,
    TargetShape,
)
from .error_handling import BattleInputError, GameException
from .logging import get_logger, setup_logging
from .utils import ccapture, cprint, crule, make_bar

__all__ = [
    # Import from actor.py
    "ActorId",
    # Import from constants.py
    "BUFF_DURATION",
    "DAMAGE_RANDOM_MAX",
    "DAMAGE_RANDOM_MIN",
    "ENEMY_SPELL_THRESHOLD",
    "FLEE_SUCCESS_THRESHOLD",
    "POISON_DAMAGE",
    "Ailment",
    "BuffStat",
    "ItemCategory",
    "NiceEnum",
    "Side",
    "SpellEffect",
    "TargetShape",
    # Import from error_handling.py
    "BattleInputError",
    "GameException",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
