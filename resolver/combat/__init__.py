"""
Combat system module for the turn resolver.

This module handles the damage formulas, the random factor bundle, the enemy
action heuristic and the turn resolver that ties them together.
"""

from .combat_manager import BattleState
from .damage import (
    calculate_ailment_success,
    calculate_heal_amount,
    calculate_mp_drain,
    calculate_physical_damage,
    calculate_spell_damage,
)
from .npc_ai import EnemySelection, choose_enemy_action, first_affordable_spell
from .random_factors import TurnRandomFactors

__all__ = [
    # Import from combat_manager.py
    "BattleState",
    # Import from damage.py
    "calculate_ailment_success",
    "calculate_heal_amount",
    "calculate_mp_drain",
    "calculate_physical_damage",
    "calculate_spell_damage",
    # Import from npc_ai.py
    "EnemySelection",
    "choose_enemy_action",
    "first_affordable_spell",
    # Import from random_factors.py
    "TurnRandomFactors",
]
