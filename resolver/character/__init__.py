"""
Character system module for the turn resolver.

This module handles the combatants of a battle: their stats, classes and
spell learn tables, inventories and equipment, transient status effects, the
party members and the enemies.
"""

from .character_class import (
    CLASS_TABLE,
    CharacterClass,
    PartyMemberKind,
    available_spells,
    spells_learned_at_level,
)
from .character_effects import CharacterEffects
from .character_inventory import Equipment, Inventory
from .character_stats import CombatStats, StatGrowth
from .enemy import (
    ENCOUNTER_KINDS,
    ENEMY_TABLE,
    Enemy,
    EnemyData,
    EnemyKind,
    generate_enemy_group,
    scale_enemy_stats,
)
from .party_member import PartyMember, default_party

__all__ = [
    # Import from character_class.py
    "CLASS_TABLE",
    "CharacterClass",
    "PartyMemberKind",
    "available_spells",
    "spells_learned_at_level",
    # Import from character_effects.py
    "CharacterEffects",
    # Import from character_inventory.py
    "Equipment",
    "Inventory",
    # Import from character_stats.py
    "CombatStats",
    "StatGrowth",
    # Import from enemy.py
    "ENCOUNTER_KINDS",
    "ENEMY_TABLE",
    "Enemy",
    "EnemyData",
    "EnemyKind",
    "generate_enemy_group",
    "scale_enemy_stats",
    # Import from party_member.py
    "PartyMember",
    "default_party",
]
