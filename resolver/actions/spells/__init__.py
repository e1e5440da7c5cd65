"""
Spell catalog for the turn resolver.
"""

from .base_spell import SPELL_TABLE, SpellData, SpellKind, all_spells

__all__ = [
    "SPELL_TABLE",
    "SpellData",
    "SpellKind",
    "all_spells",
]
