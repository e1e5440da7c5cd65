"""
Source root of the deterministic JRPG turn resolver.

The packages below it (core, character, items, actions, effects, combat) are
imported as top-level packages.
"""
