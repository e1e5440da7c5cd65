"""
Damage module for the resolver.

Computes damage, healing, MP drain and ailment success from a caller-supplied
random factor. Every formula runs in single precision and rounds half away
from zero, so that the same inputs always give the same integer on every
platform.
"""

import math
import struct


def to_f32(value: float) -> float:
    """
    Rounds a Python float to the nearest single precision value.

    Args:
        value (float): The value to round.

    Returns:
        float: The value as it would be stored in a 32-bit float.

    """
    return struct.unpack("<f", struct.pack("<f", value))[0]


def round_half_away(value: float) -> int:
    """
    Rounds to the nearest integer, ties going away from zero.

    The builtin `round` sends ties to the even neighbour, which would turn
    2.5 into 2 instead of 3.
    """
    rounded = int(math.floor(abs(value) + 0.5))
    return rounded if value >= 0 else -rounded


def _scaled(base: float, random_factor: float) -> int:
    # Both operands hold at most 24 significant bits, so the double product is
    # exact and a single rounding to f32 gives the single precision product.
    return round_half_away(to_f32(base * to_f32(random_factor)))


def calculate_physical_damage(attack: int, defense: int, random_factor: float) -> int:
    """
    Damage of a physical attack: (attack - defense / 2) x random, at least 1.

    Args:
        attack (int): The effective attack of the attacker.
        defense (int): The effective defense of the target.
        random_factor (float): The slot random factor, in [0.8, 1.2].

    Returns:
        int: The damage dealt.

    """
    base = to_f32(attack - defense / 2.0)
    return max(_scaled(base, random_factor), 1)


def calculate_spell_damage(power: int, defense: int, random_factor: float) -> int:
    """
    Damage of an offensive spell: (power - defense / 4) x random, at least 1.

    Args:
        power (int): The power of the spell.
        defense (int): The effective defense of the target.
        random_factor (float): The slot random factor, in [0.8, 1.2].

    Returns:
        int: The damage dealt.

    """
    base = to_f32(power - defense / 4.0)
    return max(_scaled(base, random_factor), 1)


def calculate_heal_amount(power: int, random_factor: float) -> int:
    """HP restored by a healing spell or item: power x random, at least 1."""
    return max(_scaled(to_f32(power), random_factor), 1)


def calculate_mp_drain(power: int, random_factor: float) -> int:
    """MP removed by a drain spell: power x random, at least 1."""
    return max(_scaled(to_f32(power), random_factor), 1)


def calculate_ailment_success(success_rate: int, random_factor: float) -> bool:
    """
    Checks if an ailment takes hold.

    Args:
        success_rate (int): The success rate of the spell, between 0 and 100.
        random_factor (float): The ailment random, in [0, 1].

    Returns:
        bool: True if random x 100 is strictly below the success rate.

    """
    return to_f32(to_f32(random_factor) * 100.0) < success_rate
