"""
branchseed: Seeded Random Module

A tiny linear-congruential generator seeded from a string. It is NOT a
statistically strong or secure PRNG; it exists so that one branch id always
produces the same sample data, and so that output matches the dashboard's
built-in generator draw for draw.

Seeding folds the UTF-16 code units of the seed string:

    acc = int32(int32(acc) << 5) - acc + unit

Only the shifted term wraps to 32 bits, so the folded value may leave the
int32 range (e.g. "BR-2024-001" hashes to -3222406975).

Each draw advances:

    state = (state * 9301 + 49297) mod 233280

with a floored modulo, so draws always land in [0, 1) even when the seed
hash is negative.

Example:
    >>> rng = SeededRandom("branch-001")
    >>> rng.next_int(1, 6)
    3
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional, TypeVar

from .exceptions import EmptyPoolError

T = TypeVar("T")


# =============================================================================
# Constants
# =============================================================================

DEFAULT_SEED = "default"

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


# =============================================================================
# Hashing
# =============================================================================

def _to_int32(value: int) -> int:
    """Reinterpret the low 32 bits of value as a signed integer."""
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def _utf16_units(text: str) -> list[int]:
    """Return the UTF-16 code units of text (astral chars become surrogate pairs)."""
    data = text.encode("utf-16-le", errors="surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def hash_seed(seed: str) -> int:
    """
    Fold a seed string into an integer.

    Args:
        seed: Seed string (not normalized; "" hashes to 0)

    Returns:
        Integer hash, possibly outside the int32 range
    """
    acc = 0
    for unit in _utf16_units(seed):
        acc = _to_int32(acc << 5) - acc + unit
    return acc


def normalize_seed(seed: Optional[str]) -> str:
    """Substitute the default seed for empty or missing seeds."""
    if not seed:
        return DEFAULT_SEED
    return seed


# =============================================================================
# Generator
# =============================================================================

class SeededRandom:
    """
    String-seeded linear-congruential generator.

    Usage:
        >>> rng = SeededRandom("branch-001")
        >>> region = rng.choice(["Lagos State", "Ogun State"])
        >>> officers = rng.next_int(5, 15)
    """

    def __init__(self, seed: Optional[str] = None) -> None:
        self.seed = normalize_seed(seed)
        self._state = hash_seed(self.seed)

    @property
    def state(self) -> int:
        """Current internal state."""
        return self._state

    def next(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._state / LCG_MODULUS

    def next_int(self, low: int, high: int) -> int:
        """
        Return an integer in [low, high], both bounds inclusive.

        Bounds are not validated; with high < low the result is whatever the
        formula floor(next() * (high - low + 1)) + low yields.
        """
        return math.floor(self.next() * (high - low + 1)) + low

    def next_float(self, low: float, high: float) -> float:
        """Return a float in [low, high)."""
        return self.next() * (high - low) + low

    def choice(self, seq: Sequence[T]) -> T:
        """Return one element of seq."""
        if not seq:
            raise EmptyPoolError("Cannot choose from an empty sequence")
        return seq[int(self.next() * len(seq))]


__all__ = [
    "DEFAULT_SEED",
    "LCG_MULTIPLIER",
    "LCG_INCREMENT",
    "LCG_MODULUS",
    "hash_seed",
    "normalize_seed",
    "SeededRandom",
]
