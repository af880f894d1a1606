"""Fixed-width 32-bit arithmetic for the checksum engine.

Python ints never overflow, so every operation here masks back to u32. The
accumulator-2 carry test compares against the *wrapped* sum, never a widened
one.
"""

from __future__ import annotations

U32_MASK: int = 0xFFFF_FFFF
U32_BITS: int = 32


def is_u32(x: object) -> bool:
    """True for a non-bool int in ``[0, 2**32)``."""
    return isinstance(x, int) and not isinstance(x, bool) and 0 <= x <= U32_MASK


def add32(a: int, b: int) -> int:
    return (a + b) & U32_MASK


def mul32(a: int, b: int) -> int:
    return (a * b) & U32_MASK


def rotl32(value: int, bits: int) -> int:
    """Rotate ``value`` left by ``bits`` (taken mod 32)."""
    bits &= U32_BITS - 1
    if bits == 0:
        return value & U32_MASK
    return ((value << bits) | (value >> (U32_BITS - bits))) & U32_MASK


def add32_carry(a: int, b: int) -> tuple[int, bool]:
    """Wrapped ``a + b`` and whether it wrapped (``result < b``)."""
    total = (a + b) & U32_MASK
    return total, total < b
