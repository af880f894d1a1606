"""Per-variant boot entry-point adjustment."""

from __future__ import annotations

from .math import add32, is_u32
from .registry import params_for
from .types import Cic, Variant


def offset_entry_point(cic: Cic | Variant, entry_point: int) -> int:
    """``entry_point + entry_offset`` for the chip, wrapped to u32.

    CIC-6103 and CIC-6106 boot at +1 MiB and +2 MiB; every other variant
    (including ``UNKNOWN``) leaves the address unchanged.
    """
    if isinstance(entry_point, bool) or not isinstance(entry_point, int):
        raise TypeError("entry_point must be an int")
    if not is_u32(entry_point):
        raise ValueError(f"entry_point must be a u32: {entry_point:#x}")
    variant = cic.variant if isinstance(cic, Cic) else cic
    return add32(entry_point, params_for(variant).entry_offset)
