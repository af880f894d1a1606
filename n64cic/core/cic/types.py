"""Data types for the CIC boot-checksum core.

``Variant`` is the closed set of recognized chips. The per-chip constants live
in ``VariantParams`` rows loaded by ``registry.py``; a ``Cic`` pairs a variant
with the 4032-byte IPL it was identified from.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

from .errors import IplSizeError
from .math import is_u32

IPL_SIZE: int = 0x0FC0
PROGRAM_SIZE: int = 1024 * 1024


@unique
class Variant(Enum):
    """One member per known CIC part, plus ``UNKNOWN``."""
    CIC6101 = "NUS-CIC-6101"
    CIC6102 = "NUS-CIC-6102"
    CIC6103 = "NUS-CIC-6103"
    CIC6105 = "NUS-CIC-6105"
    CIC6106 = "NUS-CIC-6106"
    CIC7102 = "NUS-CIC-7102"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@unique
class FoldRule(Enum):
    """How the six accumulators collapse into ``(crc1, crc2)``."""
    XOR = "xor"
    ADD = "add"
    MUL = "mul"


@dataclass(frozen=True)
class VariantParams:
    """Algorithm constants for one variant (one row of the variant table)."""

    variant: Variant
    initial_seed: int
    fold: FoldRule = FoldRule.XOR
    entry_offset: int = 0
    uses_ipl_table: bool = False
    ipl_crc32: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.variant, Variant):
            raise TypeError("variant must be a Variant")
        if not isinstance(self.fold, FoldRule):
            raise TypeError("fold must be a FoldRule")
        if not isinstance(self.uses_ipl_table, bool):
            raise TypeError("uses_ipl_table must be a bool")
        for name, val in (
            ("initial_seed", self.initial_seed),
            ("entry_offset", self.entry_offset),
        ):
            if not is_u32(val):
                raise ValueError(f"{name} must be a u32: {val!r}")
        if self.ipl_crc32 is not None and not is_u32(self.ipl_crc32):
            raise ValueError(f"ipl_crc32 must be a u32: {self.ipl_crc32!r}")

    @property
    def label(self) -> str:
        return self.variant.label


@dataclass(frozen=True, repr=False)
class Cic:
    """A classified chip: its variant and the IPL it owns."""

    variant: Variant
    ipl: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.variant, Variant):
            raise TypeError("variant must be a Variant")
        if isinstance(self.ipl, (bytearray, memoryview)):
            object.__setattr__(self, "ipl", bytes(self.ipl))
        elif not isinstance(self.ipl, bytes):
            raise TypeError("ipl must be bytes-like")
        if len(self.ipl) != IPL_SIZE:
            raise IplSizeError(expected=IPL_SIZE, actual=len(self.ipl))

    def __str__(self) -> str:
        return self.variant.label

    __repr__ = __str__
