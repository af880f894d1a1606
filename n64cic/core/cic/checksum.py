"""Boot checksum engine.

``compute_checksums(cic, program, fs)`` returns the ``(crc1, crc2)`` pair the
console's boot ROM recomputes over the first 1 MiB after the IPL:

1. Build the checksum window: program, one zero pad byte if the program length
   is odd, filesystem, zero fill; truncated to ``PROGRAM_SIZE``.
2. Run six u32 accumulators over the window one big-endian word at a time.
3. Fold the accumulators into two words with the variant's rule.

Every input produces a result; there is no failure path.
"""

from __future__ import annotations

import struct
from typing import Sequence, Union

from .math import U32_MASK, add32, add32_carry, mul32, rotl32
from .registry import ipl_table_window, params_for
from .types import PROGRAM_SIZE, Cic, FoldRule

BytesLike = Union[bytes, bytearray, memoryview]

WORD_COUNT: int = PROGRAM_SIZE // 4

_WINDOW_WORDS = struct.Struct(f">{WORD_COUNT}I")


def checksum_window(program: BytesLike, fs: BytesLike) -> bytes:
    """The zero-filled, 2-byte-aligned, truncated 1 MiB working buffer."""
    window = bytearray(PROGRAM_SIZE)
    n = min(len(program), PROGRAM_SIZE)
    window[:n] = program[:n]
    pos = len(program) + (len(program) & 1)
    if pos < PROGRAM_SIZE:
        take = min(len(fs), PROGRAM_SIZE - pos)
        window[pos:pos + take] = fs[:take]
    return bytes(window)


def ipl_table_words(ipl: bytes) -> tuple[int, ...]:
    """The big-endian words of the IPL mixing window (CIC-6105 only)."""
    window = ipl_table_window()
    start = window.word_offset * 4
    end = start + window.word_count * 4
    return struct.unpack(f">{window.word_count}I", ipl[start:end])


def fold_accumulators(rule: FoldRule, accs: Sequence[int]) -> tuple[int, int]:
    """Collapse ``acc1..acc6`` into ``(crc1, crc2)``."""
    acc1, acc2, acc3, acc4, acc5, acc6 = accs
    if rule is FoldRule.XOR:
        return acc1 ^ acc2 ^ acc3, acc4 ^ acc5 ^ acc6
    if rule is FoldRule.ADD:
        return add32(acc1 ^ acc2, acc3), add32(acc4 ^ acc5, acc6)
    if rule is FoldRule.MUL:
        return add32(mul32(acc1, acc2), acc3), add32(mul32(acc4, acc5), acc6)
    raise ValueError(f"unknown fold rule: {rule!r}")


def compute_checksums(cic: Cic, program: BytesLike, fs: BytesLike = b"") -> tuple[int, int]:
    """Boot checksums ``(crc1, crc2)`` for ``program`` + ``fs`` under ``cic``."""
    params = params_for(cic.variant)
    words = _WINDOW_WORDS.unpack(checksum_window(program, fs))

    table: tuple[int, ...] = ()
    if params.uses_ipl_table:
        table = ipl_table_words(cic.ipl)
    table_len = len(table)

    seed = params.initial_seed
    acc1 = acc2 = acc3 = acc4 = acc5 = acc6 = seed

    for i, current in enumerate(words):
        rotated = rotl32(current, current & 0x1F)

        acc1, carry = add32_carry(acc1, current)
        if carry:
            acc2 = (acc2 + 1) & U32_MASK

        acc3 ^= current
        acc4 = (acc4 + rotated) & U32_MASK

        if acc5 > current:
            acc5 ^= rotated
        else:
            acc5 ^= acc1 ^ current

        if table_len:
            acc6 = (acc6 + (current ^ table[i % table_len])) & U32_MASK
        else:
            acc6 = (acc6 + (current ^ acc4)) & U32_MASK

    return fold_accumulators(params.fold, (acc1, acc2, acc3, acc4, acc5, acc6))
