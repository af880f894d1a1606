"""IPL identification by content hash."""

from __future__ import annotations

import zlib

from .registry import variant_for_crc32
from .types import Cic


def ipl_crc32(ipl: bytes | bytearray | memoryview) -> int:
    """CRC-32 (reflected, poly 0xEDB88320) of the whole IPL."""
    return zlib.crc32(ipl) & 0xFFFF_FFFF


def identify(ipl: bytes | bytearray | memoryview) -> Cic:
    """Classify an already-loaded 4032-byte IPL.

    Always yields a `Cic`; an IPL with no known hash is `Variant.UNKNOWN`.
    Raises `IplSizeError` only when handed a buffer of the wrong size.
    """
    return Cic(variant=variant_for_crc32(ipl_crc32(ipl)), ipl=bytes(ipl))


def get_ipl(cic: Cic) -> bytes:
    """The IPL owned by ``cic`` (not copied)."""
    return cic.ipl
