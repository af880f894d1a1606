"""
Core boot-checksum algorithms (pure, no I/O)
"""

from .cic import (
    Cic,
    Variant,
    compute_checksums,
    get_ipl,
    identify,
    offset_entry_point,
)

__all__ = [
    "Cic",
    "Variant",
    "compute_checksums",
    "get_ipl",
    "identify",
    "offset_entry_point",
]
