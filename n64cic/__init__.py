"""
n64cic: N64 CIC identification and boot checksums.

- `n64cic.core` is the pure functional core (identification, checksums, entry
  point offsets).
- `n64cic.integration` is the imperative shell (reading IPL files).
"""

from .core.cic import (
    IPL_SIZE,
    PROGRAM_SIZE,
    Cic,
    CicError,
    CicRegistryError,
    IplSizeError,
    Variant,
    compute_checksums,
    get_ipl,
    identify,
    offset_entry_point,
)
from .integration import load_ipl, read_cic

__version__ = "0.1.0"

__all__ = [
    "IPL_SIZE",
    "PROGRAM_SIZE",
    "Cic",
    "CicError",
    "CicRegistryError",
    "IplSizeError",
    "Variant",
    "compute_checksums",
    "get_ipl",
    "identify",
    "offset_entry_point",
    "load_ipl",
    "read_cic",
]
