"""`cic`: boot-security chip identification and boot checksums.

Pure, deterministic functions over immutable buffers:
- `identify(ipl) -> Cic` classifies a 4032-byte IPL by its CRC-32,
- `compute_checksums(cic, program, fs) -> (crc1, crc2)` runs the six-accumulator
  checksum over the 1 MiB boot window,
- `offset_entry_point(cic, entry_point) -> int` applies the chip's entry offset,
- `get_ipl(cic) -> bytes` returns the IPL the chip was identified from.

Per-chip constants come from `n64cic/kernels/cic/cic_variants_v1.yaml`.
"""

from .checksum import checksum_window, compute_checksums, fold_accumulators
from .entry_point import offset_entry_point
from .errors import CicError, CicRegistryError, IplSizeError
from .identify import get_ipl, identify, ipl_crc32
from .registry import params_for, variant_for_crc32, variant_table
from .types import IPL_SIZE, PROGRAM_SIZE, Cic, FoldRule, Variant, VariantParams

__all__ = [
    "identify",
    "ipl_crc32",
    "get_ipl",
    "compute_checksums",
    "checksum_window",
    "fold_accumulators",
    "offset_entry_point",
    "params_for",
    "variant_for_crc32",
    "variant_table",
    "IPL_SIZE",
    "PROGRAM_SIZE",
    "Cic",
    "FoldRule",
    "Variant",
    "VariantParams",
    "CicError",
    "CicRegistryError",
    "IplSizeError",
]
