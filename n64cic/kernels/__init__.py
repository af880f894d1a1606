"""
Kernel data layer.

- `n64cic/kernels/cic/` holds the read-only variant constant tables (.yaml)
  consumed by `n64cic.core.cic.registry`.
"""
