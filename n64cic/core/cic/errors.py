"""Exception types for the CIC boot-checksum core.

The pure computations never raise on well-typed input; these cover the two
edges that can: an IPL of the wrong size, and a malformed variant table.
I/O failures are left as the builtin ``OSError`` raised by the caller's read.
"""

from __future__ import annotations


class CicError(Exception):
    """Base class for every error raised by ``n64cic``."""


class IplSizeError(CicError, ValueError):
    """Raised when an IPL buffer or file is not exactly ``IPL_SIZE`` bytes."""

    def __init__(self, *, expected: int, actual: int, source: str | None = None) -> None:
        self.expected = int(expected)
        self.actual = int(actual)
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"expected IPL size {self.expected}, found {self.actual}{where}")


class CicRegistryError(CicError):
    """Raised when the variant constant table fails validation."""
