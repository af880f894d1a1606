"""
IPL loader (imperative shell).

This module is IO by design: it reads IPL files from disk and hands the bytes
to the pure core in `n64cic.core.cic`. Keep it out of the functional core.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from ..core.cic import IPL_SIZE, Cic, IplSizeError, Variant, identify

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_ipl(path: PathLike) -> bytes:
    """Read exactly ``IPL_SIZE`` bytes from ``path``.

    Raises ``IplSizeError`` when the file is any other size. ``OSError`` from
    opening or reading the file propagates unchanged.
    """
    p = Path(path)
    with p.open("rb") as f:
        size = os.fstat(f.fileno()).st_size
        if size != IPL_SIZE:
            raise IplSizeError(expected=IPL_SIZE, actual=size, source=str(p))
        data = f.read(IPL_SIZE + 1)
    if len(data) != IPL_SIZE:
        # File changed between fstat and read.
        raise IplSizeError(expected=IPL_SIZE, actual=len(data), source=str(p))
    logger.debug("loaded IPL %s (%d bytes)", p, len(data))
    return data


def read_cic(path: PathLike) -> Cic:
    """Load and identify the IPL at ``path``."""
    cic = identify(load_ipl(path))
    if cic.variant is Variant.UNKNOWN:
        logger.warning("unrecognized IPL %s; using default checksum constants", path)
    else:
        logger.debug("identified %s from %s", cic, path)
    return cic
