#!/usr/bin/env python3
"""
CIC inspection helper.

Identifies the boot chip for an IPL file and, optionally, computes the boot
checksums for a program image (plus filesystem blob) and the adjusted entry
point.

Environment:
  N64CIC_IPL_PATH   default IPL path when none is given on the command line
  N64CIC_LOG_LEVEL  logging level (default: WARNING)

Example:
  python3 tools/cic_inspect.py ipl3.bin --program game.bin --entry-point 0x80000400
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from n64cic.core.cic import (
    Cic,
    IplSizeError,
    compute_checksums,
    ipl_crc32,
    offset_entry_point,
)
from n64cic.integration.ipl_loader import read_cic


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _env_log_level(name: str, default: int) -> int:
    raw = _env_str(name, "")
    if not raw:
        return default
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        return default
    return level


def _parse_hex_u32(text: str) -> int:
    s = text.strip()
    if s[:2].lower() == "0x":
        s = s[2:]
    try:
        v = int(s, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex integer: {text!r}") from None
    if not (0 <= v <= 0xFFFF_FFFF):
        raise argparse.ArgumentTypeError(f"not a u32: {text!r}")
    return v


def build_report(
    cic: Cic,
    *,
    program: bytes | None = None,
    fs: bytes = b"",
    entry_point: int | None = None,
) -> dict[str, Any]:
    report: dict[str, Any] = {
        "cic": cic.variant.label,
        "ipl_crc32": f"0x{ipl_crc32(cic.ipl):08x}",
    }
    if program is not None:
        crc1, crc2 = compute_checksums(cic, program, fs)
        report["crc1"] = f"0x{crc1:08x}"
        report["crc2"] = f"0x{crc2:08x}"
    if entry_point is not None:
        report["entry_point"] = f"0x{offset_entry_point(cic, entry_point):08x}"
    return report


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Identify a CIC from its IPL and compute boot checksums.")
    p.add_argument("ipl", nargs="?", type=Path, help="Path to a 4032-byte IPL (default: $N64CIC_IPL_PATH)")
    p.add_argument("--program", type=Path, help="Program image to checksum")
    p.add_argument("--fs", type=Path, help="Filesystem blob appended after the program")
    p.add_argument("--entry-point", type=_parse_hex_u32, help="Boot entry point to offset, in hex (e.g. 0x80000400 or 80000400)")
    p.add_argument("--json", action="store_true", help="Emit the report as a JSON object")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=_env_log_level("N64CIC_LOG_LEVEL", logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    ipl_path = args.ipl
    if ipl_path is None:
        env_path = _env_str("N64CIC_IPL_PATH", "")
        if not env_path:
            print("cic_inspect error: no IPL path given and N64CIC_IPL_PATH is unset", file=sys.stderr)
            return 2
        ipl_path = Path(env_path)

    try:
        cic = read_cic(ipl_path)
        program = args.program.read_bytes() if args.program is not None else None
        fs = args.fs.read_bytes() if args.fs is not None else b""
    except (OSError, IplSizeError) as exc:
        print(f"cic_inspect error: {exc}", file=sys.stderr)
        return 1

    report = build_report(cic, program=program, fs=fs, entry_point=args.entry_point)
    if args.json:
        print(json.dumps(report, sort_keys=True))
    else:
        for key, value in report.items():
            print(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
