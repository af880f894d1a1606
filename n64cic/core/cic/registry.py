"""Variant registry: the read-only table of per-chip constants.

The table lives in `n64cic/kernels/cic/cic_variants_v1.yaml` and is loaded
once per process. Lookups never mutate it; `variant_for_crc32()` is total
(anything not in the table is `Variant.UNKNOWN`).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import CicRegistryError
from .math import is_u32
from .types import IPL_SIZE, FoldRule, Variant, VariantParams

REGISTRY_VERSION = 1


@dataclass(frozen=True)
class IplTableWindow:
    """Word window of the IPL used as the accumulator-6 mixing source."""

    word_offset: int
    word_count: int

    def __post_init__(self) -> None:
        for name, val in (("word_offset", self.word_offset), ("word_count", self.word_count)):
            if not isinstance(val, int) or isinstance(val, bool):
                raise TypeError(f"{name} must be an int")
        if self.word_count <= 0:
            raise ValueError(f"word_count must be positive: {self.word_count}")
        if self.word_offset < 0 or (self.word_offset + self.word_count) * 4 > IPL_SIZE:
            raise ValueError(
                f"IPL table window [{self.word_offset}, +{self.word_count}) exceeds the IPL"
            )


@dataclass(frozen=True)
class VariantTable:
    """Validated contents of one variant table file."""

    version: int
    ipl_table: IplTableWindow
    params: Mapping[Variant, VariantParams]
    by_crc32: Mapping[int, Variant]


def _table_path() -> Path:
    # n64cic/core/cic/registry.py -> n64cic/ -> kernels/cic/cic_variants_v1.yaml
    return Path(__file__).resolve().parents[2] / "kernels" / "cic" / "cic_variants_v1.yaml"


def _require_u32(row: Mapping[str, Any], key: str, *, where: str) -> int:
    if key not in row:
        raise CicRegistryError(f"{where}: missing {key}")
    val = row[key]
    if not is_u32(val):
        raise CicRegistryError(f"{where}: {key} must be a u32, got {val!r}")
    return int(val)


def _parse_row(row: Any, index: int) -> VariantParams:
    where = f"variants[{index}]"
    if not isinstance(row, Mapping):
        raise CicRegistryError(f"{where}: row must be a mapping")

    raw_id = row.get("id")
    try:
        variant = Variant[str(raw_id)]
    except KeyError:
        raise CicRegistryError(f"{where}: unknown variant id {raw_id!r}") from None

    raw_fold = row.get("fold", FoldRule.XOR.value)
    try:
        fold = FoldRule(raw_fold)
    except ValueError:
        raise CicRegistryError(f"{where}: unknown fold rule {raw_fold!r}") from None

    uses_ipl_table = row.get("uses_ipl_table", False)
    if not isinstance(uses_ipl_table, bool):
        raise CicRegistryError(f"{where}: uses_ipl_table must be a bool")

    crc = row.get("ipl_crc32")
    if variant is Variant.UNKNOWN:
        if crc is not None:
            raise CicRegistryError(f"{where}: UNKNOWN must not carry an ipl_crc32")
    elif not is_u32(crc):
        raise CicRegistryError(f"{where}: ipl_crc32 must be a u32, got {crc!r}")

    return VariantParams(
        variant=variant,
        initial_seed=_require_u32(row, "initial_seed", where=where),
        fold=fold,
        entry_offset=_require_u32(row, "entry_offset", where=where),
        uses_ipl_table=uses_ipl_table,
        ipl_crc32=crc,
    )


def parse_variant_table(obj: Any) -> VariantTable:
    """Validate a decoded variant table document.

    Every `Variant` member must appear exactly once and known hashes must be
    unique, so the hash → variant mapping is a function.
    """
    if not isinstance(obj, Mapping):
        raise CicRegistryError("variant table must be a mapping")
    if obj.get("version") != REGISTRY_VERSION:
        raise CicRegistryError(f"unsupported variant table version: {obj.get('version')!r}")

    window = obj.get("ipl_table")
    if not isinstance(window, Mapping):
        raise CicRegistryError("ipl_table must be a mapping")
    try:
        ipl_table = IplTableWindow(
            word_offset=window.get("word_offset"),
            word_count=window.get("word_count"),
        )
    except (TypeError, ValueError) as exc:
        raise CicRegistryError(f"ipl_table: {exc}") from exc

    rows = obj.get("variants")
    if not isinstance(rows, list):
        raise CicRegistryError("variants must be a list")

    params: dict[Variant, VariantParams] = {}
    by_crc32: dict[int, Variant] = {}
    for i, row in enumerate(rows):
        p = _parse_row(row, i)
        if p.variant in params:
            raise CicRegistryError(f"duplicate variant: {p.variant.name}")
        params[p.variant] = p
        if p.ipl_crc32 is not None:
            if p.ipl_crc32 in by_crc32:
                raise CicRegistryError(
                    f"duplicate ipl_crc32 0x{p.ipl_crc32:08x}: "
                    f"{by_crc32[p.ipl_crc32].name} and {p.variant.name}"
                )
            by_crc32[p.ipl_crc32] = p.variant

    missing = [v.name for v in Variant if v not in params]
    if missing:
        raise CicRegistryError(f"variant table is missing: {', '.join(missing)}")

    return VariantTable(
        version=REGISTRY_VERSION,
        ipl_table=ipl_table,
        params=params,
        by_crc32=by_crc32,
    )


def load_variant_table(path: Path) -> VariantTable:
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    return parse_variant_table(obj)


@lru_cache(maxsize=1)
def variant_table() -> VariantTable:
    """The packaged variant table (loaded and validated once)."""
    return load_variant_table(_table_path())


def params_for(variant: Variant) -> VariantParams:
    return variant_table().params[variant]


def variant_for_crc32(crc: int) -> Variant:
    """Map an IPL CRC-32 to its variant; unmatched hashes are `UNKNOWN`."""
    return variant_table().by_crc32.get(crc, Variant.UNKNOWN)


def ipl_table_window() -> IplTableWindow:
    return variant_table().ipl_table
