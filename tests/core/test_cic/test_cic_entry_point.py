"""Tests for per-variant entry-point offsets."""

from __future__ import annotations

import pytest

from n64cic.core.cic import IPL_SIZE, Cic, Variant, offset_entry_point


@pytest.mark.parametrize(
    "variant, expected",
    [
        (Variant.CIC6101, 0x8000_0400),
        (Variant.CIC6102, 0x8000_0400),
        (Variant.CIC6103, 0x8010_0400),
        (Variant.CIC6105, 0x8000_0400),
        (Variant.CIC6106, 0x8020_0400),
        (Variant.CIC7102, 0x8000_0400),
        (Variant.UNKNOWN, 0x8000_0400),
    ],
)
def test_offset(variant: Variant, expected: int) -> None:
    cic = Cic(variant, bytes(IPL_SIZE))
    assert offset_entry_point(cic, 0x8000_0400) == expected
    assert offset_entry_point(variant, 0x8000_0400) == expected


def test_offset_wraps() -> None:
    assert offset_entry_point(Variant.CIC6106, 0xFFF0_0000) == 0x0010_0000
    assert offset_entry_point(Variant.CIC6103, 0xFFFF_FFFF) == 0x000F_FFFF


def test_offset_rejects_out_of_range() -> None:
    with pytest.raises(ValueError):
        offset_entry_point(Variant.CIC6102, -1)
    with pytest.raises(ValueError):
        offset_entry_point(Variant.CIC6102, 1 << 32)


def test_offset_rejects_non_int() -> None:
    with pytest.raises(TypeError):
        offset_entry_point(Variant.CIC6102, True)
    with pytest.raises(TypeError):
        offset_entry_point(Variant.CIC6102, "0x80000400")  # type: ignore[arg-type]
