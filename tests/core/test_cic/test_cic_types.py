"""Tests for Cic / VariantParams construction rules."""

from __future__ import annotations

import dataclasses

import pytest

from n64cic.core.cic.errors import CicError, IplSizeError
from n64cic.core.cic.types import IPL_SIZE, Cic, FoldRule, Variant, VariantParams


def test_ipl_size_constant() -> None:
    assert IPL_SIZE == 4032


@pytest.mark.parametrize(
    "variant, label",
    [
        (Variant.CIC6101, "NUS-CIC-6101"),
        (Variant.CIC6102, "NUS-CIC-6102"),
        (Variant.CIC6103, "NUS-CIC-6103"),
        (Variant.CIC6105, "NUS-CIC-6105"),
        (Variant.CIC6106, "NUS-CIC-6106"),
        (Variant.CIC7102, "NUS-CIC-7102"),
        (Variant.UNKNOWN, "Unknown"),
    ],
)
def test_display_labels(variant: Variant, label: str) -> None:
    cic = Cic(variant, bytes(IPL_SIZE))
    assert str(variant) == label
    assert str(cic) == label
    assert repr(cic) == label


@pytest.mark.parametrize("size", [0, IPL_SIZE - 1, IPL_SIZE + 1, 0x1000])
def test_cic_rejects_wrong_ipl_size(size: int) -> None:
    with pytest.raises(IplSizeError) as excinfo:
        Cic(Variant.CIC6102, bytes(size))
    assert excinfo.value.expected == IPL_SIZE
    assert excinfo.value.actual == size
    assert isinstance(excinfo.value, CicError)
    assert isinstance(excinfo.value, ValueError)


def test_cic_copies_bytearray_to_bytes() -> None:
    buf = bytearray(IPL_SIZE)
    cic = Cic(Variant.CIC6102, buf)
    buf[0] = 0xFF
    assert isinstance(cic.ipl, bytes)
    assert cic.ipl[0] == 0


def test_cic_is_frozen() -> None:
    cic = Cic(Variant.CIC6102, bytes(IPL_SIZE))
    with pytest.raises(dataclasses.FrozenInstanceError):
        cic.variant = Variant.CIC6103  # type: ignore[misc]


def test_cic_rejects_non_bytes() -> None:
    with pytest.raises(TypeError):
        Cic(Variant.CIC6102, [0] * IPL_SIZE)  # type: ignore[arg-type]


def test_cic_rejects_non_variant() -> None:
    with pytest.raises(TypeError):
        Cic("NUS-CIC-6102", bytes(IPL_SIZE))  # type: ignore[arg-type]


def test_cic_equality_by_value() -> None:
    assert Cic(Variant.CIC6102, bytes(IPL_SIZE)) == Cic(Variant.CIC6102, bytes(IPL_SIZE))
    assert Cic(Variant.CIC6102, bytes(IPL_SIZE)) != Cic(Variant.CIC6103, bytes(IPL_SIZE))


def test_variant_params_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        VariantParams(variant=Variant.CIC6102, initial_seed=-1)
    with pytest.raises(ValueError):
        VariantParams(variant=Variant.CIC6102, initial_seed=0, entry_offset=1 << 32)
    with pytest.raises(TypeError):
        VariantParams(variant=Variant.CIC6102, initial_seed=0, fold="xor")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        VariantParams(variant=Variant.CIC6102, initial_seed=0, uses_ipl_table=1)  # type: ignore[arg-type]


def test_variant_params_label() -> None:
    p = VariantParams(variant=Variant.CIC6103, initial_seed=0, fold=FoldRule.ADD)
    assert p.label == "NUS-CIC-6103"
