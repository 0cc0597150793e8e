"""Tests for fixed-width unsigned integers."""

import pytest

from finitefield.errors import (
    ArithmeticOverflowError,
    DivisionByZeroResidueError,
    ModulusUnderflowError,
    RingMismatchError,
)
from finitefield.numeric.uint import Uint


def test_default_width_is_256_bits():
    assert Uint(7).bits == 256
    assert Uint(7, limbs=8).bits == 512


def test_out_of_range_rejected():
    with pytest.raises(ArithmeticOverflowError):
        Uint(1 << 64, limbs=1)
    with pytest.raises(ArithmeticOverflowError):
        Uint(-1)


def test_zero_limbs_rejected():
    with pytest.raises(ValueError, match="limb"):
        Uint(0, limbs=0)


def test_limbs_round_trip():
    x = Uint((3 << 64) | 5, limbs=2)
    assert x.to_limbs() == (5, 3)
    assert Uint.from_limbs([5, 3]) == x


def test_checked_sub_underflow():
    assert Uint(7).checked_sub(Uint(2)) == Uint(5)
    with pytest.raises(ModulusUnderflowError, match="underflow"):
        Uint(1).checked_sub(Uint(2))


def test_checked_add_overflow():
    top = Uint(0, limbs=1).max()
    with pytest.raises(ArithmeticOverflowError):
        top.checked_add(top.one())


def test_checked_mul_overflow():
    big = Uint(1 << 32, limbs=1)
    with pytest.raises(ArithmeticOverflowError):
        big.checked_mul(big)


def test_wrapping_ops():
    top = Uint(0, limbs=1).max()
    assert top.wrapping_add(top.one()) == Uint(0, limbs=1)
    assert Uint(0, limbs=1).wrapping_sub(Uint(1, limbs=1)) == top
    big = Uint(1 << 32, limbs=1)
    assert big.wrapping_mul(big) == Uint(0, limbs=1)


def test_mod():
    assert Uint(9) % Uint(7) == Uint(2)
    with pytest.raises(DivisionByZeroResidueError):
        Uint(9) % Uint(0)


def test_width_mismatch():
    with pytest.raises(RingMismatchError):
        Uint(1, limbs=4).checked_add(Uint(1, limbs=8))


def test_comparison_width_mismatch():
    with pytest.raises(RingMismatchError):
        Uint(1, limbs=4) < Uint(2, limbs=8)
    with pytest.raises(RingMismatchError):
        Uint(1, limbs=4) >= Uint(2, limbs=8)


def test_ordering_and_int():
    assert Uint(3) < Uint(4)
    assert int(Uint(42)) == 42
    assert Uint(2).is_odd() is False
