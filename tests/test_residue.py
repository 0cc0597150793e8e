"""Tests for Montgomery residue arithmetic."""

import pytest

from finitefield.config import SECP256K1_PRIME
from finitefield.errors import InvalidOrderError, ModulusMismatchError
from finitefield.numeric.residue import Residue, ResidueParams, residue_params
from finitefield.numeric.uint import Uint


def _r(value, modulus):
    params = residue_params(Uint(modulus))
    return Residue.new(Uint(value), params)


def test_retrieve_inverts_new():
    assert _r(5, 7).retrieve() == Uint(5)


def test_new_reduces_wide_value():
    assert _r(9, 7).retrieve() == Uint(2)


def test_add_sub_mul():
    assert (_r(5, 7) + _r(6, 7)).retrieve() == Uint(4)
    assert (_r(5, 7) - _r(6, 7)).retrieve() == Uint(6)
    assert (_r(5, 7) * _r(6, 7)).retrieve() == Uint(2)


def test_pow():
    assert _r(3, 7).pow(Uint(3)).retrieve() == Uint(6)
    assert _r(2, 7).pow(Uint(8)).retrieve() == Uint(4)
    assert _r(2, 7).pow(Uint(0)).retrieve() == Uint(1)


def test_wide_modulus_matches_python():
    p = SECP256K1_PRIME
    a, b = p - 2, p - 3
    assert (_r(a, p) * _r(b, p)).retrieve() == Uint((a * b) % p)
    assert _r(a, p).pow(Uint(p - 2)).retrieve() == Uint(pow(a, p - 2, p))


def test_single_limb_modulus():
    m = (1 << 61) - 1
    params = residue_params(Uint(m, limbs=1))
    x = Residue.new(Uint(m - 1, limbs=1), params)
    assert (x * x).retrieve() == Uint(1, limbs=1)


def test_params_cached():
    assert residue_params(Uint(10007)) is residue_params(Uint(10007))


def test_even_modulus_rejected():
    with pytest.raises(InvalidOrderError, match="odd"):
        ResidueParams.new(Uint(8))


def test_mixed_moduli_rejected():
    with pytest.raises(ModulusMismatchError):
        _r(1, 7) + _r(1, 11)


def test_width_mismatch_rejected():
    params = residue_params(Uint(7))
    with pytest.raises(ModulusMismatchError):
        Residue.new(Uint(1, limbs=8), params)
