"""Montgomery residue arithmetic for fixed-width moduli.

A value ``x`` modulo ``m`` is held in Montgomery form ``x * R mod m``
with ``R = 2**bits`` of the modulus' ``Uint`` width.  Multiplication is
followed by REDC, which divides by ``R`` one 64-bit limb at a time, so
reduction is part of every product instead of a separate step after a
double-width multiply.

API
---
residue_params(m)         -> ResidueParams   (cached per modulus)
Residue.new(x, params)    -> Residue         (enter Montgomery form)
r1 + r2, r1 - r2, r1 * r2 -> Residue
r.pow(e)                  -> Residue         (square-and-multiply)
r.retrieve()              -> Uint            (leave Montgomery form)
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from finitefield.config import LIMB_BITS
from finitefield.errors import InvalidOrderError, ModulusMismatchError
from finitefield.numeric.uint import LIMB_MASK, Uint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResidueParams:
    """Precomputed Montgomery constants for one odd modulus."""

    modulus: Uint
    r: int  # R mod m, i.e. one in Montgomery form
    r2: int  # R^2 mod m, used to enter Montgomery form
    mod_neg_inv: int  # -m^{-1} mod 2^64

    @classmethod
    def new(cls, modulus: Uint) -> ResidueParams:
        m = modulus.value
        if m < 3 or not modulus.is_odd():
            raise InvalidOrderError(
                f"Montgomery arithmetic needs an odd modulus > 1, got {m}"
            )
        big_r = 1 << modulus.bits
        r = big_r % m
        r2 = (r * r) % m
        mod_neg_inv = (-pow(m, -1, 1 << LIMB_BITS)) & LIMB_MASK
        logger.debug("Montgomery params for %d-bit modulus %#x", modulus.bits, m)
        return cls(modulus=modulus, r=r, r2=r2, mod_neg_inv=mod_neg_inv)

    def redc(self, t: int) -> int:
        """Return ``t * R^{-1} mod m`` for ``0 <= t < m * R``."""
        m = self.modulus.value
        for _ in range(self.modulus.limbs):
            u = ((t & LIMB_MASK) * self.mod_neg_inv) & LIMB_MASK
            t = (t + u * m) >> LIMB_BITS
        if t >= m:
            t -= m
        return t


@functools.lru_cache(maxsize=256)
def residue_params(modulus: Uint) -> ResidueParams:
    """Return the (cached) Montgomery parameters for *modulus*."""
    return ResidueParams.new(modulus)


@dataclass(frozen=True)
class Residue:
    """A value in Montgomery form bound to its parameters."""

    montgomery: int
    params: ResidueParams

    @classmethod
    def new(cls, value: Uint, params: ResidueParams) -> Residue:
        """Enter Montgomery form: ``value * R mod m``."""
        if value.limbs != params.modulus.limbs:
            raise ModulusMismatchError(
                f"{value.bits}-bit value for a {params.modulus.bits}-bit modulus"
            )
        return cls(params.redc(value.value * params.r2), params)

    @classmethod
    def one(cls, params: ResidueParams) -> Residue:
        return cls(params.r, params)

    def _check(self, other: Residue) -> None:
        if self.params != other.params:
            raise ModulusMismatchError(
                f"Residues under different moduli: "
                f"{self.params.modulus.value} vs {other.params.modulus.value}"
            )

    def __add__(self, other: Residue) -> Residue:
        self._check(other)
        m = self.params.modulus.value
        s = self.montgomery + other.montgomery
        if s >= m:
            s -= m
        return Residue(s, self.params)

    def __sub__(self, other: Residue) -> Residue:
        self._check(other)
        d = self.montgomery - other.montgomery
        if d < 0:
            d += self.params.modulus.value
        return Residue(d, self.params)

    def __mul__(self, other: Residue) -> Residue:
        self._check(other)
        return Residue(self.params.redc(self.montgomery * other.montgomery), self.params)

    def square(self) -> Residue:
        return self * self

    def pow(self, exponent: Uint) -> Residue:
        """Left-to-right square-and-multiply over the bits of *exponent*."""
        result = Residue.one(self.params)
        for i in reversed(range(exponent.value.bit_length())):
            result = result.square()
            if (exponent.value >> i) & 1:
                result = result * self
        return result

    def retrieve(self) -> Uint:
        """Leave Montgomery form and return the plain integer."""
        return Uint(self.params.redc(self.montgomery), self.params.modulus.limbs)
