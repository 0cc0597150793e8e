"""Field elements over a bounded integer ring.

``FieldElement(n, order, ring)`` stores a residue and its order as plain
ints, doing all arithmetic through the checked operations of a
``NumericRing``.  The ring stands in for the machine integer type the
element would live in: if an intermediate sum or product does not fit,
the operation raises ``ArithmeticOverflowError`` rather than returning
a wrapped value.  As a rule, ``order`` must be at most about the square
root of ``ring.max_value`` for multiplication, division and
exponentiation to succeed.

Division and negative exponents rely on Fermat's little theorem and are
only meaningful when ``order`` is prime.  Primality is not checked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from finitefield.config import DEFAULT_RING_NAME
from finitefield.errors import (
    DivisionByZeroResidueError,
    InvalidOrderError,
    OutOfRangeError,
)
from finitefield.field.base import FieldElementBase
from finitefield.numeric.modexp import mod_exp
from finitefield.numeric.ring import NumericRing, ring_by_name

logger = logging.getLogger(__name__)

DEFAULT_RING = ring_by_name(DEFAULT_RING_NAME)


@dataclass(frozen=True, repr=False)
class FieldElement(FieldElementBase):
    """Element of Z/order over *ring*."""

    n: int
    order: int
    ring: NumericRing = DEFAULT_RING

    def __post_init__(self) -> None:
        if not self.ring.contains(self.order) or self.order <= 1:
            raise InvalidOrderError(
                f"Order {self.order} must be > 1 and fit in {self.ring}"
            )
        if not 0 <= self.n < self.order:
            raise OutOfRangeError(
                f"Num {self.n} not in field range 0 to {self.order - 1}"
            )

    @classmethod
    def reduce(cls, n: int, order: int, ring: NumericRing = DEFAULT_RING) -> FieldElement:
        """Build an element from any integer by reducing it mod *order*."""
        if order <= 1:
            raise InvalidOrderError(f"Order must be > 1, got {order}")
        return cls(n % order, order, ring)

    def _make(self, n: int) -> FieldElement:
        return FieldElement(n, self.order, self.ring)

    def _backing(self) -> NumericRing:
        return self.ring

    def one(self) -> FieldElement:
        return self._make(self.ring.one)

    def zero(self) -> FieldElement:
        return self._make(self.ring.zero)

    # ---- arithmetic ----

    def __add__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_operand(other)
        r = self.ring
        return self._make(r.rem(r.add(self.n, other.n), self.order))

    def __sub__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_operand(other)
        r = self.ring
        p = self.order
        # Stay non-negative so unsigned rings never underflow.
        if self.n < other.n:
            t = r.rem(r.sub(other.n, self.n), p)
            n = r.sub(p, t)
        else:
            n = r.rem(r.sub(self.n, other.n), p)
        return self._make(n)

    def __mul__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_operand(other)
        r = self.ring
        return self._make(r.rem(r.mul(self.n, other.n), self.order))

    def __truediv__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_operand(other)
        if other.n == 0:
            raise DivisionByZeroResidueError("Zero is not a valid denominator")
        r = self.ring
        p = self.order
        # b^(p-2) is the inverse of b when p is prime
        fermat = mod_exp(other.n, r.sub(r.sub(p, r.one), r.one), p, r)
        return self._make(r.rem(r.mul(self.n, fermat), p))

    def pow(self, exponent: int) -> FieldElement:
        """Raise to an integer power; negative exponents invert."""
        r = self.ring
        if exponent < 0:
            if self.n == 0:
                raise DivisionByZeroResidueError(
                    f"Zero has no inverse: cannot raise to {exponent}"
                )
            if not r.signed:
                r.check(-exponent, "pow")
                logger.debug("%s: rewriting ** %d as a reciprocal", r, exponent)
                return self.one() / self.pow(-exponent)
        r.check(exponent, "pow")
        if self.n == 0 and exponent > 0:
            return self.zero()
        # Exponents only matter mod p-1 (a^(p-1) = 1); the second
        # reduction maps negative remainders into [0, p-1).
        p = r.sub(self.order, r.one)
        e = r.rem(r.add(r.rem(exponent, p), p), p)
        return self._make(mod_exp(self.n, e, self.order, r))

    def __pow__(self, exponent: int) -> FieldElement:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)
