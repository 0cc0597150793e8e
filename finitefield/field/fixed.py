"""Field elements over fixed-width unsigned integers.

``FixedFieldElement(n, order)`` holds two ``Uint`` values of the same
limb count.  Addition, subtraction, multiplication, division and
exponentiation all run in Montgomery form (see
``finitefield.numeric.residue``), so a product of two 256-bit residues
never needs a separate 512-bit reduction step.  The order must be odd
for Montgomery arithmetic; division additionally needs it to be prime.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from finitefield.errors import (
    DivisionByZeroResidueError,
    InvalidOrderError,
    OutOfRangeError,
    RingMismatchError,
)
from finitefield.field.base import FieldElementBase
from finitefield.numeric.residue import Residue, residue_params
from finitefield.numeric.uint import Uint

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class FixedFieldElement(FieldElementBase):
    """Element of Z/order with ``Uint`` storage."""

    n: Uint
    order: Uint

    def __post_init__(self) -> None:
        if not isinstance(self.n, Uint) or not isinstance(self.order, Uint):
            raise TypeError("FixedFieldElement needs Uint operands")
        if self.n.limbs != self.order.limbs:
            raise RingMismatchError(
                f"{self.n.bits}-bit value with a {self.order.bits}-bit order"
            )
        if self.order.value <= 1:
            raise InvalidOrderError(f"Order must be > 1, got {self.order.value}")
        if self.n >= self.order:
            raise OutOfRangeError(
                f"Num {self.n.value} not in field range 0 to {self.order.value - 1}"
            )

    @classmethod
    def reduce(cls, n: Uint, order: Uint) -> FixedFieldElement:
        """Build an element from any ``Uint`` by reducing it mod *order*."""
        if order.value <= 1:
            raise InvalidOrderError(f"Order must be > 1, got {order.value}")
        return cls(n % order, order)

    def get_num(self) -> Uint:
        return self.n

    def _make(self, n: Uint) -> FixedFieldElement:
        return FixedFieldElement(n, self.order)

    def _backing(self) -> int:
        return self.order.limbs

    def one(self) -> FixedFieldElement:
        return self._make(self.order.one())

    def zero(self) -> FixedFieldElement:
        return self._make(self.order.zero())

    # ---- arithmetic ----

    def _residues(self, other: FixedFieldElement) -> Tuple[Residue, Residue]:
        self._check_operand(other)
        params = residue_params(self.order)
        return Residue.new(self.n, params), Residue.new(other.n, params)

    def __add__(self, other: FixedFieldElement) -> FixedFieldElement:
        if not isinstance(other, FixedFieldElement):
            return NotImplemented
        a, b = self._residues(other)
        return self._make((a + b).retrieve())

    def __sub__(self, other: FixedFieldElement) -> FixedFieldElement:
        if not isinstance(other, FixedFieldElement):
            return NotImplemented
        a, b = self._residues(other)
        return self._make((a - b).retrieve())

    def __mul__(self, other: FixedFieldElement) -> FixedFieldElement:
        if not isinstance(other, FixedFieldElement):
            return NotImplemented
        a, b = self._residues(other)
        return self._make((a * b).retrieve())

    def __truediv__(self, other: FixedFieldElement) -> FixedFieldElement:
        if not isinstance(other, FixedFieldElement):
            return NotImplemented
        self._check_operand(other)
        if other.is_zero():
            raise DivisionByZeroResidueError("Zero is not a valid denominator")
        # Construction guarantees order >= 2, so this cannot underflow.
        exp = self.order.checked_sub(Uint(2, self.order.limbs))
        a, b = self._residues(other)
        return self._make((a * b.pow(exp)).retrieve())

    def pow(self, exponent: Union[Uint, int]) -> FixedFieldElement:
        """Raise to a ``Uint`` or int power; negative ints invert."""
        if isinstance(exponent, int):
            if exponent < 0:
                if self.is_zero():
                    raise DivisionByZeroResidueError(
                        f"Zero has no inverse: cannot raise to {exponent}"
                    )
                logger.debug("rewriting ** %d as a reciprocal", exponent)
                return self.one() / self.pow(-exponent)
            exponent = Uint(exponent, self.order.limbs)
        elif exponent.limbs != self.order.limbs:
            raise RingMismatchError(
                f"{exponent.bits}-bit exponent for a {self.order.bits}-bit field"
            )
        base = Residue.new(self.n, residue_params(self.order))
        return self._make(base.pow(exponent).retrieve())

    def __pow__(self, exponent: Union[Uint, int]) -> FixedFieldElement:
        if not isinstance(exponent, (Uint, int)):
            return NotImplemented
        return self.pow(exponent)
