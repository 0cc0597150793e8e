"""Fixed-width unsigned integers built from 64-bit limbs.

A ``Uint`` carries its width (number of limbs) alongside its value, so
arithmetic between integers of different widths is rejected instead of
silently widening.  Checked operations raise on overflow or underflow;
wrapping operations reduce modulo ``2**bits``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from finitefield.config import DEFAULT_LIMBS, LIMB_BITS
from finitefield.errors import (
    ArithmeticOverflowError,
    DivisionByZeroResidueError,
    ModulusUnderflowError,
    RingMismatchError,
)

LIMB_MASK = (1 << LIMB_BITS) - 1


@dataclass(frozen=True)
class Uint:
    """Unsigned integer of ``limbs * 64`` bits."""

    value: int
    limbs: int = DEFAULT_LIMBS

    def __post_init__(self) -> None:
        if self.limbs < 1:
            raise ValueError(f"Uint needs at least one limb, got {self.limbs}")
        if not 0 <= self.value < (1 << (self.limbs * LIMB_BITS)):
            raise ArithmeticOverflowError(
                f"{self.value} does not fit in a {self.bits}-bit Uint"
            )

    @property
    def bits(self) -> int:
        return self.limbs * LIMB_BITS

    # ---- construction helpers ----

    def _same(self, value: int) -> Uint:
        return Uint(value, self.limbs)

    def zero(self) -> Uint:
        return self._same(0)

    def one(self) -> Uint:
        return self._same(1)

    def max(self) -> Uint:
        return self._same((1 << self.bits) - 1)

    @classmethod
    def from_limbs(cls, words: Iterable[int]) -> Uint:
        """Build from little-endian 64-bit words."""
        words = list(words)
        value = 0
        for i, w in enumerate(words):
            if not 0 <= w <= LIMB_MASK:
                raise ArithmeticOverflowError(f"Limb {i} out of range: {w}")
            value |= w << (i * LIMB_BITS)
        return cls(value, len(words))

    def to_limbs(self) -> Tuple[int, ...]:
        """Return the little-endian 64-bit words."""
        return tuple(
            (self.value >> (i * LIMB_BITS)) & LIMB_MASK for i in range(self.limbs)
        )

    # ---- arithmetic ----

    def _check_width(self, other: Uint) -> None:
        if self.limbs != other.limbs:
            raise RingMismatchError(
                f"Width mismatch: {self.bits}-bit vs {other.bits}-bit Uint"
            )

    def checked_add(self, other: Uint) -> Uint:
        self._check_width(other)
        return self._same(self.value + other.value)

    def checked_sub(self, other: Uint) -> Uint:
        self._check_width(other)
        if other.value > self.value:
            raise ModulusUnderflowError(
                f"Subtraction underflow: {self.value} - {other.value}"
            )
        return self._same(self.value - other.value)

    def checked_mul(self, other: Uint) -> Uint:
        self._check_width(other)
        return self._same(self.value * other.value)

    def wrapping_add(self, other: Uint) -> Uint:
        self._check_width(other)
        return self._same((self.value + other.value) & self.max().value)

    def wrapping_sub(self, other: Uint) -> Uint:
        self._check_width(other)
        return self._same((self.value - other.value) & self.max().value)

    def wrapping_mul(self, other: Uint) -> Uint:
        self._check_width(other)
        return self._same((self.value * other.value) & self.max().value)

    def __lt__(self, other: Uint) -> bool:
        if not isinstance(other, Uint):
            return NotImplemented
        self._check_width(other)
        return self.value < other.value

    def __le__(self, other: Uint) -> bool:
        if not isinstance(other, Uint):
            return NotImplemented
        self._check_width(other)
        return self.value <= other.value

    def __gt__(self, other: Uint) -> bool:
        if not isinstance(other, Uint):
            return NotImplemented
        self._check_width(other)
        return self.value > other.value

    def __ge__(self, other: Uint) -> bool:
        if not isinstance(other, Uint):
            return NotImplemented
        self._check_width(other)
        return self.value >= other.value

    def __mod__(self, other: Uint) -> Uint:
        if not isinstance(other, Uint):
            return NotImplemented
        self._check_width(other)
        if other.value == 0:
            raise DivisionByZeroResidueError("Uint remainder by zero")
        return self._same(self.value % other.value)

    def is_odd(self) -> bool:
        return bool(self.value & 1)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"U{self.bits}({self.value:#x})"
