"""Bounded integer rings backing the generic field engine.

A ``NumericRing`` describes a native-width integer type: its bit width,
its signedness, and the checked arithmetic the field engine performs on
it.  Python integers never overflow, so every operation here checks its
result against the ring's range and raises ``ArithmeticOverflowError``
where a fixed-width machine integer would wrap.

Concrete rings
--------------
I8, I16, I32, I64, I128   signed two's-complement widths
U8, U16, U32, U64, U128   unsigned widths
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, PositiveInt

from finitefield.errors import ArithmeticOverflowError


class NumericRing(BaseModel):
    """A bounded integer type with checked arithmetic."""

    model_config = ConfigDict(frozen=True)

    name: str
    bits: PositiveInt
    signed: bool

    # ---- bounds ----

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def contains(self, value: int) -> bool:
        """Return True if *value* is representable in this ring."""
        return self.min_value <= value <= self.max_value

    def check(self, value: int, op: str = "value") -> int:
        """Return *value* unchanged, or raise if it does not fit."""
        if not self.contains(value):
            raise ArithmeticOverflowError(
                f"{op} result {value} does not fit in {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value

    # ---- checked arithmetic ----

    def add(self, a: int, b: int) -> int:
        return self.check(a + b, "add")

    def sub(self, a: int, b: int) -> int:
        return self.check(a - b, "sub")

    def mul(self, a: int, b: int) -> int:
        return self.check(a * b, "mul")

    def rem(self, a: int, b: int) -> int:
        """Truncated remainder: the result takes the sign of *a*."""
        if b == 0:
            raise ZeroDivisionError(f"{self.name} remainder by zero")
        r = abs(a) % abs(b)
        return -r if a < 0 else r

    def __str__(self) -> str:
        return self.name


I8 = NumericRing(name="i8", bits=8, signed=True)
I16 = NumericRing(name="i16", bits=16, signed=True)
I32 = NumericRing(name="i32", bits=32, signed=True)
I64 = NumericRing(name="i64", bits=64, signed=True)
I128 = NumericRing(name="i128", bits=128, signed=True)
U8 = NumericRing(name="u8", bits=8, signed=False)
U16 = NumericRing(name="u16", bits=16, signed=False)
U32 = NumericRing(name="u32", bits=32, signed=False)
U64 = NumericRing(name="u64", bits=64, signed=False)
U128 = NumericRing(name="u128", bits=128, signed=False)

RINGS: Dict[str, NumericRing] = {
    r.name: r for r in (I8, I16, I32, I64, I128, U8, U16, U32, U64, U128)
}


def ring_by_name(name: str) -> NumericRing:
    """Look up a ring by its short name (``"i32"``, ``"u64"`` ...)."""
    try:
        return RINGS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown numeric ring '{name}'") from None
