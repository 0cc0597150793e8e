"""Behaviour shared by every field-element representation.

Subclasses are frozen dataclasses holding ``n`` and ``order`` and
implement ``_make``, ``_backing`` and the arithmetic operators.  The
base class supplies operand validation, identities, negation and the
multiplicative inverse.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from finitefield.errors import ModulusMismatchError, RingMismatchError


class FieldElementBase(ABC):
    """An immutable ``(n, order)`` pair with ``0 <= n < order``."""

    n: Any
    order: Any

    @abstractmethod
    def _make(self, n: Any) -> FieldElementBase:
        """Build a sibling element with the same order and backing type."""

    @abstractmethod
    def _backing(self) -> Any:
        """Identify the backing numeric type (ring or limb count)."""

    def _check_operand(self, other: FieldElementBase) -> None:
        if self._backing() != other._backing():
            raise RingMismatchError(
                f"Cannot combine {self!r} ({self._backing()}) "
                f"with {other!r} ({other._backing()})"
            )
        if self.order != other.order:
            raise ModulusMismatchError(
                f"Order mismatch: {int(self.order)} vs {int(other.order)}"
            )

    # ---- identities ----

    @abstractmethod
    def one(self) -> FieldElementBase:
        """Multiplicative identity with the same order."""

    @abstractmethod
    def zero(self) -> FieldElementBase:
        """Additive identity with the same order."""

    def is_zero(self) -> bool:
        return int(self.n) == 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ---- derived operations ----

    def inverse(self) -> FieldElementBase:
        """Multiplicative inverse (Fermat's little theorem, prime order)."""
        return self.one() / self

    def __neg__(self) -> FieldElementBase:
        return self.zero() - self

    def __int__(self) -> int:
        return int(self.n)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self.n)}, {int(self.order)})"
