"""Errors raised by field arithmetic.

Every error derives from ``FieldError``.  Where a builtin exception
already describes the failure (``ValueError``, ``ZeroDivisionError``,
``OverflowError``, ``TypeError``) the error subclasses it as well, so
callers may catch either.
"""

from __future__ import annotations


class FieldError(ArithmeticError):
    """Base class for finite-field errors."""


class ModulusMismatchError(FieldError, ValueError):
    """Operands of a binary operation have different orders."""


class RingMismatchError(FieldError, TypeError):
    """Operands are backed by different numeric types or widths."""


class OutOfRangeError(FieldError, ValueError):
    """A value lies outside ``[0, order)`` at construction."""


class InvalidOrderError(FieldError, ValueError):
    """The order cannot define a field for the requested representation."""


class DivisionByZeroResidueError(FieldError, ZeroDivisionError):
    """The divisor (or the element being inverted) is zero."""


class ModulusUnderflowError(FieldError):
    """Checked subtraction went below zero."""


class ArithmeticOverflowError(FieldError, OverflowError):
    """A checked operation left the representable range of its type."""
