"""Modular exponentiation over a bounded ring.

``mod_exp(base, exponent, modulus, ring)`` computes
``base ** exponent % modulus`` by square-and-multiply, keeping every
intermediate below ``modulus ** 2``.  Each product goes through the
ring's checked multiplication, so a modulus too large for the ring
raises instead of wrapping.
"""

from __future__ import annotations

from finitefield.numeric.ring import NumericRing


def mod_exp(base: int, exponent: int, modulus: int, ring: NumericRing) -> int:
    """Return ``base ** exponent mod modulus`` using *ring* arithmetic."""
    if exponent < 0:
        raise ValueError(f"Negative exponent {exponent} for mod_exp")
    if modulus <= 0:
        raise ValueError(f"Modulus must be positive, got {modulus}")

    result = ring.rem(ring.one, modulus)
    base = ring.rem(base, modulus)
    while exponent > 0:
        if exponent & 1:
            result = ring.rem(ring.mul(result, base), modulus)
        exponent >>= 1
        if exponent:
            base = ring.rem(ring.mul(base, base), modulus)
    return result
