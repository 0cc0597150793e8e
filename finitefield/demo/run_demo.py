#!/usr/bin/env python3
"""finitefield walkthrough.

Usage:
    python -m finitefield.demo.run_demo

The script:
1. Shows closure of + and * in a small field.
2. Checks the additive and multiplicative identities.
3. Computes additive inverses on signed and unsigned rings.
4. Computes a multiplicative inverse modulo the prime 10007.
5. Raises elements to negative powers on signed and unsigned rings.
6. Repeats the arithmetic with 256-bit fixed-width elements, including
   a round trip in the secp256k1 coordinate field.
7. Shows the overflow guard of the generic engine.
"""

from __future__ import annotations

import logging
import sys

from sympy import isprime

from finitefield.config import LOG_LEVEL, SECP256K1_PRIME
from finitefield.errors import ArithmeticOverflowError
from finitefield.field.fixed import FixedFieldElement
from finitefield.field.generic import FieldElement
from finitefield.numeric.ring import I8, I16, I32, U16, U32, U64
from finitefield.numeric.uint import Uint

logger = logging.getLogger(__name__)


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def check(label: str, ok: bool) -> bool:
    print(f"  [{'ok' if ok else 'FAIL'}] {label}")
    return ok


def generic_properties() -> bool:
    banner("Generic engine: field properties")
    results = []

    a = FieldElement(14, 17, I8)
    b = FieldElement(9, 17, I8)
    print(f"  a = {a}, b = {b}  (i8)")
    results.append(check(f"a + b = {a + b}", a + b == FieldElement(6, 17, I8)))
    results.append(check(f"a * b = {a * b}", a * b == FieldElement(7, 17, I8)))

    a = FieldElement(5, 7, I32)
    results.append(check("a + zero == a", a + a.zero() == a))
    a = FieldElement(18, 19, I16)
    results.append(check("a * one == a", a * a.one() == a))

    for ring in (U32, I32):
        a = FieldElement(5, 31, ring)
        minus = a.zero() - a
        results.append(
            check(
                f"zero - {a} = {minus} on {ring}",
                minus == FieldElement(26, 31, ring) and a + minus == a.zero(),
            )
        )

    p = 10007
    results.append(check(f"{p} is prime", isprime(p)))
    a = FieldElement(324, p, U64)
    a_inv = a.one() / a
    results.append(check(f"1 / {a} = {a_inv}", a_inv == FieldElement(8926, p, U64)))
    results.append(check("a * a^-1 == one", a * a_inv == a.one()))
    return all(results)


def generic_exponents() -> bool:
    banner("Generic engine: exponents")
    results = []

    a = FieldElement(15, 31, I16)
    one = a.one()
    results.append(check(f"{a} ** -3 == one / a^3", a.pow(-3) == one / a.pow(3)))
    results.append(check("one / a^-3 == a * a * a", one / a.pow(-3) == a * a * a))

    a = FieldElement(15, 31, U16)
    results.append(check(f"{a} ** 5 on u16", a.pow(5) == a * a * a * a * a))
    results.append(
        check("a ** -5 on u16 == one / a^5", a.pow(-5) == a.one() / (a * a * a * a * a))
    )
    return all(results)


def fixed_width() -> bool:
    banner("Fixed-width engine (U256, Montgomery residues)")
    results = []

    seven = Uint(7)
    a = FixedFieldElement(Uint(5), seven)
    b = FixedFieldElement(Uint(6), seven)
    results.append(check(f"{a} + {b} = {a + b}", a + b == FixedFieldElement(Uint(4), seven)))
    c = FixedFieldElement(Uint(3), seven)
    results.append(check(f"{c} ** 3 = {c ** 3}", c ** 3 == FixedFieldElement(Uint(6), seven)))
    two = FixedFieldElement(Uint(2), seven)
    results.append(check(f"{two} / {b} = {two / b}", two / b == a))

    order = Uint(SECP256K1_PRIME)
    x = FixedFieldElement.reduce(Uint(2**255 + 12345), order)
    y = FixedFieldElement.reduce(Uint(2**200 - 1), order)
    results.append(check("secp256k1: (x / y) * y == x", (x / y) * y == x))
    return all(results)


def overflow_guard() -> bool:
    banner("Generic engine: overflow guard")
    a = FieldElement(100, 101, I8)
    try:
        a * a
    except ArithmeticOverflowError as exc:
        print(f"  i8 product rejected: {exc}")
        return True
    print("  i8 product was not rejected")
    return False


def main() -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    ok = all(
        [generic_properties(), generic_exponents(), fixed_width(), overflow_guard()]
    )
    banner("All checks passed" if ok else "Some checks FAILED")
    logger.info("demo finished, ok=%s", ok)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
