"""Generic and fixed-width elements must agree on every operation."""

import pytest

from finitefield.errors import DivisionByZeroResidueError
from finitefield.field.fixed import FixedFieldElement
from finitefield.field.generic import FieldElement
from finitefield.numeric.ring import I64, U64
from finitefield.numeric.uint import Uint

P = 10007
PAIRS = [(0, 1), (1, 1), (324, 8926), (10006, 2), (5003, 5004), (77, 10006)]


def _both(n, ring=I64):
    return FieldElement(n, P, ring), FixedFieldElement(Uint(n), Uint(P))


@pytest.mark.parametrize("x, y", PAIRS)
@pytest.mark.parametrize(
    "op",
    [
        lambda a, b: a + b,
        lambda a, b: a - b,
        lambda a, b: a * b,
        lambda a, b: a / b,
    ],
    ids=["add", "sub", "mul", "div"],
)
def test_binary_ops_agree(op, x, y):
    g1, f1 = _both(x)
    g2, f2 = _both(y)
    assert int(op(g1, g2)) == int(op(f1, f2))


@pytest.mark.parametrize("x", [0, 1, 2, 324, 10006])
@pytest.mark.parametrize("e", [0, 1, 3, 10005, 10006, 20012, -1, -7])
def test_pow_agrees(x, e):
    g, f = _both(x, U64)
    if x == 0 and e < 0:
        with pytest.raises(DivisionByZeroResidueError):
            g.pow(e)
        with pytest.raises(DivisionByZeroResidueError):
            f.pow(e)
        return
    assert int(g.pow(e)) == int(f.pow(e))


def test_identities_agree():
    g, f = _both(42)
    assert int(g.one()) == int(f.one()) == 1
    assert int(g.zero()) == int(f.zero()) == 0
