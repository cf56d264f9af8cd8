import itertools

import pytest

from modvec.cmp import CmpInt


@pytest.mark.parametrize(
    "cmp, expected",
    [
        (CmpInt.EQ, CmpInt.NE),
        (CmpInt.LT, CmpInt.NLT),
        (CmpInt.LE, CmpInt.NLE),
        (CmpInt.FALSE, CmpInt.TRUE),
        (CmpInt.NE, CmpInt.EQ),
        (CmpInt.NLT, CmpInt.LT),
        (CmpInt.NLE, CmpInt.LE),
        (CmpInt.TRUE, CmpInt.FALSE),
    ],
)
def test_negate_mapping(cmp, expected):
    assert cmp.negate() is expected


@pytest.mark.parametrize("value", range(8))
def test_negate_is_involution(value):
    cmp = CmpInt(value)
    assert CmpInt.negate(CmpInt.negate(cmp)) is cmp


@pytest.mark.parametrize("value", range(8))
def test_apply_negation_is_complement(value):
    cmp = CmpInt(value)
    negated = CmpInt.negate(cmp)
    for lhs, rhs in itertools.product(range(4), repeat=2):
        assert CmpInt.apply(negated, lhs, rhs) == (not CmpInt.apply(cmp, lhs, rhs))


def test_apply_constants():
    assert CmpInt.TRUE.apply(5, 3) is True
    assert CmpInt.FALSE.apply(3, 3) is False


def test_apply_ordering_comparisons():
    assert CmpInt.LT.apply(2, 3)
    assert not CmpInt.LT.apply(3, 3)
    assert CmpInt.LE.apply(3, 3)
    assert CmpInt.NLE.apply(4, 3)
    assert CmpInt.NLT.apply(3, 3)
    assert CmpInt.EQ.apply(7, 7)
    assert CmpInt.NE.apply(7, 8)


def test_enum_values_fixed_by_format():
    negated_values = [int(CmpInt.negate(CmpInt(value))) for value in range(8)]
    assert negated_values == [4, 5, 6, 7, 0, 1, 2, 3]