import random

import pytest

from modvec.checks import CheckError
from modvec.eltwise_add import eltwise_add_mod
from modvec.eltwise_fma import eltwise_fma_mod
from modvec.eltwise_mult import eltwise_mult_mod
from modvec.number_theory import reduce_mod

MODULI = [2, 10, 65537, 1152921504606844417, 2305843009211596801]


def _reduced(values, modulus, factor):
    return [reduce_mod(v, modulus, factor) for v in values]


@pytest.mark.parametrize("modulus", MODULI)
@pytest.mark.parametrize("factor", [1, 2, 4, 8])
def test_fma_matches_mult_then_add(modulus, factor):
    rng = random.Random(modulus * 31 + factor)
    n = 19
    bound = factor * modulus
    a = [rng.randrange(bound) for _ in range(n)]
    c = [rng.randrange(bound) for _ in range(n)]
    scalar = rng.randrange(bound)

    result = eltwise_fma_mod(a, scalar, c, modulus, factor)

    ra = _reduced(a, modulus, factor)
    rs = reduce_mod(scalar, modulus, factor)
    rc = _reduced(c, modulus, factor)
    expected = eltwise_add_mod(eltwise_mult_mod(ra, [rs] * n, modulus, 1), rc, modulus)
    assert result == expected


@pytest.mark.parametrize("modulus", MODULI)
def test_fma_without_addend_is_multiplication(modulus):
    rng = random.Random(modulus)
    a = [rng.randrange(modulus) for _ in range(12)]
    scalar = rng.randrange(modulus)
    assert eltwise_fma_mod(a, scalar, None, modulus, 1) == eltwise_mult_mod(
        a, [scalar] * len(a), modulus, 1
    )


def test_multiply_by_one_adds_zero_is_identity():
    modulus = 2305843009211596801
    values = [0, 1, 1152921504605798400, 2305843009211596800]
    assert eltwise_fma_mod(values, 1, [0] * 4, modulus, 1) == values


def test_multiply_by_zero_returns_addend():
    modulus = 65537
    addend = [0, 5, 65536, 1234]
    assert eltwise_fma_mod([7, 8, 9, 10], 0, addend, modulus, 1) == addend


def test_small_example():
    assert eltwise_fma_mod([1, 2, 3], 4, [5, 6, 7], 10, 1) == [9, 4, 9]


def test_results_below_modulus():
    rng = random.Random(3)
    modulus = 1152921504606844417
    bound = 8 * modulus
    a = [rng.randrange(bound) for _ in range(40)]
    c = [rng.randrange(bound) for _ in range(40)]
    result = eltwise_fma_mod(a, rng.randrange(bound), c, modulus, 8)
    assert all(0 <= r < modulus for r in result)


def test_empty_rejected():
    with pytest.raises(CheckError):
        eltwise_fma_mod([], 1, None, 7, 1)


@pytest.mark.parametrize("modulus", [0, 1, 1 << 61])
def test_bad_modulus(modulus):
    with pytest.raises(CheckError):
        eltwise_fma_mod([0], 0, None, modulus, 1)


@pytest.mark.parametrize("factor", [0, 3, 16])
def test_bad_input_mod_factor(factor):
    with pytest.raises(CheckError):
        eltwise_fma_mod([0], 0, None, 7, factor)


def test_arg1_out_of_bound():
    with pytest.raises(CheckError):
        eltwise_fma_mod([14], 1, None, 7, 2)


def test_arg2_out_of_bound():
    with pytest.raises(CheckError):
        eltwise_fma_mod([1], 7, None, 7, 1)


def test_arg3_out_of_bound():
    with pytest.raises(CheckError):
        eltwise_fma_mod([1], 1, [28], 7, 4)


def test_arg3_length_mismatch():
    with pytest.raises(CheckError):
        eltwise_fma_mod([1, 2], 1, [1], 7, 1)