"""Element-wise modular multiplication of vectors."""

from collections.abc import Iterable

from modvec.checks import check, check_bounds
from modvec.number_theory import reduce_mod
from modvec.wideint import divide_uint128_uint64_lo, msb, multiply_uint64

__all__ = ["eltwise_mult_mod", "eltwise_mult_mod_native"]

_MASK64 = (1 << 64) - 1


def _paired(
    operand1: Iterable[int], operand2: Iterable[int]
) -> tuple[list[int], list[int]]:
    first = list(operand1)
    second = list(operand2)
    check(
        len(first) == len(second),
        f"operand lengths differ: {len(first)} and {len(second)}",
    )
    check(len(first) != 0, "Require n != 0")
    return first, second


def _check_input_bounds(
    first: list[int], second: list[int], modulus: int, input_mod_factor: int
) -> None:
    bound = input_mod_factor * modulus
    check_bounds(first, bound, f"operand1 exceeds bound {bound}")
    check_bounds(second, bound, f"operand2 exceeds bound {bound}")


def eltwise_mult_mod_native(
    operand1: Iterable[int],
    operand2: Iterable[int],
    modulus: int,
    input_mod_factor: int,
) -> list[int]:
    """Multiply two vectors element-wise modulo ``modulus`` by Barrett reduction.

    Inputs are assumed to lie in ``[0, input_mod_factor * modulus)``; the
    factor must be 1, 2 or 4 and ``modulus`` must be below 2**62.
    """
    first, second = _paired(operand1, operand2)
    check(
        input_mod_factor in (1, 2, 4),
        "Require input_mod_factor = 1, 2, or 4",
    )
    check(modulus > 1, "Require modulus > 1")
    check(modulus < (1 << 62), "Require modulus < (1ULL << 62)")
    _check_input_bounds(first, second, modulus, input_mod_factor)

    # modulus < 2**n_bits; with L = 63 + n_bits, L - n_bits + 1 == 64.
    n_bits = msb(modulus) + 1
    shift = n_bits - 1
    barr_lo = divide_uint128_uint64_lo(1 << shift, 0, modulus)

    result = []
    for a, b in zip(first, second):
        x = reduce_mod(a, modulus, input_mod_factor)
        y = reduce_mod(b, modulus, input_mod_factor)
        prod_hi, prod_lo = multiply_uint64(x, y)
        c1 = ((prod_lo >> shift) + (prod_hi << (64 - shift))) & _MASK64
        c3, _ = multiply_uint64(c1, barr_lo)
        c4 = (prod_lo - c3 * modulus) & _MASK64
        result.append(c4 - modulus if c4 >= modulus else c4)
    return result


def eltwise_mult_mod(
    operand1: Iterable[int],
    operand2: Iterable[int],
    modulus: int,
    input_mod_factor: int,
) -> list[int]:
    """Return ``[(a * b) mod modulus for a, b in zip(operand1, operand2)]``.

    Inputs are assumed to lie in ``[0, input_mod_factor * modulus)``; the
    factor must be 1, 2 or 4.
    """
    first, second = _paired(operand1, operand2)
    check(modulus > 1, "Require modulus > 1")
    check(
        input_mod_factor * modulus < (1 << 63),
        "Require input_mod_factor * modulus < (1ULL << 63)",
    )
    check(
        input_mod_factor in (1, 2, 4),
        "Require input_mod_factor = 1, 2, or 4",
    )
    _check_input_bounds(first, second, modulus, input_mod_factor)
    return eltwise_mult_mod_native(first, second, modulus, input_mod_factor)