"""Element-wise modular reduction of vectors."""

from collections.abc import Iterable

from modvec.checks import check, check_bounds
from modvec.number_theory import MultiplyFactor, reduce_mod
from modvec.wideint import multiply_uint64_hi

__all__ = ["eltwise_reduce_mod", "eltwise_reduce_mod_native"]


def _barrett_reduce64(value: int, modulus: int, q_barr: int) -> int:
    quotient = multiply_uint64_hi(value, q_barr, 64)
    remainder = value - quotient * modulus
    while remainder >= modulus:
        remainder -= modulus
    return remainder


def _check_arguments(
    values: list[int], modulus: int, input_mod_factor: int, output_mod_factor: int
) -> None:
    check(len(values) != 0, "Require n != 0")
    check(modulus > 1, "Require modulus > 1")
    check(
        input_mod_factor in (0, 2, 4),
        f"input_mod_factor must be 0 or 2 or 4 {input_mod_factor}",
    )
    check(
        output_mod_factor in (1, 2),
        f"output_mod_factor must be 1 or 2 {output_mod_factor}",
    )


def eltwise_reduce_mod_native(
    operand: Iterable[int],
    modulus: int,
    input_mod_factor: int,
    output_mod_factor: int,
) -> list[int]:
    """Reduce each element into ``[0, output_mod_factor * modulus)``.

    ``input_mod_factor`` 0 means the input range is unknown and Barrett
    reduction is used; otherwise inputs lie in ``[0, input_mod_factor * modulus)``.
    """
    values = list(operand)
    _check_arguments(values, modulus, input_mod_factor, output_mod_factor)
    check(
        input_mod_factor != output_mod_factor,
        "input_mod_factor must not be equal to output_mod_factor ",
    )

    twice_modulus = modulus << 1
    if input_mod_factor == 0:
        barrett_factor = MultiplyFactor(1, 64, modulus).barrett_factor
        result = [
            _barrett_reduce64(x, modulus, barrett_factor) if x >= modulus else x
            for x in values
        ]
        bound = modulus
    elif input_mod_factor == 2:
        result = [reduce_mod(x, modulus, 2) for x in values]
        bound = modulus
    elif output_mod_factor == 1:
        result = [reduce_mod(x, modulus, 4) for x in values]
        bound = modulus
    else:
        result = [reduce_mod(x, twice_modulus, 2) for x in values]
        bound = twice_modulus

    check_bounds(result, bound, f"result exceeds bound {bound}")
    return result


def eltwise_reduce_mod(
    operand: Iterable[int],
    modulus: int,
    input_mod_factor: int,
    output_mod_factor: int,
) -> list[int]:
    """Reduce a vector; returns a copy when input and output factors agree."""
    values = list(operand)
    _check_arguments(values, modulus, input_mod_factor, output_mod_factor)
    if input_mod_factor == output_mod_factor:
        return values
    return eltwise_reduce_mod_native(
        values, modulus, input_mod_factor, output_mod_factor
    )