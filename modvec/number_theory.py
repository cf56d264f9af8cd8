"""Word-sized modular arithmetic helpers built on Barrett reduction."""

from modvec.checks import check
from modvec.wideint import divide_uint128_uint64_lo, msb, multiply_uint64_hi

__all__ = [
    "MultiplyFactor",
    "is_power_of_two",
    "log2",
    "maximum_value",
    "multiply_mod_lazy",
    "multiply_mod_lazy_precon",
    "add_uint64",
    "reduce_mod",
]

_MASK64 = (1 << 64) - 1


class MultiplyFactor:
    """Pre-computed Barrett factor ``floor((operand << bit_shift) / modulus)``."""

    __slots__ = ("operand", "barrett_factor")

    def __init__(self, operand: int, bit_shift: int, modulus: int) -> None:
        check(
            operand <= modulus,
            f"operand {operand} must be less than modulus {modulus}",
        )
        check(bit_shift in (32, 52, 64), f"Unsupported BitShift {bit_shift}")
        op_hi = operand >> (64 - bit_shift)
        op_lo = 0 if bit_shift == 64 else (operand << bit_shift) & _MASK64
        self.operand = operand
        self.barrett_factor = divide_uint128_uint64_lo(op_hi, op_lo, modulus)

    def __repr__(self) -> str:
        return (
            f"MultiplyFactor(operand={self.operand}, "
            f"barrett_factor={self.barrett_factor})"
        )


def is_power_of_two(num: int) -> bool:
    """Return whether ``num`` is a positive power of two."""
    return num > 0 and (num & (num - 1)) == 0


def log2(x: int) -> int:
    """Return ``log2(x)`` for ``x`` a power of two."""
    check(is_power_of_two(x), f"{x} not a power of 2")
    return msb(x)


def maximum_value(bits: int) -> int:
    """Return the largest value representable with ``bits`` bits."""
    check(0 <= bits <= 64, f"MaximumValue requires bits <= 64; got {bits}")
    return (1 << bits) - 1


def multiply_mod_lazy_precon(
    x: int, y_operand: int, y_barrett_factor: int, modulus: int, bit_shift: int
) -> int:
    """Return ``x * y_operand mod modulus`` in ``[0, 2 * modulus]``.

    ``y_barrett_factor`` is ``floor((y_operand << bit_shift) / modulus)``.
    """
    check(
        y_operand < modulus,
        f"y_operand {y_operand} must be less than modulus {modulus}",
    )
    bound = maximum_value(bit_shift)
    check(modulus <= bound, f"Modulus {modulus} exceeds bound {bound}")
    check(x <= bound, f"Operand {x} exceeds bound {bound}")
    quotient = multiply_uint64_hi(x, y_barrett_factor, bit_shift)
    return (y_operand * x - quotient * modulus) & _MASK64


def multiply_mod_lazy(x: int, y: int, modulus: int, bit_shift: int) -> int:
    """Return ``x * y mod modulus`` in ``[0, 2 * modulus]``."""
    check(bit_shift in (64, 52), f"Unsupported BitShift {bit_shift}")
    bound = maximum_value(bit_shift)
    check(x <= bound, f"Operand {x} exceeds bound {bound}")
    check(y < modulus, f"y {y} must be less than modulus {modulus}")
    check(modulus <= bound, f"Modulus {modulus} exceeds bound {bound}")
    if bit_shift == 64:
        y_hi, y_lo = y, 0
    else:
        y_hi, y_lo = y >> 12, (y << 52) & _MASK64
    y_barrett = divide_uint128_uint64_lo(y_hi, y_lo, modulus)
    return multiply_mod_lazy_precon(x, y, y_barrett, modulus, bit_shift)


def add_uint64(operand1: int, operand2: int) -> tuple[int, int]:
    """Add two 64-bit words; return ``(sum mod 2**64, carry)``."""
    total = operand1 + operand2
    return total & _MASK64, int(total > _MASK64)


def reduce_mod(x: int, modulus: int, input_mod_factor: int) -> int:
    """Return ``x mod modulus`` assuming ``x < input_mod_factor * modulus``.

    ``input_mod_factor`` must be 1, 2, 4 or 8.
    """
    check(
        input_mod_factor in (1, 2, 4, 8),
        "InputModFactor should be 1, 2, 4, or 8",
    )
    if input_mod_factor >= 8 and x >= 4 * modulus:
        x -= 4 * modulus
    if input_mod_factor >= 4 and x >= 2 * modulus:
        x -= 2 * modulus
    if input_mod_factor >= 2 and x >= modulus:
        x -= modulus
    return x