"""128-bit unsigned arithmetic on pairs of 64-bit words."""

from modvec.checks import check

__all__ = [
    "multiply_uint64",
    "multiply_uint64_hi",
    "divide_uint128_uint64_lo",
    "barrett_reduce128",
    "msb",
    "left_shift128",
    "right_shift128",
    "add_with_carry128",
    "sub_with_carry128",
    "significant_bit_length",
]

MASK64 = (1 << 64) - 1
MASK128 = (1 << 128) - 1


def _require_u64(name: str, value: int) -> None:
    check(0 <= value <= MASK64, f"{name} {value} is not a 64-bit unsigned value")


def _join(hi: int, lo: int) -> int:
    _require_u64("hi", hi)
    _require_u64("lo", lo)
    return (hi << 64) | lo


def _split(value: int) -> tuple[int, int]:
    return (value >> 64) & MASK64, value & MASK64


def multiply_uint64(x: int, y: int) -> tuple[int, int]:
    """Return the 128-bit product ``x * y`` as ``(hi, lo)``."""
    _require_u64("x", x)
    _require_u64("y", y)
    return _split(x * y)


def multiply_uint64_hi(x: int, y: int, bit_shift: int) -> int:
    """Return the low 64 bits of ``(x * y) >> bit_shift``."""
    _require_u64("x", x)
    _require_u64("y", y)
    check(0 <= bit_shift <= 128, f"Invalid BitShift {bit_shift}")
    return ((x * y) >> bit_shift) & MASK64


def divide_uint128_uint64_lo(hi: int, lo: int, divisor: int) -> int:
    """Return the low 64 bits of the quotient of ``hi:lo`` by ``divisor``."""
    _require_u64("divisor", divisor)
    check(divisor != 0, f"denominator cannot be 0 {divisor}")
    return (_join(hi, lo) // divisor) & MASK64


def barrett_reduce128(hi: int, lo: int, modulus: int) -> int:
    """Return ``hi:lo`` reduced modulo ``modulus``."""
    _require_u64("modulus", modulus)
    check(modulus != 0, "modulus == 0")
    return _join(hi, lo) % modulus


def msb(value: int) -> int:
    """Return the index of the most significant set bit of a nonzero value."""
    _require_u64("value", value)
    check(value != 0, "MSB requires a nonzero input")
    return value.bit_length() - 1


def left_shift128(hi: int, lo: int, shift: int) -> tuple[int, int]:
    """Shift ``hi:lo`` left by ``shift`` bits, discarding overflow."""
    check(0 <= shift <= 128, f"shift_value cannot be greater than 128 {shift}")
    return _split((_join(hi, lo) << shift) & MASK128)


def right_shift128(hi: int, lo: int, shift: int) -> tuple[int, int]:
    """Shift ``hi:lo`` right by ``shift`` bits."""
    check(0 <= shift <= 128, f"shift_value cannot be greater than 128 {shift}")
    return _split(_join(hi, lo) >> shift)


def add_with_carry128(
    op1_hi: int, op1_lo: int, op2_hi: int, op2_lo: int
) -> tuple[int, int]:
    """Return ``op1 + op2`` modulo 2**128 as ``(hi, lo)``."""
    return _split((_join(op1_hi, op1_lo) + _join(op2_hi, op2_lo)) & MASK128)


def sub_with_carry128(
    op1_hi: int, op1_lo: int, op2_hi: int, op2_lo: int
) -> tuple[int, int]:
    """Return ``op1 - op2`` modulo 2**128 as ``(hi, lo)``."""
    return _split((_join(op1_hi, op1_lo) - _join(op2_hi, op2_lo)) & MASK128)


def significant_bit_length(hi: int, lo: int) -> int:
    """Return the number of significant bits in ``hi:lo`` (0 for zero)."""
    return _join(hi, lo).bit_length()