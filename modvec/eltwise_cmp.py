"""Element-wise conditional addition and modular subtraction."""

from collections.abc import Iterable

from modvec.checks import check
from modvec.cmp import CmpInt

__all__ = ["eltwise_cmp_add", "eltwise_cmp_sub_mod"]

_MASK64 = (1 << 64) - 1


def eltwise_cmp_add(
    operand1: Iterable[int], cmp: CmpInt, bound: int, diff: int
) -> list[int]:
    """Return ``x + diff`` where ``cmp(x, bound)`` holds, else ``x``.

    Sums wrap around at 2**64 like unsigned 64-bit words.
    """
    values = list(operand1)
    check(len(values) != 0, "Require n != 0")
    op = CmpInt(cmp)
    return [(x + diff) & _MASK64 if op.apply(x, bound) else x for x in values]


def eltwise_cmp_sub_mod(
    operand1: Iterable[int], modulus: int, cmp: CmpInt, bound: int, diff: int
) -> list[int]:
    """Return ``(x - diff) mod modulus`` where ``cmp(x, bound)`` holds, else ``x``."""
    values = list(operand1)
    check(len(values) != 0, "Require n != 0")
    check(modulus > 1, "Require modulus > 1")
    op = CmpInt(cmp)
    return [(x - diff) % modulus if op.apply(x, bound) else x for x in values]