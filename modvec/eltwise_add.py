"""Element-wise modular addition of vectors."""

from collections.abc import Iterable

from modvec.checks import check, check_bounds

__all__ = ["eltwise_add_mod"]


def eltwise_add_mod(
    operand1: Iterable[int], operand2: "Iterable[int] | int", modulus: int
) -> list[int]:
    """Return ``(a + b) mod modulus`` element-wise.

    ``operand2`` is either a vector of the same length as ``operand1`` or a
    scalar added to every element. All inputs must be below ``modulus``,
    which must lie in ``[2, 2**63 - 1]``.
    """
    first = list(operand1)
    check(len(first) != 0, "Require n != 0")
    check(modulus > 1, "Require modulus > 1")
    check(modulus < (1 << 63), "Require modulus < 2**63")
    check_bounds(
        first, modulus, f"pre-add value in operand1 exceeds bound {modulus}"
    )

    if isinstance(operand2, int):
        check(operand2 < modulus, "Require operand2 < modulus")
        second = [operand2] * len(first)
    else:
        second = list(operand2)
        check(
            len(second) == len(first),
            f"operand lengths differ: {len(first)} and {len(second)}",
        )
        check_bounds(
            second, modulus, f"pre-add value in operand2 exceeds bound {modulus}"
        )

    result = []
    for a, b in zip(first, second):
        total = a + b
        result.append(total - modulus if total >= modulus else total)
    return result