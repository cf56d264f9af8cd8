"""Element-wise fused multiply-add modulo a word-sized modulus."""

from collections.abc import Iterable

from modvec.checks import check, check_bounds
from modvec.number_theory import MultiplyFactor, multiply_mod_lazy_precon, reduce_mod

__all__ = ["eltwise_fma_mod"]


def eltwise_fma_mod(
    arg1: Iterable[int],
    arg2: int,
    arg3: "Iterable[int] | None",
    modulus: int,
    input_mod_factor: int,
) -> list[int]:
    """Return ``(a * arg2 + c) mod modulus`` element-wise.

    ``arg3`` may be ``None``, in which case nothing is added. Inputs are
    assumed to lie in ``[0, input_mod_factor * modulus)``; the factor must be
    1, 2, 4 or 8 and ``modulus`` must lie in ``[2, 2**61 - 1]``.
    """
    first = list(arg1)
    check(len(first) != 0, "Require n != 0")
    check(modulus > 1, "Require modulus > 1")
    check(modulus < (1 << 61), "Require modulus < (1ULL << 61)")
    check(
        input_mod_factor in (1, 2, 4, 8),
        "Require input_mod_factor = 1, 2, 4, or 8",
    )
    bound = input_mod_factor * modulus
    check(arg2 < bound, f"arg2 exceeds bound {bound}")
    check_bounds(first, bound, f"arg1 exceeds bound {bound}")

    addends = None
    if arg3 is not None:
        addends = list(arg3)
        check(
            len(addends) == len(first),
            f"operand lengths differ: {len(first)} and {len(addends)}",
        )
        check_bounds(addends, bound, f"arg3 exceeds bound {bound}")

    scalar = reduce_mod(arg2, modulus, input_mod_factor)
    barrett = MultiplyFactor(scalar, 64, modulus).barrett_factor

    def product(value: int) -> int:
        x = reduce_mod(value, modulus, input_mod_factor)
        lazy = multiply_mod_lazy_precon(x, scalar, barrett, modulus, 64)
        return lazy - modulus if lazy >= modulus else lazy

    if addends is None:
        return [product(a) for a in first]

    result = []
    for a, c in zip(first, addends):
        total = product(a) + reduce_mod(c, modulus, input_mod_factor)
        result.append(total - modulus if total >= modulus else total)
    return result