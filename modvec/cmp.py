"""Comparison operations used by conditional element-wise kernels."""

import enum

__all__ = ["CmpInt"]


class CmpInt(enum.IntEnum):
    """Binary comparison between two integers."""

    EQ = 0
    LT = 1
    LE = 2
    FALSE = 3
    NE = 4
    NLT = 5
    NLE = 6
    TRUE = 7

    def negate(self) -> "CmpInt":
        """Return the comparison that is the logical negation of this one."""
        return _NEGATIONS[self]

    def apply(self, lhs: int, rhs: int) -> bool:
        """Evaluate the comparison ``lhs <op> rhs``."""
        return _OPERATIONS[self](lhs, rhs)


_NEGATIONS = {
    CmpInt.EQ: CmpInt.NE,
    CmpInt.LT: CmpInt.NLT,
    CmpInt.LE: CmpInt.NLE,
    CmpInt.FALSE: CmpInt.TRUE,
    CmpInt.NE: CmpInt.EQ,
    CmpInt.NLT: CmpInt.LT,
    CmpInt.NLE: CmpInt.LE,
    CmpInt.TRUE: CmpInt.FALSE,
}

_OPERATIONS = {
    CmpInt.EQ: lambda a, b: a == b,
    CmpInt.LT: lambda a, b: a < b,
    CmpInt.LE: lambda a, b: a <= b,
    CmpInt.FALSE: lambda a, b: False,
    CmpInt.NE: lambda a, b: a != b,
    CmpInt.NLT: lambda a, b: a >= b,
    CmpInt.NLE: lambda a, b: a > b,
    CmpInt.TRUE: lambda a, b: True,
}