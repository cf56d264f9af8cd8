"""Element-wise modular arithmetic on vectors of unsigned 64-bit integers."""

__version__ = "0.1.0"

__all__ = [
    "checks",
    "cmp",
    "wideint",
    "number_theory",
    "eltwise_reduce",
    "eltwise_mult",
    "eltwise_sub",
    "eltwise_add",
    "eltwise_cmp",
    "eltwise_fma",
]