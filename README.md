# modvec

Element-wise modular arithmetic on vectors of unsigned 64-bit integers, as used
in lattice-based cryptography. Products are reduced with Barrett reduction.
The precomputed factors, wrap-around and 128-bit intermediate values follow
fixed-width machine arithmetic, so results match a 64-bit word implementation
bit for bit.

The package is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `modvec.checks` | `CheckError` (a `ValueError`), `check`, `check_bounds`: argument validation used throughout |
| `modvec.cmp` | `CmpInt`: an `IntEnum` of comparisons (`EQ`, `LT`, `LE`, `FALSE`, `NE`, `NLT`, `NLE`, `TRUE`) with `negate()` and `apply(lhs, rhs)` |
| `modvec.wideint` | 128-bit helpers on `(hi, lo)` word pairs: `multiply_uint64`, `multiply_uint64_hi`, `divide_uint128_uint64_lo`, `barrett_reduce128`, `msb`, `left_shift128`, `right_shift128`, `add_with_carry128`, `sub_with_carry128`, `significant_bit_length` |
| `modvec.number_theory` | `MultiplyFactor`, `is_power_of_two`, `log2`, `maximum_value`, `multiply_mod_lazy`, `multiply_mod_lazy_precon`, `add_uint64`, `reduce_mod` |
| `modvec.eltwise_reduce` | `eltwise_reduce_mod`, `eltwise_reduce_mod_native` |
| `modvec.eltwise_mult` | `eltwise_mult_mod`, `eltwise_mult_mod_native` |
| `modvec.eltwise_sub` | `eltwise_sub_mod` |
| `modvec.eltwise_add` | `eltwise_add_mod` |
| `modvec.eltwise_cmp` | `eltwise_cmp_add`, `eltwise_cmp_sub_mod` |
| `modvec.eltwise_fma` | `eltwise_fma_mod` |

Every vector operation takes an iterable of non-negative integers and returns a
new list. An invalid argument raises `modvec.checks.CheckError`. This covers an
empty vector, a modulus below 2, an unsupported input mod factor, vectors of
different lengths, and an element outside the documented bound. The `wideint`
helpers also raise `CheckError` when a word is not a 64-bit unsigned value.

## Examples

```python
from modvec.eltwise_mult import eltwise_mult_mod
from modvec.eltwise_add import eltwise_add_mod
from modvec.eltwise_sub import eltwise_sub_mod
from modvec.eltwise_fma import eltwise_fma_mod
from modvec.eltwise_reduce import eltwise_reduce_mod
from modvec.eltwise_cmp import eltwise_cmp_add
from modvec.cmp import CmpInt

modulus = 769

eltwise_mult_mod([1, 2, 3, 4], [5, 6, 7, 8], modulus, 1)
# [5, 12, 21, 32]

eltwise_add_mod([1, 2, 768], [1, 1, 1], modulus)
# [2, 3, 0]

# A scalar may stand in for the second operand of addition and subtraction
eltwise_sub_mod([1, 2, 3], 2, modulus)
# [768, 0, 1]

# (arg1 * arg2 + arg3) mod modulus; pass None as arg3 to skip the addition
eltwise_fma_mod([1, 2, 3], 4, [1, 1, 1], modulus, 1)
# [5, 9, 13]

# Bring values in [0, 4 * modulus) down to [0, modulus)
eltwise_reduce_mod([800, 1600, 3000], modulus, 4, 1)
# [31, 62, 693]

# Add 10 to every element less than 3
eltwise_cmp_add([1, 2, 3, 4], CmpInt.LT, 3, 10)
# [11, 12, 3, 4]
```

`eltwise_cmp_add` wraps sums at 2**64. `eltwise_cmp_sub_mod(operand1, modulus,
cmp, bound, diff)` returns `(x - diff) mod modulus` where the comparison holds
and leaves other elements unchanged.

### Limits on the modulus

- `eltwise_add_mod` and `eltwise_sub_mod`: modulus in `[2, 2**63 - 1]`; all
  inputs below the modulus.
- `eltwise_mult_mod`: modulus below 2**62 and `input_mod_factor * modulus`
  below 2**63.
- `eltwise_fma_mod`: modulus in `[2, 2**61 - 1]`.

### Input mod factors

Several operations accept an `input_mod_factor`. It states that the inputs lie
in `[0, input_mod_factor * modulus)` rather than being fully reduced, and the
operation reduces them cheaply before use.

- `eltwise_mult_mod` accepts 1, 2 or 4.
- `eltwise_fma_mod` accepts 1, 2, 4 or 8.
- `eltwise_reduce_mod` accepts 0, 2 or 4, with an `output_mod_factor` of 1 or
  2. A factor of 0 means nothing is known about the range, and Barrett
  reduction brings each element into `[0, modulus)`. When the input and output
  factors are equal, `eltwise_reduce_mod` returns an unchanged copy.
  `eltwise_reduce_mod_native` rejects equal factors.

### Number-theory helpers

```python
from modvec.number_theory import (
    MultiplyFactor, add_uint64, log2, maximum_value, multiply_mod_lazy, reduce_mod,
)

mf = MultiplyFactor(7, 64, 10)
mf.barrett_factor                 # floor((7 << 64) / 10); bit_shift may be 32, 52 or 64

multiply_mod_lazy(7, 7, 10, 64)   # 9; lazy results may lie in [0, 2 * modulus]
log2(4096)                        # 12
maximum_value(52)                 # 0xfffffffffffff
add_uint64(1 << 63, 1 << 63)      # (0, 1): the wrapped sum and the carry
reduce_mod(25, 10, 4)             # 5
```

## What the package does not do

The package covers element-wise vector operations and the word-level helpers
they rely on. It has no number-theoretic transform. It has no prime testing or
prime generation, no root-of-unity search, no modular inverse or modular power.
It has no vectorised or hardware-accelerated code path: every operation runs
element by element in Python.