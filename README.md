# softhal

softhal emulates fixed-width integer arithmetic in software, along with the
vector and matrix kernels built on it. Values are plain Python `int`s. Every
result wraps the way a 64-, 128- or 256-bit two's-complement register would,
so you can check results bit for bit against fixed-width code.

## Install

```
pip install softhal
```

To run the tests:

```
pip install "softhal[test]"
pytest
```

## Modules

### `softhal.wideint`

Scalar helpers for 128- and 256-bit values.

- **Conversions:** `split_u128` and `join_u128` convert between a 128-bit value
  and its `(upper, lower)` 64-bit halves. `to_limbs_256` and `from_limbs_256`
  convert between a 256-bit value and its four 64-bit limbs, least significant
  first. `to_limbs_256` returns a tuple and encodes negative values in two's
  complement.
- **Predicates:** `is_zero_u128` and `is_zero_i128`.
- **Wrapping addition:** `add_u128_u64`, `add_u128`, `add_i128`, `add_u256`,
  `add_i256` and `add_u256_u128`.
- **Wrapping subtraction:** `sub_u128`, `sub_i128`, `sub_u256` and `sub_i256`.
- **Widening multiplication:** `mul_u64` and `mul_i64` return a 128-bit product.
  `mul_u128` and `mul_i128` return a 256-bit product.
- **Division:** `div_u128`, and `div_i128`, which truncates toward zero.
  - A zero divisor gives 0.
  - `div_i128(-2**127, -1)` wraps back to `-2**127`.

Operands are checked against their declared width. An out-of-range value
raises `ValueError`. A non-integer, including a `bool`, raises `TypeError`.

### `softhal.vector`

Kernels over sequences of wide integers. Each one returns a new list or value
and leaves its inputs unchanged.

- **Element-wise products:** `vmul_i128` and `vmul_u128`, each 128×128 → 256 bits.
- **Element-wise quotients:** `vdiv_i128` and `vdiv_u128`. If any divisor is
  zero, they raise `VectorDivisionError`, a subclass of `ZeroDivisionError`.
  - Division still runs over every element first.
  - The error's `result` holds the complete output, with 0 wherever the divisor
    was zero.
  - The error's `indices` lists those positions.
- **Dot products:**
  - `vdot_i64` and `vdot_u64` accumulate in a wrapping 128-bit sum.
  - `vdot_i128` and `vdot_u128` accumulate in a wrapping 256-bit sum.
- **Multiply-accumulate:** `vmac_i64`, `vmac_u64`, `vmac_i128` and `vmac_u128`
  return `c[i] + a[i] * b[i]`, wrapped to 128 or 256 bits. Empty input raises
  `ValueError`.

All of these raise `ValueError` when the vector lengths differ.

### `softhal.matrix`

Row-major matrix products C (m×n) = A (m×k) · B (k×n). Inputs and results are
flat lists. The result has length m·n.

- **Integer kernels:**
  - `matrix_vmul_tiled_i8` through `matrix_vmul_tiled_u128` are the tiled
    variants, for 8-, 16-, 32-, 64- and 128-bit elements.
  - `matrix_vmul_i64`, `matrix_vmul_u64`, `matrix_vmul_i128` and
    `matrix_vmul_u128` are the untiled variants.
  - Each result wraps at twice the input width (8 → 16, …, 128 → 256 bits).
  - Tiling cannot change an integer result.
- **Float kernels:**
  - Both round their inputs, and each product, to single precision.
  - `matrix_vmul_c_f32` is the reference kernel and accumulates in double
    precision.
  - `matrix_vmul_tiled_f32` accumulates in single precision, tile by tile.
- **Edge cases:**
  - A non-positive `m` or `n` returns an empty list.
  - A non-positive `k` returns all zeros.
- **Errors:**
  - `ValueError` for a non-positive `tile_size`, a wrong input length or an
    element that is out of range.
  - `TypeError` for an element of the wrong type.

## Example

```python
from softhal.wideint import mul_u128, to_limbs_256
from softhal.vector import vdot_i64
from softhal.matrix import matrix_vmul_tiled_i8

product = mul_u128(2**127, 4)           # 2**129, exact in 256 bits
limbs = to_limbs_256(product)           # (0, 0, 2, 0), least significant first

dot = vdot_i64([1, -2, 3], [4, 5, -6])  # -24

c = matrix_vmul_tiled_i8([1, 2, 3, 4], [5, 6, 7, 8], 2, 2, 2, tile_size=1)
# [19, 22, 43, 50]
```

## What it does not do

softhal is a library only. It has no command-line program and no benchmark
runner.

- Every kernel runs in pure Python. None of them uses vector or accelerator
  hardware.
- The vector module covers only the wide-integer operations listed above. It
  has no element-wise addition, subtraction or division for 8- to 64-bit or
  float vectors.