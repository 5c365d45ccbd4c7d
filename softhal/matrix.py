"""Dense matrix multiplication on fixed-width integers and single-precision floats.

Matrices are flat, row-major sequences: ``a`` holds ``m * k`` elements,
``b`` holds ``k * n`` and the result holds ``m * n``. Integer results are
wrapped to the width of the result type:

* 8 -> 16 bits
* 16 -> 32 bits
* 32 -> 64 bits
* 64 -> 128 bits
* 128 -> 256 bits

Float inputs are rounded to single precision. Each product is also formed in
single precision. The reference kernel accumulates in double precision. The
tiled kernel accumulates in single precision within each tile.

A non-positive ``m`` or ``n`` gives an empty result. A non-positive ``k``
gives a result of zeros.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Sequence

__all__ = [
    "matrix_vmul_c_f32",
    "matrix_vmul_tiled_i8",
    "matrix_vmul_tiled_u8",
    "matrix_vmul_tiled_i16",
    "matrix_vmul_tiled_u16",
    "matrix_vmul_tiled_i32",
    "matrix_vmul_tiled_u32",
    "matrix_vmul_tiled_i64",
    "matrix_vmul_tiled_u64",
    "matrix_vmul_tiled_i128",
    "matrix_vmul_tiled_u128",
    "matrix_vmul_tiled_f32",
    "matrix_vmul_i64",
    "matrix_vmul_u64",
    "matrix_vmul_i128",
    "matrix_vmul_u128",
]


@dataclass(frozen=True)
class _IntKind:
    in_bits: int
    out_bits: int
    signed: bool

    @property
    def bounds(self) -> tuple[int, int]:
        if self.signed:
            limit = 1 << (self.in_bits - 1)
            return -limit, limit
        return 0, 1 << self.in_bits

    def wrap(self, value: int) -> int:
        value &= (1 << self.out_bits) - 1
        if self.signed and value >> (self.out_bits - 1):
            value -= 1 << self.out_bits
        return value


_I8 = _IntKind(8, 16, True)
_U8 = _IntKind(8, 16, False)
_I16 = _IntKind(16, 32, True)
_U16 = _IntKind(16, 32, False)
_I32 = _IntKind(32, 64, True)
_U32 = _IntKind(32, 64, False)
_I64 = _IntKind(64, 128, True)
_U64 = _IntKind(64, 128, False)
_I128 = _IntKind(128, 256, True)
_U128 = _IntKind(128, 256, False)


def _check_length(values: Sequence, expected: int, name: str) -> None:
    if len(values) != expected:
        raise ValueError(f"{name} has {len(values)} elements, expected {expected}")


def _check_tile(tile_size: int) -> None:
    if tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {tile_size}")


def _validated_ints(values: Sequence[int], expected: int, kind: _IntKind, name: str) -> list[int]:
    _check_length(values, expected, name)
    low, high = kind.bounds
    result = list(values)
    for index, value in enumerate(result):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name}[{index}] must be an int, not {type(value).__name__}")
        if not low <= value < high:
            sign = "signed" if kind.signed else "unsigned"
            raise ValueError(
                f"{name}[{index}]={value} does not fit in a {sign} {kind.in_bits}-bit integer"
            )
    return result


def _f32(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _validated_floats(values: Sequence[float], expected: int, name: str) -> list[float]:
    _check_length(values, expected, name)
    result = []
    for index, value in enumerate(values):
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError(f"{name}[{index}] must be a number, not {type(value).__name__}")
        result.append(_f32(float(value)))
    return result


def _rows(flat: list, width: int) -> list[list]:
    return [flat[start:start + width] for start in range(0, len(flat), width)]


def _columns(flat: list, width: int) -> list[list]:
    return [flat[col::width] for col in range(width)]


def _int_matmul(
    a: Sequence[int], b: Sequence[int], m: int, n: int, k: int, kind: _IntKind
) -> list[int]:
    if m <= 0 or n <= 0:
        return []
    if k <= 0:
        return [0] * (m * n)
    rows = _rows(_validated_ints(a, m * k, kind, "a"), k)
    cols = _columns(_validated_ints(b, k * n, kind, "b"), n)
    return [kind.wrap(sum(x * y for x, y in zip(row, col))) for row in rows for col in cols]


def _tiled_int_matmul(
    a: Sequence[int], b: Sequence[int], m: int, n: int, k: int, tile_size: int, kind: _IntKind
) -> list[int]:
    _check_tile(tile_size)
    # Wrapping addition is modular, so the tile order cannot change the result.
    return _int_matmul(a, b, m, n, k, kind)


# -- floating point ---------------------------------------------------------


def matrix_vmul_c_f32(a: Sequence[float], b: Sequence[float], m: int, n: int, k: int) -> list[float]:
    """Reference product of single-precision matrices, accumulated in double precision."""
    if m <= 0 or n <= 0:
        return []
    if k <= 0:
        return [0.0] * (m * n)
    rows = _rows(_validated_floats(a, m * k, "a"), k)
    cols = _columns(_validated_floats(b, k * n, "b"), n)
    result = []
    for row in rows:
        for col in cols:
            total = 0.0
            for x, y in zip(row, col):
                total += _f32(x * y)
            result.append(total)
    return result


def matrix_vmul_tiled_f32(
    a: Sequence[float], b: Sequence[float], m: int, n: int, k: int, tile_size: int
) -> list[float]:
    """Tiled product of single-precision matrices.

    Each tile accumulates in single precision, in i, j, k tile order.
    """
    _check_tile(tile_size)
    if m <= 0 or n <= 0:
        return []
    if k <= 0:
        return [0.0] * (m * n)
    rows = _rows(_validated_floats(a, m * k, "a"), k)
    b_rows = _rows(_validated_floats(b, k * n, "b"), n)
    out = [[0.0] * n for _ in range(m)]
    for i0 in range(0, m, tile_size):
        for j0 in range(0, n, tile_size):
            for k0 in range(0, k, tile_size):
                k_end = min(k0 + tile_size, k)
                for ii in range(i0, min(i0 + tile_size, m)):
                    a_row = rows[ii]
                    out_row = out[ii]
                    for jj in range(j0, min(j0 + tile_size, n)):
                        acc = _f32(out_row[jj])
                        for kk in range(k0, k_end):
                            acc = _f32(acc + _f32(a_row[kk] * b_rows[kk][jj]))
                        out_row[jj] = acc
    return [value for row in out for value in row]


# -- tiled integer kernels --------------------------------------------------


def matrix_vmul_tiled_i8(a, b, m, n, k, tile_size):
    """Signed 8-bit matrix product wrapped to signed 16 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _I8)


def matrix_vmul_tiled_u8(a, b, m, n, k, tile_size):
    """Unsigned 8-bit matrix product wrapped to 16 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _U8)


def matrix_vmul_tiled_i16(a, b, m, n, k, tile_size):
    """Signed 16-bit matrix product wrapped to signed 32 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _I16)


def matrix_vmul_tiled_u16(a, b, m, n, k, tile_size):
    """Unsigned 16-bit matrix product wrapped to 32 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _U16)


def matrix_vmul_tiled_i32(a, b, m, n, k, tile_size):
    """Signed 32-bit matrix product wrapped to signed 64 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _I32)


def matrix_vmul_tiled_u32(a, b, m, n, k, tile_size):
    """Unsigned 32-bit matrix product wrapped to 64 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _U32)


def matrix_vmul_tiled_i64(a, b, m, n, k, tile_size):
    """Signed 64-bit matrix product wrapped to signed 128 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _I64)


def matrix_vmul_tiled_u64(a, b, m, n, k, tile_size):
    """Unsigned 64-bit matrix product wrapped to 128 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _U64)


def matrix_vmul_tiled_i128(a, b, m, n, k, tile_size):
    """Signed 128-bit matrix product wrapped to signed 256 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _I128)


def matrix_vmul_tiled_u128(a, b, m, n, k, tile_size):
    """Unsigned 128-bit matrix product wrapped to 256 bits."""
    return _tiled_int_matmul(a, b, m, n, k, tile_size, _U128)


# -- untiled wide integer kernels --------------------------------------------


def matrix_vmul_i64(a, b, m, n, k):
    """Signed 64-bit matrix product wrapped to signed 128 bits."""
    return _int_matmul(a, b, m, n, k, _I64)


def matrix_vmul_u64(a, b, m, n, k):
    """Unsigned 64-bit matrix product wrapped to 128 bits."""
    return _int_matmul(a, b, m, n, k, _U64)


def matrix_vmul_i128(a, b, m, n, k):
    """Signed 128-bit matrix product wrapped to signed 256 bits."""
    return _int_matmul(a, b, m, n, k, _I128)


def matrix_vmul_u128(a, b, m, n, k):
    """Unsigned 128-bit matrix product wrapped to 256 bits."""
    return _int_matmul(a, b, m, n, k, _U128)