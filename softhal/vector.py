"""Element-wise vector operations on wide (64/128/256-bit) integers.

Vectors are sequences of plain Python ints. Every operation returns a new
list or value and leaves its inputs untouched. Results are wrapped to the
width of the result type, as the fixed-width arithmetic in
:mod:`softhal.wideint` does.
"""

from __future__ import annotations

from typing import Callable, Iterator, Sequence

from softhal import wideint

__all__ = [
    "VectorDivisionError",
    "vmul_i128",
    "vmul_u128",
    "vdiv_i128",
    "vdiv_u128",
    "vdot_i64",
    "vdot_u64",
    "vdot_i128",
    "vdot_u128",
    "vmac_i64",
    "vmac_u64",
    "vmac_i128",
    "vmac_u128",
]


class VectorDivisionError(ZeroDivisionError):
    """Raised when one or more divisors in a vector division are zero.

    Division still runs over every element: ``result`` holds the full output,
    with 0 at each position in ``indices`` where the divisor was zero.
    """

    def __init__(self, result: list[int], indices: list[int]) -> None:
        self.result = result
        self.indices = indices
        super().__init__(f"division by zero at indices {indices}")


def _pairs(a: Sequence[int], b: Sequence[int]) -> Iterator[tuple[int, int]]:
    if len(a) != len(b):
        raise ValueError(f"vector lengths differ: {len(a)} != {len(b)}")
    return zip(a, b)


def _triples(
    c: Sequence[int], a: Sequence[int], b: Sequence[int]
) -> Iterator[tuple[int, int, int]]:
    if not (len(c) == len(a) == len(b)):
        raise ValueError(f"vector lengths differ: {len(c)}, {len(a)}, {len(b)}")
    if not a:
        raise ValueError("multiply-accumulate needs at least one element")
    return zip(c, a, b)


# -- multiplication ---------------------------------------------------------


def vmul_i128(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Element-wise signed 128x128 -> 256-bit products."""
    return [wideint.mul_i128(x, y) for x, y in _pairs(a, b)]


def vmul_u128(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Element-wise unsigned 128x128 -> 256-bit products."""
    return [wideint.mul_u128(x, y) for x, y in _pairs(a, b)]


# -- division ---------------------------------------------------------------


def _vdiv(
    a: Sequence[int], b: Sequence[int], divide: Callable[[int, int], int]
) -> list[int]:
    result: list[int] = []
    zero_at: list[int] = []
    for index, (x, y) in enumerate(_pairs(a, b)):
        if y == 0:
            zero_at.append(index)
            result.append(0)
            continue
        result.append(divide(x, y))
    if zero_at:
        raise VectorDivisionError(result, zero_at)
    return result


def vdiv_i128(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Element-wise signed 128-bit quotients, truncated toward zero.

    Raises VectorDivisionError if any divisor is zero.
    """
    return _vdiv(a, b, wideint.div_i128)


def vdiv_u128(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Element-wise unsigned 128-bit quotients.

    Raises VectorDivisionError if any divisor is zero.
    """
    return _vdiv(a, b, wideint.div_u128)


# -- dot product ------------------------------------------------------------


def _vdot(
    a: Sequence[int],
    b: Sequence[int],
    multiply: Callable[[int, int], int],
    add: Callable[[int, int], int],
) -> int:
    total = 0
    for x, y in _pairs(a, b):
        total = add(total, multiply(x, y))
    return total


def vdot_i64(a: Sequence[int], b: Sequence[int]) -> int:
    """Signed 64-bit dot product accumulated in a wrapping signed 128-bit sum."""
    return _vdot(a, b, wideint.mul_i64, wideint.add_i128)


def vdot_u64(a: Sequence[int], b: Sequence[int]) -> int:
    """Unsigned 64-bit dot product accumulated in a wrapping unsigned 128-bit sum."""
    return _vdot(a, b, wideint.mul_u64, wideint.add_u128)


def vdot_i128(a: Sequence[int], b: Sequence[int]) -> int:
    """Signed 128-bit dot product accumulated in a wrapping signed 256-bit sum."""
    return _vdot(a, b, wideint.mul_i128, wideint.add_i256)


def vdot_u128(a: Sequence[int], b: Sequence[int]) -> int:
    """Unsigned 128-bit dot product accumulated in a wrapping unsigned 256-bit sum."""
    return _vdot(a, b, wideint.mul_u128, wideint.add_u256)


# -- multiply-accumulate ----------------------------------------------------


def vmac_i64(c: Sequence[int], a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``c[i] + a[i] * b[i]`` for signed 64-bit inputs, wrapped to signed 128 bits."""
    return [wideint.add_i128(acc, wideint.mul_i64(x, y)) for acc, x, y in _triples(c, a, b)]


def vmac_u64(c: Sequence[int], a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``c[i] + a[i] * b[i]`` for unsigned 64-bit inputs, wrapped to 128 bits."""
    return [wideint.add_u128(acc, wideint.mul_u64(x, y)) for acc, x, y in _triples(c, a, b)]


def vmac_i128(c: Sequence[int], a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``c[i] + a[i] * b[i]`` for signed 128-bit inputs, wrapped to signed 256 bits."""
    return [wideint.add_i256(acc, wideint.mul_i128(x, y)) for acc, x, y in _triples(c, a, b)]


def vmac_u128(c: Sequence[int], a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``c[i] + a[i] * b[i]`` for unsigned 128-bit inputs, wrapped to 256 bits."""
    return [wideint.add_u256(acc, wideint.mul_u128(x, y)) for acc, x, y in _triples(c, a, b)]