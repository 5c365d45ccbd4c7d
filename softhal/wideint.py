"""Fixed-width 64/128/256-bit integer arithmetic with two's-complement wrap-around.

Values are plain Python ints. Unsigned operands must lie in ``[0, 2**bits)``
and signed operands in ``[-2**(bits-1), 2**(bits-1))``. Results are wrapped
to the width of the result type, as fixed-width hardware registers would be.
"""

from __future__ import annotations

from typing import Iterable

MASK64 = (1 << 64) - 1
MASK128 = (1 << 128) - 1
MASK256 = (1 << 256) - 1

__all__ = [
    "split_u128",
    "join_u128",
    "to_limbs_256",
    "from_limbs_256",
    "is_zero_u128",
    "is_zero_i128",
    "add_u128_u64",
    "add_u128",
    "add_i128",
    "add_u256",
    "add_i256",
    "add_u256_u128",
    "sub_u128",
    "sub_i128",
    "sub_u256",
    "sub_i256",
    "mul_u64",
    "mul_i64",
    "mul_u128",
    "mul_i128",
    "div_u128",
    "div_i128",
]


def _check_unsigned(value: int, bits: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name}={value} does not fit in an unsigned {bits}-bit integer")
    return value


def _check_signed(value: int, bits: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"{name}={value} does not fit in a signed {bits}-bit integer")
    return value


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


# -- conversions ------------------------------------------------------------


def split_u128(value: int) -> tuple[int, int]:
    """Split an unsigned 128-bit value into its (upper, lower) 64-bit halves."""
    _check_unsigned(value, 128, "value")
    return value >> 64, value & MASK64


def join_u128(upper: int, lower: int) -> int:
    """Join two unsigned 64-bit halves into an unsigned 128-bit value."""
    _check_unsigned(upper, 64, "upper")
    _check_unsigned(lower, 64, "lower")
    return (upper << 64) | lower


def to_limbs_256(value: int) -> tuple[int, int, int, int]:
    """Return the four 64-bit limbs of a 256-bit value, least significant first.

    Negative values are encoded in two's complement.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"value must be an int, not {type(value).__name__}")
    if not -(1 << 255) <= value < (1 << 256):
        raise ValueError(f"value={value} does not fit in 256 bits")
    value &= MASK256
    return tuple((value >> (64 * i)) & MASK64 for i in range(4))  # type: ignore[return-value]


def from_limbs_256(limbs: Iterable[int]) -> int:
    """Build an unsigned 256-bit value from four 64-bit limbs, least significant first."""
    parts = list(limbs)
    if len(parts) != 4:
        raise ValueError(f"expected 4 limbs, got {len(parts)}")
    result = 0
    for index, limb in enumerate(parts):
        _check_unsigned(limb, 64, f"limbs[{index}]")
        result |= limb << (64 * index)
    return result


# -- predicates -------------------------------------------------------------


def is_zero_u128(a: int) -> bool:
    """True if the unsigned 128-bit value is zero."""
    return _check_unsigned(a, 128, "a") == 0


def is_zero_i128(a: int) -> bool:
    """True if the signed 128-bit value is zero."""
    return _check_signed(a, 128, "a") == 0


# -- addition ---------------------------------------------------------------


def add_u128_u64(a: int, b: int) -> int:
    """Add an unsigned 64-bit value to an unsigned 128-bit value, wrapping."""
    _check_unsigned(a, 128, "a")
    _check_unsigned(b, 64, "b")
    return (a + b) & MASK128


def add_u128(a: int, b: int) -> int:
    """Unsigned 128-bit addition, wrapping modulo 2**128."""
    _check_unsigned(a, 128, "a")
    _check_unsigned(b, 128, "b")
    return (a + b) & MASK128


def add_i128(a: int, b: int) -> int:
    """Signed 128-bit addition with two's-complement wrap-around."""
    _check_signed(a, 128, "a")
    _check_signed(b, 128, "b")
    return _wrap_signed(a + b, 128)


def add_u256(a: int, b: int) -> int:
    """Unsigned 256-bit addition, wrapping modulo 2**256."""
    _check_unsigned(a, 256, "a")
    _check_unsigned(b, 256, "b")
    return (a + b) & MASK256


def add_i256(a: int, b: int) -> int:
    """Signed 256-bit addition with two's-complement wrap-around."""
    _check_signed(a, 256, "a")
    _check_signed(b, 256, "b")
    return _wrap_signed(a + b, 256)


def add_u256_u128(a: int, b: int) -> int:
    """Add an unsigned 128-bit value to an unsigned 256-bit value, wrapping."""
    _check_unsigned(a, 256, "a")
    _check_unsigned(b, 128, "b")
    return (a + b) & MASK256


# -- subtraction ------------------------------------------------------------


def sub_u128(a: int, b: int) -> int:
    """Unsigned 128-bit subtraction ``a - b``, wrapping modulo 2**128."""
    _check_unsigned(a, 128, "a")
    _check_unsigned(b, 128, "b")
    return (a - b) & MASK128


def sub_i128(a: int, b: int) -> int:
    """Signed 128-bit subtraction ``a - b`` with two's-complement wrap-around."""
    _check_signed(a, 128, "a")
    _check_signed(b, 128, "b")
    return _wrap_signed(a - b, 128)


def sub_u256(a: int, b: int) -> int:
    """Unsigned 256-bit subtraction ``a - b``, wrapping modulo 2**256."""
    _check_unsigned(a, 256, "a")
    _check_unsigned(b, 256, "b")
    return (a - b) & MASK256


def sub_i256(a: int, b: int) -> int:
    """Signed 256-bit subtraction ``a - b`` with two's-complement wrap-around."""
    _check_signed(a, 256, "a")
    _check_signed(b, 256, "b")
    return _wrap_signed(a - b, 256)


# -- multiplication ---------------------------------------------------------


def mul_u64(a: int, b: int) -> int:
    """Full unsigned product of two 64-bit values as a 128-bit value."""
    _check_unsigned(a, 64, "a")
    _check_unsigned(b, 64, "b")
    return a * b


def mul_i64(a: int, b: int) -> int:
    """Full signed product of two 64-bit values as a 128-bit value."""
    _check_signed(a, 64, "a")
    _check_signed(b, 64, "b")
    return a * b


def mul_u128(a: int, b: int) -> int:
    """Full unsigned product of two 128-bit values as a 256-bit value."""
    _check_unsigned(a, 128, "a")
    _check_unsigned(b, 128, "b")
    return a * b


def mul_i128(a: int, b: int) -> int:
    """Full signed product of two 128-bit values as a 256-bit value."""
    _check_signed(a, 128, "a")
    _check_signed(b, 128, "b")
    return a * b


# -- division ---------------------------------------------------------------


def div_u128(n: int, d: int) -> int:
    """Unsigned 128-bit quotient ``n / d``; a zero divisor yields 0."""
    _check_unsigned(n, 128, "n")
    _check_unsigned(d, 128, "d")
    if d == 0:
        return 0
    return n // d


def div_i128(n: int, d: int) -> int:
    """Signed 128-bit quotient truncated toward zero; a zero divisor yields 0.

    The one overflowing case, ``-2**127 / -1``, wraps back to ``-2**127``.
    """
    _check_signed(n, 128, "n")
    _check_signed(d, 128, "d")
    if d == 0:
        return 0
    quotient = abs(n) // abs(d)
    if (n < 0) != (d < 0):
        quotient = -quotient
    return _wrap_signed(quotient, 128)