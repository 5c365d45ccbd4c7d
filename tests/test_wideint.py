import pytest
from hypothesis import given
from hypothesis import strategies as st

from softhal import wideint as w

U64 = st.integers(min_value=0, max_value=(1 << 64) - 1)
I64 = st.integers(min_value=-(1 << 63), max_value=(1 << 63) - 1)
U128 = st.integers(min_value=0, max_value=(1 << 128) - 1)
I128 = st.integers(min_value=-(1 << 127), max_value=(1 << 127) - 1)
U256 = st.integers(min_value=0, max_value=(1 << 256) - 1)
I256 = st.integers(min_value=-(1 << 255), max_value=(1 << 255) - 1)

U128_MAX = (1 << 128) - 1
I128_MIN = -(1 << 127)
I128_MAX = (1 << 127) - 1


# -- conversions ------------------------------------------------------------


@given(U128)
def test_split_join_round_trip(value):
    upper, lower = w.split_u128(value)
    assert 0 <= upper <= w.MASK64
    assert 0 <= lower <= w.MASK64
    assert w.join_u128(upper, lower) == value


def test_split_u128_places_bit_64_in_upper():
    assert w.split_u128(1 << 64) == (1, 0)
    assert w.split_u128(w.MASK64) == (0, w.MASK64)


@given(U256)
def test_limbs_round_trip(value):
    limbs = w.to_limbs_256(value)
    assert len(limbs) == 4
    assert w.from_limbs_256(limbs) == value


def test_limbs_least_significant_first():
    assert w.to_limbs_256(1) == (1, 0, 0, 0)
    assert w.to_limbs_256(1 << 192) == (0, 0, 0, 1)


def test_limbs_of_negative_use_twos_complement():
    assert w.to_limbs_256(-1) == (w.MASK64,) * 4


def test_from_limbs_requires_four():
    with pytest.raises(ValueError):
        w.from_limbs_256([1, 2, 3])


def test_from_limbs_rejects_wide_limb():
    with pytest.raises(ValueError):
        w.from_limbs_256([1 << 64, 0, 0, 0])


def test_join_rejects_out_of_range():
    with pytest.raises(ValueError):
        w.join_u128(1 << 64, 0)


# -- predicates -------------------------------------------------------------


def test_is_zero():
    assert w.is_zero_u128(0) is True
    assert w.is_zero_u128(1 << 100) is False
    assert w.is_zero_i128(0) is True
    assert w.is_zero_i128(-1) is False


def test_is_zero_rejects_negative_unsigned():
    with pytest.raises(ValueError):
        w.is_zero_u128(-1)


# -- addition / subtraction -------------------------------------------------


def test_add_u128_carries_and_wraps():
    assert w.add_u128(w.MASK64, 1) == 1 << 64
    assert w.add_u128(U128_MAX, 1) == 0


def test_add_u128_u64_carries_into_upper():
    assert w.split_u128(w.add_u128_u64(w.MASK64, 1)) == (1, 0)


def test_add_i128_wraps_at_limits():
    assert w.add_i128(I128_MAX, 1) == I128_MIN


def test_sub_u128_borrows_and_wraps():
    assert w.sub_u128(1 << 64, 1) == w.MASK64
    assert w.sub_u128(0, 1) == U128_MAX


def test_sub_i128_wraps_at_limits():
    assert w.sub_i128(I128_MIN, 1) == I128_MAX


def test_add_u256_limb_carry_chain():
    assert w.to_limbs_256(w.add_u256(w.MASK64, 1)) == (0, 1, 0, 0)
    assert w.add_u256((1 << 256) - 1, 1) == 0


def test_sub_u256_borrow_chain():
    assert w.to_limbs_256(w.sub_u256(1 << 192, 1)) == (w.MASK64, w.MASK64, w.MASK64, 0)


def test_add_u256_u128_propagates_to_top():
    a = (1 << 256) - 1 - w.MASK64
    assert w.add_u256_u128(a, w.MASK64) == (1 << 256) - 1


@given(U128, U128)
def test_add_sub_u128_inverse(a, b):
    assert w.sub_u128(w.add_u128(a, b), b) == a


@given(I128, I128)
def test_add_sub_i128_inverse(a, b):
    assert w.sub_i128(w.add_i128(a, b), b) == a


@given(U256, U256)
def test_add_sub_u256_inverse(a, b):
    assert w.sub_u256(w.add_u256(a, b), b) == a


@given(I256, I256)
def test_add_sub_i256_inverse(a, b):
    assert w.sub_i256(w.add_i256(a, b), b) == a


@given(U128, U128)
def test_add_u128_commutes(a, b):
    assert w.add_u128(a, b) == w.add_u128(b, a)


@given(U256, U128)
def test_add_u256_u128_matches_add_u256(a, b):
    assert w.add_u256_u128(a, b) == w.add_u256(a, b)


@given(U128, U64)
def test_add_u128_u64_matches_add_u128(a, b):
    assert w.add_u128_u64(a, b) == w.add_u128(a, b)


@given(I128, I128)
def test_add_i128_stays_in_range(a, b):
    result = w.add_i128(a, b)
    assert I128_MIN <= result <= I128_MAX


def test_add_rejects_out_of_range_operand():
    with pytest.raises(ValueError):
        w.add_u128(1 << 128, 0)
    with pytest.raises(ValueError):
        w.add_i128(I128_MAX + 1, 0)


def test_add_rejects_non_int():
    with pytest.raises(TypeError):
        w.add_u128(1.5, 0)


# -- multiplication ---------------------------------------------------------


@given(U64, U64)
def test_mul_u64_full_product_fits_128(a, b):
    product = w.mul_u64(a, b)
    assert 0 <= product <= U128_MAX
    if b:
        assert div_exact(product, b) == a


def div_exact(product, divisor):
    return w.div_u128(product, divisor)


def test_mul_u64_max_squared_split():
    upper, lower = w.split_u128(w.mul_u64(w.MASK64, w.MASK64))
    assert lower == 1
    assert upper == w.MASK64 - 1


@given(I64, I64)
def test_mul_i64_sign_and_magnitude(a, b):
    product = w.mul_i64(a, b)
    assert abs(product) == w.mul_u64(abs(a), abs(b)) if abs(a) <= w.MASK64 else True
    assert (product < 0) == ((a < 0) != (b < 0) and a != 0 and b != 0)


def test_mul_i64_negative_times_positive():
    assert w.mul_i64(-1, 1) == -1
    assert w.mul_i64(-(1 << 63), -(1 << 63)) == 1 << 126


@given(U128, U128)
def test_mul_u128_commutes_and_fits_256(a, b):
    product = w.mul_u128(a, b)
    assert product == w.mul_u128(b, a)
    assert 0 <= product < 1 << 256


@given(I128, I128)
def test_mul_i128_negation_symmetry(a, b):
    product = w.mul_i128(a, b)
    if a != I128_MIN:
        assert w.mul_i128(-a, b) == -product
    assert -(1 << 255) <= product < 1 << 255


def test_mul_i128_minus_one_times_minus_one():
    assert w.mul_i128(-1, -1) == 1


def test_mul_u128_upper_limb_of_max_square():
    limbs = w.to_limbs_256(w.mul_u128(U128_MAX, U128_MAX))
    assert limbs[0] == 1
    assert limbs[3] == w.MASK64


def test_mul_rejects_out_of_range():
    with pytest.raises(ValueError):
        w.mul_u64(1 << 64, 1)
    with pytest.raises(ValueError):
        w.mul_i64(1 << 63, 1)


# -- division ---------------------------------------------------------------


def test_div_by_zero_yields_zero():
    assert w.div_u128(12345, 0) == 0
    assert w.div_i128(-12345, 0) == 0


@given(U128, st.integers(min_value=1, max_value=U128_MAX))
def test_div_u128_quotient_bounds(n, d):
    q = w.div_u128(n, d)
    assert q * d <= n < (q + 1) * d


@given(I128, I128.filter(lambda v: v != 0))
def test_div_i128_truncates_toward_zero(n, d):
    q = w.div_i128(n, d)
    if not (n == I128_MIN and d == -1):
        assert abs(q) * abs(d) <= abs(n) < (abs(q) + 1) * abs(d)
        if q != 0:
            assert (q < 0) == ((n < 0) != (d < 0))


def test_div_i128_truncation_examples():
    assert w.div_i128(-7, 2) == -3
    assert w.div_i128(7, -2) == -3
    assert w.div_i128(-7, -2) == 3


def test_div_i128_overflow_wraps():
    assert w.div_i128(I128_MIN, -1) == I128_MIN


def test_div_u128_wide_operands():
    assert w.div_u128(U128_MAX, w.MASK64) == (1 << 64) + 1


def test_div_rejects_out_of_range():
    with pytest.raises(ValueError):
        w.div_u128(-1, 1)
    with pytest.raises(ValueError):
        w.div_i128(0, I128_MIN - 1)