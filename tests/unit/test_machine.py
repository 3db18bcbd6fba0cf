"""
Tests for Machine Integers — Fixed-Width Naturals and Integers

Checked invariants:
1. MIN <= value <= MAX for every constructed instance
2. Checked arithmetic: overflow raises OverflowError, never wraps
3. div_alg is Euclidean (0 <= r < |rhs|)
4. mul_mod never overflows, even at the top of the range
5. Capability protocols are recognized structurally
"""

import pytest

from src.core.algebra import (
    I8,
    I64,
    I128,
    U8,
    U16,
    U64,
    U128,
    Bounded,
    EuclideanDivisible,
    FixedWidthInt,
    Halvable,
    HasOne,
    HasZero,
    ModularMultiplicative,
    Signed,
)


class TestRanges:
    """Width and signedness."""

    def test_unsigned_bounds(self):
        assert (U8.MIN, U8.MAX) == (0, 255)
        assert (U16.MIN, U16.MAX) == (0, 65535)
        assert U64.MAX == 2 ** 64 - 1
        assert U128.MAX == 2 ** 128 - 1

    def test_signed_bounds(self):
        assert (I8.MIN, I8.MAX) == (-128, 127)
        assert I64.MIN == -(2 ** 63)
        assert I128.MAX == 2 ** 127 - 1

    def test_out_of_range_construction(self):
        with pytest.raises(OverflowError, match="out of range for U8"):
            U8(256)
        with pytest.raises(OverflowError):
            U8(-1)
        with pytest.raises(OverflowError):
            I8(128)

    def test_non_int_construction(self):
        with pytest.raises(TypeError):
            U8(1.5)
        with pytest.raises(TypeError):
            U8(True)

    def test_try_from_int(self):
        assert U8.try_from_int(200) == U8(200)
        assert U8.try_from_int(300) is None
        assert I8.try_from_int(-128) == I8(-128)

    def test_width_requires_bits(self):
        with pytest.raises(ValueError, match="bits must be positive"):
            class Broken(FixedWidthInt):
                pass


class TestArithmetic:
    """Checked operations."""

    def test_basic_operations(self):
        assert U8(200) + U8(55) == U8(255)
        assert U8(10) - U8(3) == U8(7)
        assert U16(300) * U16(200) == U16(60000)
        assert U8(17) // U8(5) == U8(3)
        assert U8(17) % U8(5) == U8(2)
        assert divmod(U8(17), U8(5)) == (U8(3), U8(2))
        assert U8(2) ** U8(7) == U8(128)
        assert U64(1) >> 0 == U64(1)

    def test_overflow_raises(self):
        with pytest.raises(OverflowError):
            U8(200) + U8(56)
        with pytest.raises(OverflowError):
            U8(3) - U8(4)
        with pytest.raises(OverflowError):
            U64(2 ** 32) * U64(2 ** 32)
        with pytest.raises(OverflowError):
            U8(2) ** U8(8)
        with pytest.raises(OverflowError):
            -I8(-128)

    def test_mixing_with_int(self):
        assert U8(5) + 3 == U8(8)
        assert 3 + U8(5) == U8(8)
        assert 10 - U8(3) == U8(7)
        assert U8(5) == 5
        assert U8(5) < 6

    def test_mixing_widths_rejected(self):
        with pytest.raises(TypeError):
            U8(1) + U16(1)

    def test_result_type_preserved(self):
        assert isinstance(U16(1) + U16(2), U16)
        assert isinstance(U16(1) + 2, U16)

    def test_three_argument_pow(self):
        assert pow(U64(4), U64(13), U64(497)) == U64(445)

    def test_negative_exponent_unsupported(self):
        with pytest.raises(TypeError):
            U8(2) ** -1

    def test_signed_floor_semantics(self):
        assert I8(-7) // I8(2) == I8(-4)
        assert I8(-7) % I8(2) == I8(1)

    def test_hash_and_conversion(self):
        assert hash(U64(42)) == hash(42)
        assert int(I64(-5)) == -5
        assert [10, 20, 30][U8(1)] == 20
        assert not U8(0)
        assert repr(I8(-3)) == "I8(-3)"
        assert str(U8(9)) == "9"


class TestCapabilities:
    """Capability methods used by the generic engines."""

    def test_protocols_recognized(self):
        x = U64(10)
        for protocol in (HasZero, HasOne, Halvable, Signed, EuclideanDivisible,
                         ModularMultiplicative, Bounded):
            assert isinstance(x, protocol)

    def test_identities(self):
        assert U8(7).zero() == U8(0)
        assert U8(7).one() == U8(1)
        assert U8(0).is_zero()
        assert U8(1).is_one()

    def test_halving(self):
        assert U8(10).is_even()
        assert not U8(11).is_even()
        assert U8(11).half() == U8(5)
        assert I8(-7).half() == I8(-4)
        assert U128(2 ** 100).bit_length() == 101

    def test_sign(self):
        assert I8(-5).is_negative()
        assert not U8(5).is_negative()
        assert I8(-5).magnitude() == I8(5)
        with pytest.raises(OverflowError):
            I8(-128).magnitude()
        assert I8(-128).euclid_norm() == 128

    def test_div_alg_euclidean(self):
        assert I8(-7).div_alg(I8(3)) == (I8(-3), I8(2))
        assert I8(7).div_alg(I8(-3)) == (I8(-2), I8(1))
        assert I8(-7).div_alg(I8(-3)) == (I8(3), I8(2))
        assert U8(17).div_alg(U8(5)) == (U8(3), U8(2))

    def test_div_alg_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            U8(5).div_alg(U8(0))

    def test_div_alg_type_mismatch(self):
        with pytest.raises(TypeError, match="cannot divide"):
            U8(5).div_alg(U16(2))

    def test_mul_mod_no_overflow(self):
        m = U64(2 ** 64 - 59)
        a = U64(2 ** 64 - 60)
        # (-1)·(-1) ≡ 1
        assert a.mul_mod(a, m) == U64(1)
        big = U128(2 ** 128 - 1)
        assert big.mul_mod(big, U128(2 ** 127)) == U128(1)
