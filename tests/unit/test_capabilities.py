"""
Tests for Capability Contracts

Checked invariants:
1. Builtin numbers satisfy the contracts through structural fallbacks
2. A protocol implementation wins over the fallback
3. Missing capabilities raise TypeError; bounded overflow raises OverflowError
4. div_alg is Euclidean for builtin ints
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from src.core.algebra import U8, U16
from src.core.algebra.capabilities import (
    bit_length,
    div_alg,
    embed,
    euclid_norm,
    half,
    inverse,
    is_even,
    is_negative,
    is_one,
    is_zero,
    magnitude,
    mul_mod,
    one,
    try_embed,
    zero,
)


class Opaque:
    """No numeric capability at all."""


class Nat:
    """Peano-style natural with Halvable/HasZero but no bit_length."""

    def __init__(self, value: int):
        self.value = value

    def zero(self) -> "Nat":
        return Nat(0)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_even(self) -> bool:
        return self.value % 2 == 0

    def half(self) -> "Nat":
        return Nat(self.value // 2)


class TestIdentities:
    """zero / one / is_zero / is_one."""

    def test_builtins(self):
        assert zero(5) == 0
        assert one(5) == 1
        assert zero(Fraction(3, 4)) == Fraction(0)
        assert one(Decimal("2.5")) == Decimal(1)
        assert zero(2.5) == 0.0
        assert one(1 + 2j) == 1

    def test_protocol_wins(self):
        assert isinstance(zero(U8(7)), U8)
        assert is_zero(Nat(0))
        assert not is_zero(Nat(3))

    def test_missing_capability(self):
        with pytest.raises(TypeError, match="HasZero"):
            zero("ab")
        with pytest.raises(TypeError, match="HasOne"):
            one([1, 2])
        with pytest.raises(TypeError, match="HasZero"):
            zero(Opaque())
        with pytest.raises(TypeError, match="HasOne"):
            one(Opaque())

    def test_predicates_lenient(self):
        """Types without a zero are never zero."""
        assert not is_zero(Opaque())
        assert not is_one(Opaque())
        assert not is_zero("0")
        assert not is_one(b"\x00")
        assert not is_zero([])
        assert is_zero(0)
        assert is_one(Fraction(2, 2))
        assert not is_one(2)


class TestEmbedding:
    """Literal conversion into an operand's type."""

    def test_embed_builtin(self):
        assert embed(2, Fraction(1, 3)) == Fraction(2)
        assert embed(3, 7) == 3

    def test_embed_bounded(self):
        assert embed(200, U8(1)) == U8(200)
        assert try_embed(300, U8(1)) is None
        with pytest.raises(OverflowError, match="out of range for U8"):
            embed(300, U8(1))

    def test_embed_unsupported(self):
        assert try_embed(1, Opaque()) is None
        assert try_embed(0, "ab") is None
        with pytest.raises(TypeError, match="cannot be built"):
            embed(1, Opaque())


class TestNaturals:
    """Parity, halving and bit length."""

    def test_parity_and_half(self):
        assert is_even(10)
        assert not is_even(7)
        assert half(7) == 3
        assert half(-7) == -4

    def test_bit_length_native(self):
        assert bit_length(255) == 8
        assert bit_length(U16(256)) == 9
        assert bit_length(0) == 0

    def test_bit_length_by_halving(self):
        assert bit_length(Nat(255)) == 8
        assert bit_length(Nat(256)) == 9
        assert bit_length(Nat(0)) == 0


class TestSigned:
    def test_builtins(self):
        assert is_negative(-3)
        assert not is_negative(0)
        assert is_negative(Fraction(-1, 2))
        assert magnitude(-3) == 3
        assert magnitude(Decimal("-1.5")) == Decimal("1.5")

    def test_inverse(self):
        assert inverse(Fraction(2, 3)) == Fraction(3, 2)
        assert inverse(4.0) == 0.25


class TestEuclideanDivision:
    """a == q·b + r with 0 <= r < |b|."""

    def test_signs(self):
        assert div_alg(7, 3) == (2, 1)
        assert div_alg(-7, 3) == (-3, 2)
        assert div_alg(7, -3) == (-2, 1)
        assert div_alg(-7, -3) == (3, 2)

    def test_decimal_remainder_non_negative(self):
        """Decimal % truncates toward zero; div_alg stays Euclidean."""
        assert div_alg(Decimal(-7), Decimal(3)) == (Decimal(-3), Decimal(2))
        assert div_alg(Decimal(7), Decimal(-3)) == (Decimal(-2), Decimal(1))
        assert div_alg(Decimal(-7), Decimal(-3)) == (Decimal(3), Decimal(2))
        for a in range(-20, 21):
            for b in (-6, -1, 4):
                q, r = div_alg(Decimal(a), Decimal(b))
                assert q * b + r == a
                assert 0 <= r < abs(b)

    def test_reconstruction(self):
        for a in range(-30, 31):
            for b in (-7, -2, -1, 1, 3, 8):
                q, r = div_alg(a, b)
                assert q * b + r == a
                assert 0 <= r < abs(b)

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            div_alg(5, 0)

    def test_norm(self):
        assert euclid_norm(-9) == 9
        assert euclid_norm(U8(9)) == 9

    def test_mul_mod(self):
        assert mul_mod(7, 8, 5) == 1
        assert mul_mod(U8(200), U8(200), U8(251)) == U8(40000 % 251)
