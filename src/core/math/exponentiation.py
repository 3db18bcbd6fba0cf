"""
Exponentiation — Repeated Squaring & Repeated Doubling

Generalized exponentiation over any multiplicative monoid and scalar
multiplication over any additive monoid, in O(log p) applications of the
underlying operation. Both are the same loop, parameterized by the binary
operation:

    b^p       = repeated_squaring(b, p)   (op = *)
    p·b       = repeated_doubling(b, p)   (op = +)
    b^(-p)    = inverse(b^p)              (groups under *)
    (-p)·b    = -(p·b)                    (groups under +)

Dispatch (pow_n, pow_z, mul_n, mul_z) prefers a fast native path when the
operand type provides one, and falls back to the generic loop, which works
for every semigroup:
1. SupportsNativePower.power / SupportsNativeScaling.scale
2. the type's own __pow__ / __mul__ if it accepts the exponent type
3. ring embedding: type(b).from_integer(p) * b (scaling only)
4. the generic loop

CRITICAL INVARIANTS:
1. exp(b, 0) is the identity, except additive-zero to the multiplicative
   zeroth power → UndefinedPowerError (checked before any dispatch)
2. exp(b, p) * exp(b, q) == exp(b, p + q)
3. Operands are never mutated (values are rebound)
"""

import operator
from typing import Any, Callable

from src.core.algebra.capabilities import (
    RingEmbedding,
    SupportsNativePower,
    SupportsNativeScaling,
    div_alg,
    half,
    inverse,
    is_even,
    is_negative,
    is_one,
    is_zero,
    magnitude,
    mul_mod,
    one,
    zero,
)
from src.core.algebra.machine import FixedWidthInt


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UndefinedPowerError(ArithmeticError):
    """
    Additive zero raised to the multiplicative zeroth power.

    0^0 is ambiguous in a ring, so it is treated as a violated precondition of
    the caller, not as a recoverable runtime condition. Callers are not
    expected to catch it; fix the call site instead.
    """
    pass


# =============================================================================
# GENERIC LOOP
# =============================================================================


def _accumulate(b: Any, p: Any, op: Callable[[Any, Any], Any]) -> Any:
    """
    Combine b with itself p times (p >= 1) under op.

    Invariant: result == op(res, b^p) where the accumulator res starts as b
    and p starts as p - 1.
    """
    res = b
    p = p - one(p)
    while not is_zero(p):
        if is_even(p):
            # b^(2k) = (b^2)^k  /  2k·b = k·(2b)
            b = op(b, b)
            p = half(p)
        else:
            # b^(k+1) = b^k · b  /  (k+1)·b = k·b + b
            res = op(res, b)
            p = p - one(p)
    return res


def repeated_squaring(b: Any, p: Any) -> Any:
    """
    b multiplied with itself p times (multiplicative monoid, natural p).

    Args:
        b: Monoid element
        p: Natural exponent

    Returns:
        b^p; one(b) when p == 0

    Raises:
        UndefinedPowerError: If b is zero and p == 0

    Examples:
        >>> repeated_squaring(3, 5)
        243
        >>> repeated_squaring(7, 0)
        1
    """
    if is_zero(p):
        if is_zero(b):
            raise UndefinedPowerError("Attempted to raise 0^0")
        return one(b)
    return _accumulate(b, p, operator.mul)


def repeated_squaring_inv(b: Any, p: Any) -> Any:
    """
    b^p for an integer p (multiplicative group).

    Negative exponents invert the positive power: b^(-p) = (b^p)^(-1).
    """
    if is_negative(p):
        return inverse(repeated_squaring(b, magnitude(p)))
    return repeated_squaring(b, p)


def repeated_doubling(b: Any, p: Any) -> Any:
    """
    b added to itself p times (additive monoid, natural p).

    Scalar multiplication by zero is simply zero(b); there is no 0·0
    irregularity. Non-numeric monoids must provide HasZero for p == 0.

    Examples:
        >>> repeated_doubling(3, 5)
        15
        >>> repeated_doubling("ab", 3)
        'ababab'
    """
    if is_zero(p):
        return zero(b)
    return _accumulate(b, p, operator.add)


def repeated_doubling_neg(b: Any, p: Any) -> Any:
    """p·b for an integer p (additive group); (-p)·b = -(p·b)."""
    if is_negative(p):
        return -repeated_doubling(b, magnitude(p))
    return repeated_doubling(b, p)


# =============================================================================
# DISPATCH (FAST PATH FIRST)
# =============================================================================


def _native(method_name: str, lhs: Any, rhs: Any) -> Any:
    """
    Call the type's own binary operator; NotImplemented if it has none.

    Machine integer operands are handed over as int unless lhs is of the same
    type: builtin numbers only understand int exponents and multipliers.
    """
    method = getattr(type(lhs), method_name, None)
    if method is None:
        return NotImplemented
    if isinstance(rhs, FixedWidthInt) and type(rhs) is not type(lhs):
        rhs = int(rhs)
    return method(lhs, rhs)


def _check_zero_power(b: Any, p: Any) -> None:
    if is_zero(p) and is_zero(b):
        raise UndefinedPowerError("Attempted to raise 0^0")


def pow_n(b: Any, n: Any) -> Any:
    """
    b^n for a natural n, using the fastest available path.

    Raises:
        UndefinedPowerError: If b is zero and n == 0
        ValueError: If n is negative
    """
    if is_negative(n):
        raise ValueError(f"pow_n requires a natural exponent, got {n!r}")
    _check_zero_power(b, n)

    if isinstance(b, SupportsNativePower):
        return b.power(n)

    result = _native("__pow__", b, n)
    if result is not NotImplemented:
        return result

    return repeated_squaring(b, n)


def pow_z(b: Any, n: Any) -> Any:
    """
    b^n for an integer n, using the fastest available path.

    Negative n requires a multiplicative inverse for b. Builtin ints follow
    Python's own rule (2 ** -1 == 0.5) when the native path is taken.

    Raises:
        UndefinedPowerError: If b is zero and n == 0
    """
    _check_zero_power(b, n)

    if isinstance(b, SupportsNativePower):
        return b.power(n)

    result = _native("__pow__", b, n)
    if result is not NotImplemented:
        return result

    return repeated_squaring_inv(b, n)


def _scale_fast(b: Any, n: Any) -> Any:
    if isinstance(b, SupportsNativeScaling):
        return b.scale(n)

    result = _native("__mul__", b, n)
    if result is not NotImplemented:
        return result

    if isinstance(b, RingEmbedding):
        return type(b).from_integer(n) * b

    return NotImplemented


def mul_n(b: Any, n: Any) -> Any:
    """
    n·b for a natural n, using the fastest available path.

    Raises:
        ValueError: If n is negative
    """
    if is_negative(n):
        raise ValueError(f"mul_n requires a natural multiplier, got {n!r}")

    result = _scale_fast(b, n)
    if result is not NotImplemented:
        return result

    return repeated_doubling(b, n)


def mul_z(b: Any, n: Any) -> Any:
    """n·b for an integer n, using the fastest available path."""
    result = _scale_fast(b, n)
    if result is not NotImplemented:
        return result

    return repeated_doubling_neg(b, n)


# =============================================================================
# MODULAR EXPONENTIATION
# =============================================================================


def _has_native_mod_pow(base: Any, exponent: Any, modulus: Any) -> bool:
    """int and machine integers support three-argument pow when all operands share a type."""
    kind = type(base)
    return (
        (kind is int or issubclass(kind, FixedWidthInt))
        and type(exponent) is kind
        and type(modulus) is kind
    )


def mod_pow(base: Any, exponent: Any, modulus: Any) -> Any:
    """
    base^exponent mod modulus by repeated squaring under modular multiplication.

    Intermediate values never exceed modulus^2 (or modulus, for types that
    implement ModularMultiplicative), so bounded types do not overflow.
    Builtin and machine integers of one type use native three-argument pow.

    Args:
        base: Natural base
        exponent: Natural exponent
        modulus: Natural modulus (> 0)

    Returns:
        base^exponent mod modulus; zero when modulus == 1, one when
        exponent == 0

    Raises:
        ValueError: If exponent is negative

    Examples:
        >>> mod_pow(4, 13, 497)
        445
    """
    if is_negative(exponent):
        raise ValueError(f"mod_pow requires a natural exponent, got {exponent!r}")

    if _has_native_mod_pow(base, exponent, modulus):
        return pow(base, exponent, modulus)

    if is_one(modulus):
        return zero(base)
    if is_zero(exponent):
        return one(base)

    _, reduced = div_alg(base, modulus)
    return _accumulate(reduced, exponent, lambda x, y: mul_mod(x, y, modulus))
