"""
Euclidean Algorithm — GCD, Bézout Coefficients & Divisibility

GCD by repeated division with remainder over any type offering
EuclideanDivisible (div_alg + euclid_norm); builtin ints use Euclidean
divmod with a non-negative remainder. The extended form also returns Bézout
coefficients (x, y) with x·lhs + y·rhs == gcd.

Conventions:
- gcd(a, 0) == gcd(0, b) == 0 (not the other operand). This is a deliberate
  convention of this library; textbook gcd(0, b) is b
- Operands are used as given; Euclidean division keeps every remainder in
  [0, |rhs|) for ordered types (Signed, numbers.Real, Decimal), and a
  negative result is replaced by its magnitude, so the gcd is non-negative
  and gcd(a, b) == gcd(b, a). The minimum of a signed machine integer
  (I8(-128)) works as an operand whenever the gcd itself fits
- The operand with the larger Euclidean norm is reduced modulo the smaller;
  the extended form swaps the coefficients back afterwards
- Both algorithms are loops, so stack use does not grow with input width

CRITICAL INVARIANTS:
1. extended_euclidean(a, b) = (x, y, g) with x·a + y·b == g exactly
2. euclidean(a, b) == extended_euclidean(a, b).gcd
3. gcd(a, b) · lcm(a, b) == |a · b| for ordered types
"""

import numbers
from decimal import Decimal
from typing import Any, NamedTuple, Optional, Tuple

from src.core.algebra.capabilities import (
    Signed,
    div_alg,
    euclid_norm,
    is_negative,
    is_zero,
    magnitude,
    one,
    zero,
)


# =============================================================================
# TYPES
# =============================================================================


class BezoutResult(NamedTuple):
    """x·lhs + y·rhs == gcd."""

    x: Any
    y: Any
    gcd: Any


# =============================================================================
# HELPERS
# =============================================================================


def _is_ordered(value: Any) -> bool:
    return isinstance(value, (Signed, numbers.Real, Decimal))


def _normalize(value: Any) -> Tuple[Any, bool]:
    """
    Canonical associate of value for ordered types.

    Returns:
        (magnitude, was_negative); unordered types are returned unchanged
    """
    if _is_ordered(value) and is_negative(value):
        return magnitude(value), True
    return value, False


def _extended(a: Any, b: Any) -> Tuple[Any, Any, Any]:
    """
    Extended Euclid on oriented operands (norm(a) >= norm(b), b != 0).

    Loop invariant: a == x0·A + y0·B and b == x1·A + y1·B. When the
    remainder vanishes the result is b's coefficients, i.e. (0, 1, b) at the
    base case and (y1, x1 - q·y1, g) one level up.
    """
    x0, x1 = one(a), zero(a)
    y0, y1 = zero(a), one(a)
    while True:
        q, r = div_alg(a, b)
        if is_zero(r):
            return x1, y1, b
        a, b = b, r
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1


# =============================================================================
# GCD / BEZOUT
# =============================================================================


def euclidean(lhs: Any, rhs: Any) -> Any:
    """
    Greatest common divisor via the Euclidean algorithm.

    Args:
        lhs: Euclidean domain element
        rhs: Euclidean domain element

    Returns:
        gcd(lhs, rhs); zero if either operand is zero

    Examples:
        >>> euclidean(240, 46)
        2
        >>> euclidean(-12, 18)
        6
        >>> euclidean(0, 5)
        0
    """
    if is_zero(lhs) or is_zero(rhs):
        return zero(lhs)

    a, b = lhs, rhs
    if euclid_norm(a) < euclid_norm(b):
        a, b = b, a

    while True:
        _, r = div_alg(a, b)
        if is_zero(r):
            result, _ = _normalize(b)
            return result
        a, b = b, r


def extended_euclidean(lhs: Any, rhs: Any) -> BezoutResult:
    """
    GCD together with Bézout coefficients.

    Coefficients are computed in the operand type, so they must be able to go
    negative: unsigned machine integers overflow here, signed ones and ints do
    not. For ordered types the gcd is non-negative; when the last remainder
    comes out negative all three values are negated.

    Args:
        lhs: Euclidean ring element
        rhs: Euclidean ring element

    Returns:
        BezoutResult(x, y, gcd) with x·lhs + y·rhs == gcd;
        (0, 0, 0) if either operand is zero

    Examples:
        >>> extended_euclidean(240, 46)
        BezoutResult(x=-9, y=47, gcd=2)
        >>> extended_euclidean(46, 240)
        BezoutResult(x=47, y=-9, gcd=2)
    """
    if is_zero(lhs) or is_zero(rhs):
        z = zero(lhs)
        return BezoutResult(z, z, z)

    a, b = lhs, rhs
    swapped = euclid_norm(a) < euclid_norm(b)
    if swapped:
        a, b = b, a

    x, y, g = _extended(a, b)

    if swapped:
        x, y = y, x
    if _is_ordered(g) and is_negative(g):
        x, y, g = -x, -y, -g

    return BezoutResult(x, y, g)


def bezout_coefficients(lhs: Any, rhs: Any) -> Tuple[Any, Any]:
    """(x, y) with x·lhs + y·rhs == gcd(lhs, rhs)."""
    x, y, _ = extended_euclidean(lhs, rhs)
    return x, y


def lcm(lhs: Any, rhs: Any) -> Any:
    """
    Least common multiple; zero if either operand is zero.

    Divides before multiplying so bounded types overflow only when the lcm
    itself does not fit.
    """
    if is_zero(lhs) or is_zero(rhs):
        return zero(lhs)

    g = euclidean(lhs, rhs)
    q, _ = div_alg(lhs, g)
    result, _ = _normalize(q * rhs)
    return result


# =============================================================================
# DIVISIBILITY
# =============================================================================


def divides(a: Any, b: Any) -> bool:
    """True if some x satisfies a·x == b."""
    if is_zero(a):
        return is_zero(b)
    _, r = div_alg(b, a)
    return is_zero(r)


def divide(a: Any, b: Any) -> Optional[Any]:
    """
    An x with a·x == b, or None if a does not divide b.

    0·x == 0 holds for every x; zero is returned in that case.
    """
    if is_zero(a):
        return zero(b) if is_zero(b) else None
    q, r = div_alg(b, a)
    if is_zero(r):
        return q
    return None


def is_unit(x: Any) -> bool:
    """True if x has a multiplicative inverse in its ring."""
    return not is_zero(x) and divides(x, one(x))


def unit_inverse(x: Any) -> Optional[Any]:
    """Multiplicative inverse of a unit, None for non-units."""
    if is_zero(x):
        return None
    return divide(x, one(x))
