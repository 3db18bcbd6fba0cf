"""
Capability Contracts — Algebraic Capabilities for Generic Algorithms

Operational meaning of "Natural", "IntegerSubset", "Ring", "Euclidean domain"
for the algorithm layer. Every capability is a runtime-checkable Protocol:
a type opts in by implementing the protocol methods. Builtin numbers
(numbers.Number: int, float, Fraction, Decimal, complex) satisfy the
contracts through the structural fallbacks of the helper functions in this
module, so the engines never need to special-case them. Non-numeric types
(str, list, user classes) must implement HasZero / HasOne to expose their
identities.

Capability → helpers:
- HasZero / HasOne: zero, one, is_zero, is_one
- Halvable: is_even, half, bit_length
- Signed: is_negative, magnitude
- Invertible: inverse
- EuclideanDivisible: euclid_norm, div_alg
- ModularMultiplicative: mul_mod
- Bounded: embed, try_embed (conversion of small machine literals)
- SupportsNativePower / SupportsNativeScaling / RingEmbedding: fast paths
  probed by the exponentiation engine

CRITICAL INVARIANTS:
1. Helpers never mutate their operands (values are rebound, never updated)
2. A protocol implementation always wins over the builtin fallback
3. A missing capability raises TypeError naming the capability
"""

import numbers
from typing import Any, Optional, Protocol, Tuple, runtime_checkable


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class HasZero(Protocol):
    """Additive identity."""

    def zero(self) -> Any:
        ...

    def is_zero(self) -> bool:
        ...


@runtime_checkable
class HasOne(Protocol):
    """Multiplicative identity."""

    def one(self) -> Any:
        ...

    def is_one(self) -> bool:
        ...


@runtime_checkable
class Halvable(Protocol):
    """Parity test and halving (Natural numbers)."""

    def is_even(self) -> bool:
        ...

    def half(self) -> Any:
        ...


@runtime_checkable
class SupportsBitLength(Protocol):
    def bit_length(self) -> int:
        ...


@runtime_checkable
class Signed(Protocol):
    """Sign query and absolute value (IntegerSubset)."""

    def is_negative(self) -> bool:
        ...

    def magnitude(self) -> Any:
        ...


@runtime_checkable
class Invertible(Protocol):
    """Multiplicative inverse (groups under multiplication)."""

    def inv(self) -> Any:
        ...


@runtime_checkable
class EuclideanDivisible(Protocol):
    """
    Division with remainder plus a Euclidean norm.

    div_alg(rhs) must return (q, r) with self == q * rhs + r and
    euclid_norm(r) < euclid_norm(rhs).
    """

    def euclid_norm(self) -> Any:
        ...

    def div_alg(self, rhs: Any) -> Tuple[Any, Any]:
        ...


@runtime_checkable
class ModularMultiplicative(Protocol):
    """(self * rhs) mod modulus without intermediate overflow."""

    def mul_mod(self, rhs: Any, modulus: Any) -> Any:
        ...


@runtime_checkable
class Bounded(Protocol):
    """Types with a finite range; try_from_int returns None when out of range."""

    @classmethod
    def try_from_int(cls, value: int) -> Optional[Any]:
        ...


@runtime_checkable
class SupportsNativePower(Protocol):
    """A type-specific fast exponentiation."""

    def power(self, exponent: Any) -> Any:
        ...


@runtime_checkable
class SupportsNativeScaling(Protocol):
    """A type-specific fast multiplication by an integer."""

    def scale(self, multiplier: Any) -> Any:
        ...


@runtime_checkable
class RingEmbedding(Protocol):
    """Rings constructible from an integer (n -> n * 1)."""

    @classmethod
    def from_integer(cls, value: Any) -> Any:
        ...


# =============================================================================
# LITERAL EMBEDDING
# =============================================================================


def try_embed(value: int, like: Any) -> Optional[Any]:
    """
    Convert a small integer literal into the type of `like`.

    Returns:
        The converted value, or None if the type is bounded and cannot
        represent `value`, or is not a numbers.Number.
    """
    if isinstance(like, Bounded):
        return type(like).try_from_int(value)
    if not isinstance(like, numbers.Number):
        return None

    try:
        return type(like)(value)
    except (TypeError, ValueError, OverflowError):
        return None


def embed(value: int, like: Any) -> Any:
    """
    Convert a small integer literal into the type of `like`.

    Raises:
        OverflowError: If a bounded type cannot represent `value`
        TypeError: If the type cannot be built from an int
    """
    result = try_embed(value, like)
    if result is None:
        if isinstance(like, Bounded):
            raise OverflowError(
                f"{value} is out of range for {type(like).__name__}"
            )
        raise TypeError(
            f"{type(like).__name__} cannot be built from an int literal"
        )
    return result


# =============================================================================
# IDENTITIES
# =============================================================================


def zero(x: Any) -> Any:
    """Additive identity of the type of x."""
    if isinstance(x, HasZero):
        return x.zero()
    result = try_embed(0, x)
    if result is None:
        raise TypeError(f"{type(x).__name__} does not provide HasZero")
    return result


def one(x: Any) -> Any:
    """Multiplicative identity of the type of x."""
    if isinstance(x, HasOne):
        return x.one()
    result = try_embed(1, x)
    if result is None:
        raise TypeError(f"{type(x).__name__} does not provide HasOne")
    return result


def is_zero(x: Any) -> bool:
    """
    True if x is the additive identity.

    Types without any notion of zero are never zero.
    """
    if isinstance(x, HasZero):
        return x.is_zero()
    z = try_embed(0, x)
    return z is not None and x == z


def is_one(x: Any) -> bool:
    if isinstance(x, HasOne):
        return x.is_one()
    u = try_embed(1, x)
    return u is not None and x == u


# =============================================================================
# NATURAL / INTEGER SUBSET
# =============================================================================


def is_even(n: Any) -> bool:
    if isinstance(n, Halvable):
        return n.is_even()
    return n % 2 == 0


def half(n: Any) -> Any:
    """n / 2 rounded toward negative infinity."""
    if isinstance(n, Halvable):
        return n.half()
    return n // 2


def bit_length(n: Any) -> int:
    """
    Number of binary digits of a natural number (0 for zero).

    Counts halvings when the type has no native bit_length, so bounded types
    never overflow here.
    """
    if isinstance(n, SupportsBitLength):
        return n.bit_length()

    count = 0
    while not is_zero(n):
        n = half(n)
        count += 1
    return count


def is_negative(x: Any) -> bool:
    if isinstance(x, Signed):
        return x.is_negative()
    return x < zero(x)


def magnitude(x: Any) -> Any:
    """Absolute value (the canonical associate for ordered rings)."""
    if isinstance(x, Signed):
        return x.magnitude()
    return abs(x)


def inverse(x: Any) -> Any:
    """Multiplicative inverse; one(x) / x for builtin fields."""
    if isinstance(x, Invertible):
        return x.inv()
    return one(x) / x


# =============================================================================
# EUCLIDEAN DIVISION
# =============================================================================


def euclid_norm(x: Any) -> Any:
    if isinstance(x, EuclideanDivisible):
        return x.euclid_norm()
    return abs(x)


def div_alg(a: Any, b: Any) -> Tuple[Any, Any]:
    """
    Euclidean division: a == q * b + r with 0 <= r < |b| for builtins.

    Decimal % truncates toward zero, so a negative remainder is shifted up
    by |b|.

    Raises:
        ZeroDivisionError: If b is zero
    """
    if isinstance(a, EuclideanDivisible):
        return a.div_alg(b)

    if is_zero(b):
        raise ZeroDivisionError("div_alg by zero")

    r = a % abs(b)
    if r < zero(r):
        r = r + abs(b)
    q = (a - r) // b
    return q, r


def mul_mod(x: Any, y: Any, modulus: Any) -> Any:
    """(x * y) mod modulus."""
    if isinstance(x, ModularMultiplicative):
        return x.mul_mod(y, modulus)
    return (x * y) % modulus
