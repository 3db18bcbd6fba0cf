"""
Primality — Deterministic Miller–Rabin & Factorization

Deterministic Miller–Rabin over any Natural type (Python int, machine
integers, caller types satisfying the capability contracts).

Algorithm:
1. n <= 1 → False, n == 2 → True, even n → False
2. n - 1 = d·2^s with d odd
3. a witness a proves compositeness unless a^d ≡ 1 or a^(d·2^r) ≡ n - 1
   for some 0 <= r < s (modular exponentiation by repeated squaring)
4. witnesses: the row of the witness table with the smallest threshold
   strictly exceeding n; the first compositeness witness short-circuits
5. past the last threshold: every a in [2, 2·(ln n)²]

CORRECTNESS CAVEAT:
Below the last tabulated threshold (3,317,044,064,679,887,385,961,981) the
answer is unconditionally correct. Above it, the exhaustive small-witness
bound 2·(ln n)² is only proven under the Generalized Riemann Hypothesis: a
false positive there would imply GRH is false. Set
PrimalityConfig.use_fallback=False to refuse such inputs instead.

The fallback bound is computed exactly: ln n < bit_length(n)·ln 2, with ln 2
bounded from above by a rational, so no floating point is involved and the
bound never undercounts.
"""

import logging
from typing import Any, Final, Iterator, Optional, Tuple

from src.core.algebra.capabilities import (
    bit_length,
    div_alg,
    embed,
    half,
    is_even,
    is_negative,
    is_one,
    is_zero,
    magnitude,
    mul_mod,
    one,
    try_embed,
)
from src.core.config import DEFAULT_PRIMALITY_CONFIG, PrimalityConfig
from src.core.domain.witness_table import WitnessTable
from src.core.math.exponentiation import mod_pow

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# ln 2 = 0.693147180559945... ; 0.6931471806 is a strict upper bound
LN2_UPPER_NUMERATOR: Final[int] = 6_931_471_806
LN2_UPPER_DENOMINATOR: Final[int] = 10_000_000_000


# =============================================================================
# BUILDING BLOCKS
# =============================================================================


def decompose(n: Any) -> Tuple[Any, int]:
    """
    Write n - 1 as d·2^s with d odd.

    Args:
        n: Odd natural number > 2

    Returns:
        (d, s)

    Raises:
        ValueError: If n is not odd or n <= 2

    Examples:
        >>> decompose(561)
        (35, 4)
    """
    if n <= one(n) or is_even(n):
        raise ValueError(f"decompose requires an odd n > 2, got {n!r}")

    d = n - one(n)
    s = 0
    while is_even(d):
        d = half(d)
        s += 1
    return d, s


def is_strong_probable_prime(
    n: Any, a: Any, d: Optional[Any] = None, s: Optional[int] = None
) -> bool:
    """
    Single Miller–Rabin round: False iff `a` proves n composite.

    Args:
        n: Odd natural number > 2
        a: Witness base, same type as n
        d, s: Precomputed decompose(n); computed when omitted

    Returns:
        True if n is a strong probable prime to base a. A base congruent to
        0 mod n proves nothing and yields True.
    """
    if d is None or s is None:
        d, s = decompose(n)

    _, a = div_alg(a, n)
    if is_zero(a):
        return True

    n_minus_one = n - one(n)
    r = mod_pow(a, d, n)
    if is_one(r) or r == n_minus_one:
        return True

    for _ in range(s - 1):
        r = mul_mod(r, r, n)
        if r == n_minus_one:
            return True
    return False


def select_witnesses(n: Any, table: WitnessTable) -> Optional[Tuple[int, ...]]:
    """
    Witness set of the first row whose threshold strictly exceeds n.

    A threshold that the type of n cannot represent exceeds every n.

    Returns:
        Witness bases, or None if n is past the last threshold
    """
    for bound in table.bounds:
        threshold = try_embed(bound.threshold, n)
        if threshold is None or n < threshold:
            return bound.witnesses
    return None


def fallback_witness_limit(n: Any) -> int:
    """
    Upper bound of the exhaustive witness range: ceil(2·(bits·ln 2)²) >= 2·(ln n)².

    Examples:
        >>> fallback_witness_limit(2 ** 82)
        6620
    """
    bits = bit_length(n)
    numerator = 2 * bits * bits * LN2_UPPER_NUMERATOR * LN2_UPPER_NUMERATOR
    denominator = LN2_UPPER_DENOMINATOR * LN2_UPPER_DENOMINATOR
    return -(-numerator // denominator)


# =============================================================================
# MILLER–RABIN
# =============================================================================


def miller_rabin(n: Any, config: Optional[PrimalityConfig] = None) -> bool:
    """
    Deterministic Miller–Rabin primality test.

    Total over the naturals: every n maps to a bool. See the module docstring
    for the GRH caveat above the last tabulated threshold.

    Args:
        n: Natural number
        config: Witness table and fallback policy (default table if omitted)

    Returns:
        True iff n is prime

    Raises:
        ValueError: If n is past the last threshold and config.use_fallback
            is False

    Examples:
        >>> miller_rabin(91)
        False
        >>> miller_rabin(18446744073709551557)
        True
    """
    config = config or DEFAULT_PRIMALITY_CONFIG

    unit = one(n)
    if n <= unit:
        return False
    if n == embed(2, n):
        return True
    if is_even(n):
        return False

    d, s = decompose(n)

    witnesses = select_witnesses(n, config.witness_table)
    if witnesses is not None:
        return all(
            is_strong_probable_prime(n, embed(w, n), d, s) for w in witnesses
        )

    if not config.use_fallback:
        raise ValueError(
            f"{n} exceeds the last tabulated threshold "
            f"{config.witness_table.last_threshold} and the fallback is disabled"
        )

    limit = fallback_witness_limit(n)
    logger.debug("miller_rabin fallback: n=%s, testing witnesses 2..%d", n, limit)

    n_minus_one = n - unit
    for a in range(2, limit + 1):
        witness = try_embed(a, n)
        if witness is None or witness >= n_minus_one:
            break
        if not is_strong_probable_prime(n, witness, d, s):
            return False
    return True


def is_prime(z: Any, config: Optional[PrimalityConfig] = None) -> bool:
    """
    Primality for signed values: z is prime iff |z| is (-7 is an associate of 7).
    """
    if is_negative(z):
        z = magnitude(z)
    return miller_rabin(z, config)


# =============================================================================
# FACTORIZATION
# =============================================================================


def factors(z: Any) -> Iterator[Any]:
    """
    Prime factors of z in ascending order, with multiplicity.

    Conventions:
        0 yields 0, 1 yields nothing, negative z yields -1 first

    Trial division by 2 and odd candidates; stops as soon as the cofactor
    passes Miller–Rabin or the candidate exceeds its square root.

    Examples:
        >>> list(factors(360))
        [2, 2, 2, 3, 3, 5]
        >>> list(factors(-91))
        [-1, 7, 13]
    """
    if is_zero(z):
        yield z
        return

    if is_negative(z):
        yield -one(z)
        z = magnitude(z)

    two = embed(2, z)
    while is_even(z):
        yield two
        z = half(z)

    candidate = embed(3, z)
    cofactor_changed = True
    while not is_one(z):
        if cofactor_changed and miller_rabin(z):
            yield z
            return
        cofactor_changed = False

        q, r = div_alg(z, candidate)
        if is_zero(r):
            yield candidate
            z = q
            cofactor_changed = True
        elif candidate > q:
            # candidate² > z: the remaining cofactor is prime
            yield z
            return
        else:
            candidate = candidate + two
