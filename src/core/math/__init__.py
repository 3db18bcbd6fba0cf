"""
Core math modules

Generic numeric algorithms over algebraic capabilities: exponentiation,
Euclidean GCD/Bézout, deterministic primality.
"""

# Exponentiation (repeated squaring / doubling)
from src.core.math.exponentiation import (
    UndefinedPowerError,
    mod_pow,
    mul_n,
    mul_z,
    pow_n,
    pow_z,
    repeated_doubling,
    repeated_doubling_neg,
    repeated_squaring,
    repeated_squaring_inv,
)

# Euclidean algorithm
from src.core.math.euclidean import (
    BezoutResult,
    bezout_coefficients,
    divide,
    divides,
    euclidean,
    extended_euclidean,
    is_unit,
    lcm,
    unit_inverse,
)

# Primality (deterministic Miller–Rabin)
from src.core.math.primality import (
    LN2_UPPER_DENOMINATOR,
    LN2_UPPER_NUMERATOR,
    decompose,
    factors,
    fallback_witness_limit,
    is_prime,
    is_strong_probable_prime,
    miller_rabin,
    select_witnesses,
)

__all__ = [
    # Exponentiation — Exceptions
    "UndefinedPowerError",
    # Exponentiation — Generic loops
    "repeated_squaring",
    "repeated_squaring_inv",
    "repeated_doubling",
    "repeated_doubling_neg",
    # Exponentiation — Dispatch
    "pow_n",
    "pow_z",
    "mul_n",
    "mul_z",
    "mod_pow",
    # Euclidean — Types
    "BezoutResult",
    # Euclidean — GCD / Bezout
    "euclidean",
    "extended_euclidean",
    "bezout_coefficients",
    "lcm",
    # Euclidean — Divisibility
    "divides",
    "divide",
    "is_unit",
    "unit_inverse",
    # Primality — Constants
    "LN2_UPPER_NUMERATOR",
    "LN2_UPPER_DENOMINATOR",
    # Primality — Functions
    "decompose",
    "is_strong_probable_prime",
    "select_witnesses",
    "fallback_witness_limit",
    "miller_rabin",
    "is_prime",
    "factors",
]
