"""
Algebraic capability contracts and machine integer types.
"""

from src.core.algebra.capabilities import (
    Bounded,
    EuclideanDivisible,
    Halvable,
    HasOne,
    HasZero,
    Invertible,
    ModularMultiplicative,
    RingEmbedding,
    Signed,
    SupportsBitLength,
    SupportsNativePower,
    SupportsNativeScaling,
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
from src.core.algebra.machine import (
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    FixedWidthInt,
)

__all__ = [
    # Protocols
    "HasZero",
    "HasOne",
    "Halvable",
    "SupportsBitLength",
    "Signed",
    "Invertible",
    "EuclideanDivisible",
    "ModularMultiplicative",
    "Bounded",
    "SupportsNativePower",
    "SupportsNativeScaling",
    "RingEmbedding",
    # Helpers
    "zero",
    "one",
    "is_zero",
    "is_one",
    "is_even",
    "half",
    "bit_length",
    "is_negative",
    "magnitude",
    "inverse",
    "euclid_norm",
    "div_alg",
    "mul_mod",
    "embed",
    "try_embed",
    # Machine integers
    "FixedWidthInt",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
]
