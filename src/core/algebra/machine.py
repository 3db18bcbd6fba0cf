"""
Machine Integers — Fixed-Width Naturals and Integers

Checked fixed-width integer types (U8 … U128, I8 … I128) that satisfy the
Natural / IntegerSubset contracts of src.core.algebra.capabilities:
HasZero, HasOne, Halvable, Signed, EuclideanDivisible, ModularMultiplicative,
Bounded and SupportsBitLength.

Arithmetic semantics:
- +, -, *, //, %, ** are checked: a result outside [MIN, MAX] raises
  OverflowError instead of wrapping
- // and % follow Python floor semantics; div_alg is Euclidean (0 <= r < |rhs|)
- mul_mod widens to an unbounded int before reducing, so (a * b) % n never
  overflows even for U128
- Plain ints mix freely with a fixed-width operand; two different widths
  do not mix (TypeError)

CRITICAL INVARIANTS:
1. Values are immutable; every operation returns a new instance
2. MIN <= value <= MAX always holds for a constructed instance
"""

from typing import Any, ClassVar, Optional, Tuple


class FixedWidthInt:
    """
    Base class for checked machine integers.

    Subclasses declare their width with class keywords:

        class U32(FixedWidthInt, bits=32, signed=False): ...
    """

    BITS: ClassVar[int] = 0
    SIGNED: ClassVar[bool] = False
    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    __slots__ = ("_value",)

    def __init_subclass__(cls, bits: int = 0, signed: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if bits <= 0:
            raise ValueError(f"bits must be positive, got {bits}")
        cls.BITS = bits
        cls.SIGNED = signed
        if signed:
            cls.MIN = -(1 << (bits - 1))
            cls.MAX = (1 << (bits - 1)) - 1
        else:
            cls.MIN = 0
            cls.MAX = (1 << bits) - 1

    def __init__(self, value: Any = 0) -> None:
        if isinstance(value, FixedWidthInt):
            value = value._value
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"{type(self).__name__} requires an int, got {type(value).__name__}"
            )
        if not self.MIN <= value <= self.MAX:
            raise OverflowError(
                f"{value} out of range for {type(self).__name__} "
                f"[{self.MIN}, {self.MAX}]"
            )
        self._value = value

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    @classmethod
    def try_from_int(cls, value: int) -> Optional["FixedWidthInt"]:
        if cls.MIN <= value <= cls.MAX:
            return cls(value)
        return None

    def _coerce(self, other: Any) -> Optional[int]:
        if type(other) is type(self):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def _wrap(self, value: int) -> "FixedWidthInt":
        return type(self)(value)

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs

    def __lt__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs

    def __le__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value <= rhs

    def __gt__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value > rhs

    def __ge__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value >= rhs

    # -------------------------------------------------------------------------
    # Checked arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "FixedWidthInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._value + rhs)

    def __radd__(self, other: Any) -> "FixedWidthInt":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "FixedWidthInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._value - rhs)

    def __rsub__(self, other: Any) -> "FixedWidthInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._wrap(lhs - self._value)

    def __mul__(self, other: Any) -> "FixedWidthInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._value * rhs)

    def __rmul__(self, other: Any) -> "FixedWidthInt":
        return self.__mul__(other)

    def __floordiv__(self, other: Any) -> "FixedWidthInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._value // rhs)

    def __rfloordiv__(self, other: Any) -> "FixedWidthInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._wrap(lhs // self._value)

    def __mod__(self, other: Any) -> "FixedWidthInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._value % rhs)

    def __rmod__(self, other: Any) -> "FixedWidthInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._wrap(lhs % self._value)

    def __divmod__(self, other: Any) -> Tuple["FixedWidthInt", "FixedWidthInt"]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        q, r = divmod(self._value, rhs)
        return self._wrap(q), self._wrap(r)

    def __pow__(self, exponent: Any, modulus: Any = None) -> "FixedWidthInt":
        e = self._coerce(exponent)
        if e is None or e < 0:
            return NotImplemented
        if modulus is None:
            return self._wrap(self._value ** e)
        m = self._coerce(modulus)
        if m is None:
            return NotImplemented
        return self._wrap(pow(self._value, e, m))

    def __neg__(self) -> "FixedWidthInt":
        return self._wrap(-self._value)

    def __pos__(self) -> "FixedWidthInt":
        return self

    def __abs__(self) -> "FixedWidthInt":
        return self._wrap(abs(self._value))

    def __rshift__(self, other: Any) -> "FixedWidthInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._value >> rhs)

    # -------------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------------

    def zero(self) -> "FixedWidthInt":
        return type(self)(0)

    def is_zero(self) -> bool:
        return self._value == 0

    def one(self) -> "FixedWidthInt":
        return type(self)(1)

    def is_one(self) -> bool:
        return self._value == 1

    def is_even(self) -> bool:
        return self._value & 1 == 0

    def half(self) -> "FixedWidthInt":
        return self._wrap(self._value >> 1)

    def bit_length(self) -> int:
        return self._value.bit_length()

    def is_negative(self) -> bool:
        return self._value < 0

    def magnitude(self) -> "FixedWidthInt":
        # I8(-128).magnitude() overflows, as abs does in checked arithmetic
        return self._wrap(abs(self._value))

    def euclid_norm(self) -> int:
        return abs(self._value)

    def div_alg(self, rhs: Any) -> Tuple["FixedWidthInt", "FixedWidthInt"]:
        b = self._coerce(rhs)
        if b is None:
            raise TypeError(
                f"cannot divide {type(self).__name__} by {type(rhs).__name__}"
            )
        if b == 0:
            raise ZeroDivisionError("div_alg by zero")
        r = self._value % abs(b)
        q = (self._value - r) // b
        return self._wrap(q), self._wrap(r)

    def mul_mod(self, rhs: Any, modulus: Any) -> "FixedWidthInt":
        b = self._coerce(rhs)
        m = self._coerce(modulus)
        if b is None or m is None:
            raise TypeError(
                f"mul_mod operands must be {type(self).__name__} or int"
            )
        return self._wrap((self._value * b) % m)


# =============================================================================
# CONCRETE WIDTHS
# =============================================================================


class U8(FixedWidthInt, bits=8):
    __slots__ = ()


class U16(FixedWidthInt, bits=16):
    __slots__ = ()


class U32(FixedWidthInt, bits=32):
    __slots__ = ()


class U64(FixedWidthInt, bits=64):
    __slots__ = ()


class U128(FixedWidthInt, bits=128):
    __slots__ = ()


class I8(FixedWidthInt, bits=8, signed=True):
    __slots__ = ()


class I16(FixedWidthInt, bits=16, signed=True):
    __slots__ = ()


class I32(FixedWidthInt, bits=32, signed=True):
    __slots__ = ()


class I64(FixedWidthInt, bits=64, signed=True):
    __slots__ = ()


class I128(FixedWidthInt, bits=128, signed=True):
    __slots__ = ()
