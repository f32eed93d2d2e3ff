"""Checked integer arithmetic for the pricing engine.

Python integers never wrap, so intermediate products of reserves and
amounts are exact. What a uint256 ledger would still reject is division by
zero and a final amount that does not fit in 256 bits; SafeInt raises on
both. Only the operations the constant product formula needs are provided.

    from relayer.safe_int import S

    out = (S(amount) * S(reserve_out) // (S(reserve_in) + S(amount))).to_uint256()
"""

from __future__ import annotations

from relayer.models.types import UINT256_MAX


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""


class DivisionByZero(SafeIntError):
    pass


class Uint256Overflow(SafeIntError):
    """Result is negative or wider than 256 bits."""


class SafeInt:
    """Integer amount with checked division and uint256 conversion."""

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            value = value._value
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + SafeInt(other)._value)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * SafeInt(other)._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Truncating division.

        Raises:
            DivisionByZero: If other is zero
        """
        divisor = SafeInt(other)._value
        if divisor == 0:
            raise DivisionByZero(f"{self._value} // 0")
        return SafeInt(self._value // divisor)

    def to_uint256(self) -> int:
        """Return the plain int once it is known to fit a uint256.

        Raises:
            Uint256Overflow: If the value is negative or above 2^256 - 1
        """
        if not 0 <= self._value <= UINT256_MAX:
            raise Uint256Overflow(f"{self._value} is outside the uint256 range")
        return self._value


S = SafeInt
