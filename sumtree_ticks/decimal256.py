"""Unsigned fixed-point decimal with 18 fractional digits and a 256-bit range."""

from __future__ import annotations

import re
from dataclasses import dataclass

DECIMAL_PLACES = 18
DECIMAL_FRACTIONAL = 10**DECIMAL_PLACES
UINT256_MAX = 2**256 - 1

_DECIMAL_PATTERN = re.compile(r"(\d+)(?:\.(\d+))?")


class DecimalOverflowError(ArithmeticError):
    """Raised when a decimal operation leaves the representable range."""


def _checked(atomics: int, operation: str) -> int:
    if atomics < 0:
        raise DecimalOverflowError(f"{operation} underflowed below zero")
    if atomics > UINT256_MAX:
        raise DecimalOverflowError(f"{operation} overflowed the 256-bit range")
    return atomics


@dataclass(frozen=True, order=True)
class Decimal256:
    """A non-negative decimal stored as an integer count of 10**-18 units."""

    atomics: int

    def __post_init__(self) -> None:
        if isinstance(self.atomics, bool) or not isinstance(self.atomics, int):
            raise TypeError("atomics must be an integer")
        _checked(self.atomics, "construction")

    @classmethod
    def zero(cls) -> Decimal256:
        return cls(0)

    @classmethod
    def one(cls) -> Decimal256:
        return cls(DECIMAL_FRACTIONAL)

    @classmethod
    def max(cls) -> Decimal256:
        return cls(UINT256_MAX)

    @classmethod
    def percent(cls, value: int) -> Decimal256:
        return cls.from_ratio(value, 100)

    @classmethod
    def from_ratio(cls, numerator: int, denominator: int) -> Decimal256:
        """Return numerator / denominator, truncated to 18 decimal places."""
        if numerator < 0 or denominator < 0:
            raise ValueError("ratio terms must be non-negative")
        if denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")
        return cls(_checked(numerator * DECIMAL_FRACTIONAL // denominator, "from_ratio"))

    @classmethod
    def parse(cls, text: str) -> Decimal256:
        """Parse a plain decimal string such as ``"0.85"`` or ``"50000"``."""
        match = _DECIMAL_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid decimal: {text!r}")
        whole, fraction = match.group(1), match.group(2) or ""
        if len(fraction) > DECIMAL_PLACES:
            raise ValueError(f"more than {DECIMAL_PLACES} fractional digits: {text!r}")
        atomics = int(whole) * DECIMAL_FRACTIONAL
        if fraction:
            atomics += int(fraction.ljust(DECIMAL_PLACES, "0"))
        return cls(_checked(atomics, "parse"))

    def to_uint_floor(self) -> int:
        return self.atomics // DECIMAL_FRACTIONAL

    def to_uint_ceil(self) -> int:
        return -(-self.atomics // DECIMAL_FRACTIONAL)

    def is_zero(self) -> bool:
        return self.atomics == 0

    def __add__(self, other: object) -> Decimal256:
        if not isinstance(other, Decimal256):
            return NotImplemented
        return Decimal256(_checked(self.atomics + other.atomics, "addition"))

    def __sub__(self, other: object) -> Decimal256:
        if not isinstance(other, Decimal256):
            return NotImplemented
        return Decimal256(_checked(self.atomics - other.atomics, "subtraction"))

    def __mul__(self, other: object) -> Decimal256:
        if not isinstance(other, Decimal256):
            return NotImplemented
        product = self.atomics * other.atomics // DECIMAL_FRACTIONAL
        return Decimal256(_checked(product, "multiplication"))

    def __truediv__(self, other: object) -> Decimal256:
        if not isinstance(other, Decimal256):
            return NotImplemented
        if other.is_zero():
            raise ZeroDivisionError("division by a zero decimal")
        quotient = self.atomics * DECIMAL_FRACTIONAL // other.atomics
        return Decimal256(_checked(quotient, "division"))

    def __str__(self) -> str:
        whole, fraction = divmod(self.atomics, DECIMAL_FRACTIONAL)
        if fraction == 0:
            return str(whole)
        digits = str(fraction).rjust(DECIMAL_PLACES, "0").rstrip("0")
        return f"{whole}.{digits}"