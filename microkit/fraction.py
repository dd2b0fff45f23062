"""Fractions of integers with a denominator capped at 10000."""

from __future__ import annotations

import math
import operator

_MAX_DENOMINATOR = 10000
_PRECISION = 0.000001
_SMALL = 0.00001


def _gcd(a: int, b: int) -> int:
    while a != 0:
        a, b = b % a, a
    return b


def _round_half_away(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return -magnitude if value < 0 else magnitude


def _approximate(val: float) -> tuple[int, int]:
    """Nearest fraction to val in [0, 1], as (numerator, denominator)."""
    low_n, low_d = 0, 1
    high_n, high_d = 1, 1
    for i in range(100):
        test_low = low_d * val - low_n
        test_high = high_n - high_d * val
        if test_high < _PRECISION * high_d:
            break
        if test_low < _PRECISION * low_d:
            high_n, high_d = low_n, low_d
            break
        if i & 1:
            count = int(test_high / test_low)
            n = (count + 1) * low_n + high_n
            d = (count + 1) * low_d + high_d
            if n > 0x8000 or d > 0x10000:
                break
            high_n, high_d = n - low_n, d - low_d
            low_n, low_d = n, d
        else:
            count = int(test_low / test_high)
            n = low_n + (count + 1) * high_n
            d = low_d + (count + 1) * high_d
            if n > 0x10000 or d > 0x10000:
                break
            low_n, low_d = n - high_n, d - high_d
            high_n, high_d = n, d
    return high_n, high_d


def _simplify(n: int, d: int) -> tuple[int, int]:
    if n == 0:
        return 0, 1
    neg = (n < 0) != (d < 0)
    p, q = abs(n), abs(d)
    x = _gcd(p, q)
    p //= x
    q //= x
    while q > _MAX_DENOMINATOR:
        p = (p + 5) // 10
        q = (q + 5) // 10
        x = _gcd(p, q)
        p //= x
        q //= x
    return (-p if neg else p), q


class Fraction:
    """An immutable fraction kept in lowest terms with a positive denominator."""

    __slots__ = ("_n", "_d")

    def __init__(self, numerator=0, denominator=1):
        n = operator.index(numerator)
        d = operator.index(denominator)
        if d == 0:
            raise ZeroDivisionError("fraction with zero denominator")
        self._n, self._d = _simplify(n, d)

    @classmethod
    def from_float(cls, value) -> Fraction:
        """Approximate a real number by a fraction."""
        f = float(value)
        if abs(f) < _SMALL:
            return cls(0, 1)
        negative = f < 0
        if negative:
            f = -f
        reciprocal = f > 1
        if reciprocal:
            f = 1 / f
        n, d = _simplify(*_approximate(f))
        if reciprocal:
            n, d = d, n
        if negative:
            n = -n
        return cls(n, d)

    @property
    def numerator(self) -> int:
        return self._n

    @property
    def denominator(self) -> int:
        return self._d

    def __str__(self) -> str:
        return f"{self._n}/{self._d}"

    def __repr__(self) -> str:
        return f"Fraction({self._n}, {self._d})"

    def _cross(self, other: Fraction) -> tuple[int, int]:
        return self._n * other._d, self._d * other._n

    def __eq__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        left, right = self._cross(other)
        return left == right

    def __lt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        left, right = self._cross(other)
        return left < right

    def __le__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        left, right = self._cross(other)
        return left <= right

    def __gt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        left, right = self._cross(other)
        return left > right

    def __ge__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        left, right = self._cross(other)
        return left >= right

    def __hash__(self) -> int:
        return hash((self._n, self._d))

    def __neg__(self) -> Fraction:
        return Fraction(-self._n, self._d)

    def __add__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        if self._d == other._d:
            return Fraction(self._n + other._n, self._d)
        return Fraction(self._n * other._d + other._n * self._d, self._d * other._d)

    def __sub__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        if self._d == other._d:
            return Fraction(self._n - other._n, self._d)
        return Fraction(self._n * other._d - other._n * self._d, self._d * other._d)

    def __mul__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(self._n * other._n, self._d * other._d)

    def __truediv__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return Fraction(self._n * other._d, self._d * other._n)

    def __float__(self) -> float:
        return self.to_float()

    def to_float(self) -> float:
        return self._n / self._d

    def is_proper(self) -> bool:
        """True if the absolute value is below one."""
        return abs(self._n) < abs(self._d)

    def to_angle(self) -> float:
        """The fraction seen as a slope, in degrees."""
        return math.degrees(math.atan2(self._n, self._d))

    @staticmethod
    def mediant(a: Fraction, b: Fraction) -> Fraction:
        """A fraction lying between a and b."""
        return Fraction(a._n + b._n, a._d + b._d)

    @staticmethod
    def with_denominator(a: Fraction, denominator: int) -> Fraction:
        """Approximate a by a fraction over the given denominator."""
        denominator = operator.index(denominator)
        if denominator < 1:
            raise ValueError("denominator must be positive")
        n = _round_half_away(a._n * denominator * 1.0 / a._d)
        return Fraction(n, denominator)