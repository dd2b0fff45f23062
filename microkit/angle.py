"""Angles held as degrees, minutes, seconds and ten-thousandths of a second."""

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from enum import IntEnum


class AngleFormatMode(IntEnum):
    """How many fields of an angle are rendered, from degrees to ten-thousandths."""

    D = 1
    M = 2
    S = 3
    T = 4


@dataclass(frozen=True)
class AngleFormat:
    """An angle bound to a rendering mode; str() renders it."""

    angle: Angle
    mode: AngleFormatMode

    def __str__(self) -> str:
        return self.angle._render(self.mode)


class Angle:
    """A signed angle with whole degrees, minutes, seconds and 1/10000 seconds."""

    __slots__ = ("_neg", "_d", "_m", "_s", "_t")

    def __init__(self, degrees=0, minutes=0, seconds=0, tenthousands=0):
        values = [operator.index(v) for v in (degrees, minutes, seconds, tenthousands)]
        neg = any(v < 0 for v in values)
        d, m, s, t = (abs(v) for v in values)
        carry, t = divmod(t, 10000)
        s += carry
        carry, s = divmod(s, 60)
        m += carry
        carry, m = divmod(m, 60)
        d += carry
        if d == 0 and m == 0 and s == 0 and t == 0:
            neg = False
        self._set(neg, d, m, s, t)

    def _set(self, neg, d, m, s, t):
        self._neg = neg
        self._d = d
        self._m = m
        self._s = s
        self._t = t

    @classmethod
    def _make(cls, neg, d, m, s, t) -> Angle:
        obj = cls.__new__(cls)
        obj._set(neg, d, m, s, t)
        return obj

    @classmethod
    def _normalized(cls, neg, d, m, s, t) -> Angle:
        carry, t = divmod(t, 10000)
        s += carry
        carry, s = divmod(s, 60)
        m += carry
        carry, m = divmod(m, 60)
        d += carry
        if d < 0:
            if t != 0:
                t = 10000 - t
                s += 1
            if s != 0:
                s = (60 - s) % 60
                m += 1
            if m != 0:
                m = (60 - m) % 60
                d += 1
            d = -d
            neg = not neg
        if d == 0 and m == 0 and s == 0 and t == 0:
            neg = False
        return cls._make(neg, d, m, s, t)

    @classmethod
    def from_float(cls, value) -> Angle:
        """Build an angle from decimal degrees."""
        neg = value < 0
        a = -value if neg else float(value)
        d = int(a)
        a -= d
        a *= 256
        p = int(math.floor(a * 140625.0 + 0.5))
        t = p % 10000
        p //= 10000
        return cls._make(neg, d, p // 60, p % 60, t)

    @classmethod
    def parse(cls, text: str) -> Angle:
        """Parse decimal degrees from text, skipping any leading non-numeric characters."""
        pos = 0
        while pos < len(text) and not text[pos].isdigit() and text[pos] != "-":
            pos += 1
        if pos == len(text):
            raise ValueError(f"no angle found in {text!r}")
        neg = False
        if text[pos] == "-":
            neg = True
            pos += 1
        if pos < len(text) and text[pos] == "+":
            pos += 1
        d = 0
        while pos < len(text) and text[pos].isdigit():
            d = d * 10 + int(text[pos])
            pos += 1
        fraction = ""
        if pos < len(text):
            pos += 1
            while pos < len(text) and text[pos].isdigit() and len(fraction) < 9:
                fraction += text[pos]
                pos += 1
        yy = int(fraction.ljust(9, "0"))
        yy = yy * 4 // 125
        yy = yy + (yy + 4) // 8
        t = yy % 10000
        yy //= 10000
        return cls._make(neg, d, yy // 60, yy % 60, t)

    @classmethod
    def from_radians(cls, radians) -> Angle:
        """Build an angle from radians."""
        return cls.from_float(radians * 180.0 / math.pi)

    @property
    def sign(self) -> int:
        return -1 if self._neg else 1

    @property
    def degree(self) -> int:
        return self._d

    @property
    def minute(self) -> int:
        return self._m

    @property
    def second(self) -> int:
        return self._s

    @property
    def tenthousand(self) -> int:
        return self._t

    def to_float(self) -> float:
        """Return the angle in decimal degrees."""
        v = self._t + self._s * 10000 + self._m * 600000
        val = ((1.0 / 140625.0) / 256) * v + self._d
        return -val if self._neg else val

    def to_radians(self) -> float:
        return self.to_float() * math.pi / 180.0

    def format(self, mode) -> AngleFormat:
        return AngleFormat(self, AngleFormatMode(mode))

    def _render(self, mode: AngleFormatMode) -> str:
        parts = ["-" if self._neg else "", str(self._d), "."]
        if mode >= AngleFormatMode.M:
            parts += [f"{self._m:02d}", "'"]
        if mode >= AngleFormatMode.S:
            parts += [f"{self._s:02d}", '"']
        if mode >= AngleFormatMode.T:
            parts.append(f"{self._t:04d}")
        return "".join(parts)

    def __str__(self) -> str:
        return self._render(AngleFormatMode.T)

    def __repr__(self) -> str:
        return f"Angle({str(self)!r})"

    def __float__(self) -> float:
        return self.to_float()

    def _compare(self, other: Angle) -> int:
        if self._neg != other._neg:
            return -1 if self._neg else 1
        mine = (self._d, self._m, self._s, self._t)
        theirs = (other._d, other._m, other._s, other._t)
        rv = (mine > theirs) - (mine < theirs)
        return -rv if self._neg else rv

    def __eq__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self._neg, self._d, self._m, self._s, self._t))

    def __neg__(self) -> Angle:
        zero = self._d == 0 and self._m == 0 and self._s == 0 and self._t == 0
        return Angle._make(False if zero else not self._neg, self._d, self._m, self._s, self._t)

    def _combine(self, other: Angle, sign: int) -> Angle:
        return Angle._normalized(
            self._neg,
            self._d + sign * other._d,
            self._m + sign * other._m,
            self._s + sign * other._s,
            self._t + sign * other._t,
        )

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._combine(other, 1 if self._neg == other._neg else -1)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._combine(other, -1 if self._neg == other._neg else 1)

    def __mul__(self, factor):
        if isinstance(factor, Angle) or not isinstance(factor, numbers.Real):
            return NotImplemented
        return Angle.from_float(self.to_float() * factor)

    def __truediv__(self, other):
        if isinstance(other, Angle):
            return self.to_float() / other.to_float()
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Angle.from_float(self.to_float() / other)