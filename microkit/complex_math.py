"""Complex numbers with elementary, trigonometric and hyperbolic functions."""

from __future__ import annotations

import math
import numbers


class Complex:
    """An immutable complex number re + im*i."""

    __slots__ = ("_re", "_im")

    def __init__(self, re=0.0, im=0.0):
        self._re = float(re)
        self._im = float(im)

    @classmethod
    def from_polar(cls, modulus, phase) -> Complex:
        return cls(modulus * math.cos(phase), modulus * math.sin(phase))

    @property
    def real(self) -> float:
        return self._re

    @property
    def imag(self) -> float:
        return self._im

    def __str__(self) -> str:
        return f"{self._re:.3f} {self._im:.3f}i"

    def __repr__(self) -> str:
        return f"Complex({self._re!r}, {self._im!r})"

    def phase(self) -> float:
        return math.atan2(self._im, self._re)

    def modulus(self) -> float:
        return math.hypot(self._re, self._im)

    def conjugate(self) -> Complex:
        """The number mirrored in the real axis."""
        return Complex(self._re, -self._im)

    def reciprocal(self) -> Complex:
        f = 1.0 / (self._re * self._re + self._im * self._im)
        return Complex(self._re * f, -self._im * f)

    @staticmethod
    def _coerce(other):
        if isinstance(other, Complex):
            return other
        if isinstance(other, numbers.Real):
            return Complex(other, 0.0)
        if isinstance(other, numbers.Complex):
            return Complex(other.real, other.imag)
        return None

    def __eq__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self._re == other._re and self._im == other._im

    def __hash__(self) -> int:
        return hash((self._re, self._im))

    def __neg__(self) -> Complex:
        return Complex(-self._re, -self._im)

    def __add__(self, other):
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Complex(self._re + c._re, self._im + c._im)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Complex(self._re - c._re, self._im - c._im)

    def __rsub__(self, other):
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return c - self

    def __mul__(self, other):
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Complex(
            self._re * c._re - self._im * c._im,
            self._re * c._im + self._im * c._re,
        )

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        f = 1.0 / (c._re * c._re + c._im * c._im)
        return Complex(
            (self._re * c._re + self._im * c._im) * f,
            (self._im * c._re - self._re * c._im) * f,
        )

    def __rtruediv__(self, other):
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return c / self

    # powers and logarithms

    def sqr(self) -> Complex:
        return Complex(self._re * self._re - self._im * self._im, 2 * self._re * self._im)

    def sqrt(self) -> Complex:
        m = self.modulus()
        r = math.sqrt(max(0.0, 0.5 * (m + self._re)))
        i = math.sqrt(max(0.0, 0.5 * (m - self._re)))
        if self._im < 0:
            i = -i
        return Complex(r, i)

    def exp(self) -> Complex:
        e = math.exp(self._re)
        return Complex(e * math.cos(self._im), e * math.sin(self._im))

    def log(self) -> Complex:
        """Principal natural logarithm; raises ValueError for zero."""
        return Complex(math.log(self.modulus()), self.phase())

    def pow(self, other) -> Complex:
        return (self.log() * other).exp()

    def logn(self, base) -> Complex:
        return self.log() / Complex._coerce(base).log()

    def log10(self) -> Complex:
        return self.logn(10)

    # trigonometric functions

    def sin(self) -> Complex:
        return Complex(
            math.sin(self._re) * math.cosh(self._im),
            math.cos(self._re) * math.sinh(self._im),
        )

    def cos(self) -> Complex:
        return Complex(
            math.cos(self._re) * math.cosh(self._im),
            -math.sin(self._re) * math.sinh(self._im),
        )

    def tan(self) -> Complex:
        return self.sin() / self.cos()

    def _inverse_circular(self, cosine: bool) -> Complex:
        c = (_ONE - self.sqr()).sqrt()
        if cosine:
            c = self + c * Complex(0, -1)
        else:
            c = c + self * Complex(0, -1)
        return c.log() * Complex(0, 1)

    def asin(self) -> Complex:
        return self._inverse_circular(False)

    def acos(self) -> Complex:
        return self._inverse_circular(True)

    def atan(self) -> Complex:
        ratio = Complex(self._re, self._im - 1) / Complex(-self._re, -self._im - 1)
        return (Complex(0, -1) * ratio.log()) * 0.5

    def csc(self) -> Complex:
        return _ONE / self.sin()

    def sec(self) -> Complex:
        return _ONE / self.cos()

    def cot(self) -> Complex:
        return _ONE / self.tan()

    def acsc(self) -> Complex:
        return (_ONE / self).asin()

    def asec(self) -> Complex:
        return (_ONE / self).acos()

    def acot(self) -> Complex:
        return (_ONE / self).atan()

    # hyperbolic functions

    def sinh(self) -> Complex:
        return Complex(
            math.cos(self._im) * math.sinh(self._re),
            math.sin(self._im) * math.cosh(self._re),
        )

    def cosh(self) -> Complex:
        return Complex(
            math.cos(self._im) * math.cosh(self._re),
            math.sin(self._im) * math.sinh(self._re),
        )

    def tanh(self) -> Complex:
        return self.sinh() / self.cosh()

    def _inverse_hyperbolic(self, cosine: bool) -> Complex:
        c = self.sqr()
        c = c - 1 if cosine else c + 1
        return (self + c.sqrt()).log()

    def asinh(self) -> Complex:
        return self._inverse_hyperbolic(False)

    def acosh(self) -> Complex:
        return self._inverse_hyperbolic(True)

    def atanh(self) -> Complex:
        c = (self + _ONE).log()
        c = c - (-(self - _ONE)).log()
        return c * 0.5

    def csch(self) -> Complex:
        return _ONE / self.sinh()

    def sech(self) -> Complex:
        return _ONE / self.cosh()

    def coth(self) -> Complex:
        return _ONE / self.tanh()

    def acsch(self) -> Complex:
        return (_ONE / self).asinh()

    def asech(self) -> Complex:
        return (_ONE / self).acosh()

    def acoth(self) -> Complex:
        return (_ONE / self).atanh()


_ONE = Complex(1, 0)