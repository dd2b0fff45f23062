import cmath
import math

import pytest

from microkit.complex_math import Complex

SAMPLES = [(0.5, 0.3), (-0.7, 0.2), (0.3, -0.4), (1.2, 0.8)]


def pair(z):
    return (z.real, z.imag)


def test_str_format():
    assert str(Complex(1, -2)) == "1.000 -2.000i"


def test_parts_and_defaults():
    c = Complex(3, 4)
    assert (c.real, c.imag) == (3.0, 4.0)
    assert Complex() == Complex(0, 0)


def test_equality_and_hash():
    assert Complex(1, 2) == Complex(1.0, 2.0)
    assert not (Complex(1, 2) == Complex(2, 1))
    assert hash(Complex(1, 2)) == hash(Complex(1.0, 2.0))


def test_polar_round_trip():
    c = Complex.from_polar(2.5, 0.7)
    assert c.modulus() == pytest.approx(2.5)
    assert c.phase() == pytest.approx(0.7)


def test_modulus_and_phase_match_reference():
    c = Complex(3, 4)
    assert c.modulus() == pytest.approx(abs(3 + 4j))
    assert c.phase() == pytest.approx(cmath.phase(3 + 4j))


def test_conjugate():
    c = Complex(1.5, -2.5)
    assert c.conjugate() == Complex(1.5, 2.5)
    assert c.conjugate().conjugate() == c


@pytest.mark.parametrize("re, im", SAMPLES)
def test_reciprocal_times_self_is_one(re, im):
    c = Complex(re, im)
    product = c.reciprocal() * c
    assert pair(product) == pytest.approx((1.0, 0.0), abs=1e-9)


def test_reciprocal_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Complex(0, 0).reciprocal()


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Complex(1, 1) / Complex(0, 0)


@pytest.mark.parametrize("a_parts", SAMPLES)
@pytest.mark.parametrize("b_parts", SAMPLES)
def test_arithmetic_matches_reference(a_parts, b_parts):
    a, b = Complex(*a_parts), Complex(*b_parts)
    za, zb = complex(*a_parts), complex(*b_parts)
    assert pair(a + b) == pytest.approx(pair(za + zb), abs=1e-9)
    assert pair(a - b) == pytest.approx(pair(za - zb), abs=1e-9)
    assert pair(a * b) == pytest.approx(pair(za * zb), abs=1e-9)
    assert pair(a / b) == pytest.approx(pair(za / zb), abs=1e-9)


def test_mixing_with_real_numbers():
    c = Complex(1, 2)
    assert c + 1 == Complex(2, 2)
    assert 1 + c == Complex(2, 2)
    assert c * 2 == Complex(2, 4)
    assert pair(1 / c) == pytest.approx(pair(c.reciprocal()), abs=1e-9)


def test_negation():
    assert -Complex(1, -2) == Complex(-1, 2)


@pytest.mark.parametrize("re, im", SAMPLES)
def test_elementary_functions_match_reference(re, im):
    c = Complex(re, im)
    z = complex(re, im)
    assert pair(c.sqr()) == pytest.approx(pair(z * z), abs=1e-9)
    assert pair(c.sqrt()) == pytest.approx(pair(cmath.sqrt(z)), abs=1e-9)
    assert pair(c.exp()) == pytest.approx(pair(cmath.exp(z)), abs=1e-9)
    assert pair(c.log()) == pytest.approx(pair(cmath.log(z)), abs=1e-9)
    assert pair(c.log10()) == pytest.approx(pair(cmath.log10(z)), abs=1e-9)
    assert pair(c.logn(2)) == pytest.approx(pair(cmath.log(z, 2)), abs=1e-9)


def test_pow_matches_reference():
    a, b = Complex(2, 0.5), Complex(1.5, -0.3)
    expected = complex(2, 0.5) ** complex(1.5, -0.3)
    assert pair(a.pow(b)) == pytest.approx(pair(expected), abs=1e-9)


def test_log_of_zero_raises():
    with pytest.raises(ValueError):
        Complex(0, 0).log()


@pytest.mark.parametrize("re, im", SAMPLES)
def test_trig_functions_match_reference(re, im):
    c = Complex(re, im)
    z = complex(re, im)
    assert pair(c.sin()) == pytest.approx(pair(cmath.sin(z)), abs=1e-9)
    assert pair(c.cos()) == pytest.approx(pair(cmath.cos(z)), abs=1e-9)
    assert pair(c.tan()) == pytest.approx(pair(cmath.tan(z)), abs=1e-9)
    assert pair(c.csc()) == pytest.approx(pair(1 / cmath.sin(z)), abs=1e-9)
    assert pair(c.sec()) == pytest.approx(pair(1 / cmath.cos(z)), abs=1e-9)
    assert pair(c.cot()) == pytest.approx(pair(1 / cmath.tan(z)), abs=1e-9)


@pytest.mark.parametrize("re, im", SAMPLES)
def test_hyperbolic_functions_match_reference(re, im):
    c = Complex(re, im)
    z = complex(re, im)
    assert pair(c.sinh()) == pytest.approx(pair(cmath.sinh(z)), abs=1e-9)
    assert pair(c.cosh()) == pytest.approx(pair(cmath.cosh(z)), abs=1e-9)
    assert pair(c.tanh()) == pytest.approx(pair(cmath.tanh(z)), abs=1e-9)
    assert pair(c.csch()) == pytest.approx(pair(1 / cmath.sinh(z)), abs=1e-9)
    assert pair(c.sech()) == pytest.approx(pair(1 / cmath.cosh(z)), abs=1e-9)
    assert pair(c.coth()) == pytest.approx(pair(1 / cmath.tanh(z)), abs=1e-9)


@pytest.mark.parametrize("re, im", SAMPLES)
def test_inverse_trig_round_trips(re, im):
    c = Complex(re, im)
    expected = (re, im)
    assert pair(c.asin().sin()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.acos().cos()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.atan().tan()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.acsc().csc()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.asec().sec()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.acot().cot()) == pytest.approx(expected, abs=1e-8)


@pytest.mark.parametrize("re, im", SAMPLES)
def test_inverse_hyperbolic_round_trips(re, im):
    c = Complex(re, im)
    expected = (re, im)
    assert pair(c.asinh().sinh()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.acosh().cosh()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.atanh().tanh()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.acsch().csch()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.asech().sech()) == pytest.approx(expected, abs=1e-8)
    assert pair(c.acoth().coth()) == pytest.approx(expected, abs=1e-8)


def test_asin_of_real_matches_math():
    result = Complex(0.5, 0).asin()
    assert pair(result) == pytest.approx((math.asin(0.5), 0.0), abs=1e-9)