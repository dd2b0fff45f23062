import math

import pytest

from microkit.angle import Angle, AngleFormat, AngleFormatMode


def test_fields_from_constructor():
    a = Angle(10, 30, 15, 5)
    assert (a.degree, a.minute, a.second, a.tenthousand) == (10, 30, 15, 5)
    assert a.sign == 1


def test_constructor_carries_overflow():
    assert Angle(0, 90) == Angle(1, 30)
    assert Angle(0, 0, 0, 10000) == Angle(0, 0, 1)
    assert Angle(0, 0, 120) == Angle(0, 2)


def test_negative_constructor():
    a = Angle(-10, 30)
    assert a.sign == -1
    assert a.degree == 10
    assert a.minute == 30


def test_zero_is_never_negative():
    assert Angle(0).sign == 1
    assert (-Angle(0)).sign == 1
    assert Angle(-0, 0) == Angle()


def test_float_arguments_rejected():
    with pytest.raises(TypeError):
        Angle(1.5)


@pytest.mark.parametrize("value", [0.0, 1.0, 12.5, 45.123456, -33.75, 179.9999, -0.001])
def test_from_float_round_trip(value):
    assert Angle.from_float(value).to_float() == pytest.approx(value, abs=1e-6)


def test_from_float_matches_constructor():
    assert Angle.from_float(-12.5) == Angle(-12, 30)
    assert Angle.from_float(45.25) == Angle(45, 15)


def test_parse():
    assert Angle.parse("12.5") == Angle(12, 30)
    assert Angle.parse("-12.5") == Angle(-12, 30)
    assert Angle.parse("Lat: 45.25") == Angle(45, 15)
    assert Angle.parse("7") == Angle(7)


def test_parse_agrees_with_from_float():
    for text in ["3.14159", "100.123456789", "0.5"]:
        assert Angle.parse(text).to_float() == pytest.approx(float(text), abs=1e-6)


def test_parse_without_number():
    with pytest.raises(ValueError):
        Angle.parse("north")


def test_str_and_formats():
    a = Angle(10, 30, 15, 5)
    assert str(a) == "10.30'15\"0005"
    assert str(a.format(AngleFormatMode.D)) == "10."
    assert str(a.format(AngleFormatMode.M)) == "10.30'"
    assert str(a.format(AngleFormatMode.T)) == str(a)
    assert str(-a).startswith("-")
    assert isinstance(a.format(2), AngleFormat)


def test_radians():
    assert Angle(180).to_radians() == pytest.approx(math.pi)
    assert Angle.from_radians(math.pi / 2).to_float() == pytest.approx(90.0, abs=1e-6)


@pytest.mark.parametrize(
    "a, b",
    [
        (Angle(10, 30), Angle(20, 45)),
        (Angle(10, 30), Angle(-20, 45)),
        (Angle(-10, 30, 5), Angle(20, 45, 59, 9999)),
        (Angle(-5), Angle(-7, 59)),
        (Angle(1, 0, 0, 1), Angle(0, 59, 59, 9999)),
    ],
)
def test_add_sub_match_float(a, b):
    assert (a + b).to_float() == pytest.approx(a.to_float() + b.to_float(), abs=1e-6)
    assert (a - b).to_float() == pytest.approx(a.to_float() - b.to_float(), abs=1e-6)
    assert a - b == -(b - a)


def test_add_negation_is_zero():
    a = Angle(12, 34, 56, 7890)
    zero = a + (-a)
    assert zero == Angle()
    assert zero.sign == 1


def test_ordering():
    ordered = [Angle(-2), Angle(-1, 30), Angle(-1), Angle(0), Angle(0, 1), Angle(1)]
    assert sorted(reversed(ordered)) == ordered
    assert Angle(-2) < Angle(-1)
    assert Angle(3) >= Angle(3)
    assert Angle(3) <= Angle(3)
    assert Angle(4) > Angle(3, 59)


def test_equality_and_hash():
    assert len({Angle(0, 90), Angle(1, 30)}) == 1
    assert (Angle(1) == 1) is False


def test_scaling():
    a = Angle(10, 15)
    assert (a * 2).to_float() == pytest.approx(a.to_float() * 2, abs=1e-6)
    assert (a / 4).to_float() == pytest.approx(a.to_float() / 4, abs=1e-6)
    assert a / a == pytest.approx(1.0)
    assert float(a) == a.to_float()


def test_ratio_by_zero_angle():
    with pytest.raises(ZeroDivisionError):
        Angle(1) / Angle(0)