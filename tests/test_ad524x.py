from collections import deque

import pytest

from microkit.ad524x import AD524X, AD524XError


class FakeBus:
    def __init__(self, responses=()):
        self.writes = []
        self.responses = deque(responses)

    def write(self, address, data):
        self.writes.append((address, bytes(data)))

    def read(self, address, count):
        return self.responses.popleft()[:count]


def test_power_on_mid_scale():
    pot = AD524X(FakeBus())
    assert pot.read(0) == 127
    assert pot.read(1) == 127


def test_write_rdac0():
    bus = FakeBus()
    pot = AD524X(bus)
    pot.write(0, 100)
    assert bus.writes == [(0x2C, bytes([0x00, 100]))]
    assert pot.read(0) == 100


def test_write_with_outputs():
    bus = FakeBus()
    pot = AD524X(bus, 0x2D)
    pot.write(1, 50, True, False)
    assert bus.writes == [(0x2D, bytes([0x80 | 0x10, 50]))]
    assert pot.o1 is True
    assert pot.o2 is False


def test_set_o2_uses_last_rdac0_value():
    bus = FakeBus()
    pot = AD524X(bus)
    pot.write(0, 42, True, False)
    pot.set_o2(True)
    assert bus.writes[-1] == (0x2C, bytes([0x10 | 0x08, 42]))
    assert pot.o2 is True


def test_zero_all():
    bus = FakeBus()
    pot = AD524X(bus)
    pot.set_o1(True)
    pot.zero_all()
    assert bus.writes[-2:] == [(0x2C, bytes([0x00, 0])), (0x2C, bytes([0x80, 0]))]
    assert pot.o1 is False


def test_mid_scale_reset():
    bus = FakeBus()
    pot = AD524X(bus)
    pot.write(1, 10)
    pot.mid_scale_reset(1)
    assert bus.writes[-1] == (0x2C, bytes([0x40 | 0x80, 127]))
    assert pot.read(1) == 127


def test_invalid_rdac():
    pot = AD524X(FakeBus())
    with pytest.raises(AD524XError):
        pot.write(2, 10)
    with pytest.raises(AD524XError):
        pot.mid_scale_reset(5)


def test_read_back_register():
    pot = AD524X(FakeBus([bytes([0x7F])]))
    assert pot.read_back_register() == 0x7F


def test_read_back_empty():
    with pytest.raises(AD524XError):
        AD524X(FakeBus([b""])).read_back_register()